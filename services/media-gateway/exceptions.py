"""Custom exceptions for the media-gateway service."""

from media_gateway_common import GatewayError


class ValidationError(GatewayError):
    """Raised when a required input is missing or empty."""

    status_code = 400


class PayloadTooLargeError(ValidationError):
    """Raised when an uploaded payload exceeds the configured limit."""

    status_code = 413

    def __init__(self, size_limit: int):
        self.size_limit = size_limit
        super().__init__(f"File exceeds the maximum size of {size_limit} bytes")


class UpstreamError(GatewayError):
    """Raised when an upstream service returns a non-success response."""

    def __init__(self, status_code: int, message: str, service: str):
        self.status_code = status_code
        self.service = service
        super().__init__(message)


class InternalError(GatewayError):
    """Raised for unexpected failures such as malformed upstream payloads."""

    status_code = 500


class ServiceNotConfiguredError(GatewayError):
    """Raised when an endpoint's backing service has no credentials."""

    status_code = 503

    def __init__(self, service: str):
        self.service = service
        super().__init__(f"{service} is not configured")


class ConfigurationError(Exception):
    """Raised at startup when required configuration is missing."""
