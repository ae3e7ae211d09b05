"""Conversion of raised errors into JSON error responses."""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from media_gateway_common import GatewayError, setup_logging

logger = setup_logging()


def register_error_handlers(app: FastAPI) -> None:
    """Registers exception handlers so no failure escapes as a crash."""

    @app.exception_handler(GatewayError)
    async def handle_gateway_error(request: Request, exc: GatewayError) -> JSONResponse:
        logger.warning(
            "Request failed",
            extra={
                "path": request.url.path,
                "status_code": exc.status_code,
                "error": exc.message,
                "error_type": type(exc).__name__,
            },
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message, **exc.context},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("Invalid request", extra={"path": request.url.path})
        return JSONResponse(
            status_code=400,
            content={
                "error": "Invalid request",
                "detail": jsonable_encoder(
                    [
                        {"loc": e["loc"], "msg": e["msg"], "type": e["type"]}
                        for e in exc.errors()
                    ]
                ),
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return JSONResponse(status_code=500, content={"error": str(exc)})
