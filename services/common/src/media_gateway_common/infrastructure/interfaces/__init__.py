from media_gateway_common.infrastructure.interfaces.storage import ArtifactStore

__all__ = ["ArtifactStore"]
