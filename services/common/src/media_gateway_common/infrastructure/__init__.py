from media_gateway_common.infrastructure.interfaces import ArtifactStore

__all__ = ["ArtifactStore"]
