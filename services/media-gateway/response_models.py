"""Response models for the media-gateway API."""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    ok: bool = True


class TranscriptionResponse(BaseModel):
    """Response returned after a successful transcription."""

    text: str


class SaveArtifactResponse(BaseModel):
    """Response returned after an artifact is persisted."""

    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    storage_path: str = Field(alias="storagePath")
    bucket: str
