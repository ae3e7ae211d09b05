"""Normalization of transcription responses into plain text."""

from typing import Annotated, Any, Union

from pydantic import BaseModel, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError


class TopLevelTranscript(BaseModel):
    """Response carrying the text at the top level."""

    text: str


class TranscriptSegment(BaseModel):
    text: str | None = None


class SegmentedTranscript(BaseModel):
    """Response carrying the text nested under a result list."""

    data: list[TranscriptSegment]


TranscriptPayload = Annotated[
    Union[TopLevelTranscript, SegmentedTranscript],
    Field(union_mode="left_to_right"),
]

_payload_adapter = TypeAdapter(TranscriptPayload)


def normalize_transcript(payload: Any) -> str:
    """
    Extracts the transcript text from a provider response.

    The top-level ``text`` field wins; otherwise the first entry of the
    ``data`` list is used. Any other shape yields an empty string.
    """
    try:
        shape = _payload_adapter.validate_python(payload)
    except PydanticValidationError:
        return ""

    if isinstance(shape, TopLevelTranscript):
        return shape.text
    if shape.data and shape.data[0].text is not None:
        return shape.data[0].text
    return ""
