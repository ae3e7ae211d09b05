"""Audio transcription endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from dependencies import ContextDep, get_transcription_pipeline
from domain import AudioUpload
from handlers import TranscriptionPipeline
from response_models import TranscriptionResponse

router = APIRouter(tags=["transcription"])

PipelineDep = Annotated[TranscriptionPipeline, Depends(get_transcription_pipeline)]


@router.post("/transcribe", response_model=TranscriptionResponse)
async def transcribe(
    pipeline: PipelineDep,
    context: ContextDep,
    audio: Annotated[UploadFile | None, File()] = None,
) -> TranscriptionResponse:
    """
    Transcribes the audio sent in the multipart field ``audio``.

    At most one byte over the size limit is read so oversized uploads are
    rejected without buffering them whole.
    """
    upload = None
    if audio is not None:
        limit = context.config.transcription.max_upload_bytes
        data = await audio.read(limit + 1)
        upload = AudioUpload(data=data, filename=audio.filename)

    result = await pipeline.run(upload)
    return TranscriptionResponse(text=result.text)
