"""Handler turning uploaded audio into normalized transcript text."""

from media_gateway_common import setup_logging

from domain import AudioUpload, TranscriptionResult, normalize_transcript
from exceptions import PayloadTooLargeError, ValidationError
from infrastructure.interfaces import TranscriptionService
from utils import ephemeral_file

logger = setup_logging()


class TranscriptionPipeline:
    """Orchestrates staging, transcription and cleanup of one audio upload."""

    def __init__(
        self,
        transcription_service: TranscriptionService,
        language: str,
        tmp_dir: str,
        max_upload_bytes: int,
    ):
        self._transcription_service = transcription_service
        self._language = language
        self._tmp_dir = tmp_dir
        self._max_upload_bytes = max_upload_bytes

    async def run(self, upload: AudioUpload | None) -> TranscriptionResult:
        """
        Transcribes an uploaded audio buffer.

        The audio is staged in an ephemeral file for the provider SDK; the
        file is removed whether or not transcription succeeds.

        Args:
            upload: The uploaded audio, or None when no file was sent.

        Returns:
            TranscriptionResult with the extracted text.

        Raises:
            ValidationError: If no audio or an empty file was provided.
            PayloadTooLargeError: If the audio exceeds the size limit.
            UpstreamError: If the transcription provider fails.
        """
        if upload is None or not upload.data:
            raise ValidationError("No audio file provided")
        if len(upload.data) > self._max_upload_bytes:
            raise PayloadTooLargeError(self._max_upload_bytes)

        logger.info(
            "Processing audio",
            extra={"file_name": upload.filename, "size": len(upload.data)},
        )

        async with ephemeral_file(self._tmp_dir, upload.filename, upload.data) as path:
            payload = await self._transcription_service.transcribe(path, self._language)

        result = TranscriptionResult(text=normalize_transcript(payload))

        logger.info(
            "Audio transcribed",
            extra={"file_name": upload.filename, "text_length": len(result.text)},
        )
        return result
