"""Scoped ephemeral files for SDKs that expect a path on disk."""

import os
import time
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator

import aiofiles
import aiofiles.os
from media_gateway_common import setup_logging

logger = setup_logging()

DEFAULT_AUDIO_FILENAME = "audio.wav"
MAX_HINT_BYTES = 100
MAX_EXTENSION_BYTES = 16


def _truncate_utf8(text: str, max_bytes: int) -> str:
    return text.encode("utf-8")[: max(0, max_bytes)].decode("utf-8", errors="ignore")


def _safe_base_name(filename_hint: str | None) -> str:
    base_name = os.path.basename(filename_hint or "")
    base_name = "".join(c for c in base_name if c.isprintable())
    if base_name in ("", ".", ".."):
        return DEFAULT_AUDIO_FILENAME

    stem, extension = os.path.splitext(base_name)
    extension = _truncate_utf8(extension, MAX_EXTENSION_BYTES)
    stem = _truncate_utf8(stem, MAX_HINT_BYTES - len(extension.encode("utf-8")))
    return (stem + extension) or DEFAULT_AUDIO_FILENAME


def ephemeral_filename(filename_hint: str | None) -> str:
    """
    Derives a unique file name from a client-supplied name.

    Only the base name of the hint is kept, without control characters and
    clamped to MAX_HINT_BYTES with its extension preserved. It is prefixed
    with a nanosecond timestamp and a random suffix so concurrent uploads
    of the same file do not share a path.
    """
    return f"{time.time_ns()}-{uuid.uuid4().hex[:8]}-{_safe_base_name(filename_hint)}"


@asynccontextmanager
async def ephemeral_file(
    directory: str, filename_hint: str | None, data: bytes
) -> AsyncIterator[str]:
    """
    Writes ``data`` to a uniquely named file and yields its path.

    The file is removed on every exit path. A failed removal is logged and
    never replaces the exception raised inside the block.
    """
    await aiofiles.os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, ephemeral_filename(filename_hint))

    try:
        async with aiofiles.open(path, "wb") as f:
            await f.write(data)
        logger.info(
            "Ephemeral file written", extra={"path": path, "size": len(data)}
        )
        yield path
    finally:
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            pass
        except (OSError, ValueError):
            logger.warning(
                "Ephemeral file cleanup failed", extra={"path": path}, exc_info=True
            )
