"""
Reading uploaded algae images into memory.

Images are never written to disk or sent anywhere except inline in the
Gemini request; this module only turns an UploadFile into an
ImageAttachment for the form collector.
"""

import logging
import mimetypes
from typing import Optional

from fastapi import UploadFile

from algae_advisor.schemas.cultivation import ImageAttachment

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "algae-image"


def resolve_mime_type(filename: str, content_type: Optional[str] = None) -> str:
    """
    Pick the MIME type for an upload.

    The browser-provided content type wins; otherwise it is inferred from
    the filename, and finally defaults to application/octet-stream (which
    the form collector rejects as a non-image).
    """
    if content_type and content_type != "application/octet-stream":
        return content_type

    guessed, _ = mimetypes.guess_type(filename)
    return guessed or "application/octet-stream"


async def read_image_upload(upload: UploadFile) -> ImageAttachment:
    """
    Read an uploaded file fully into memory.

    Size and type checks are left to CultivationForm.select_image so that
    every way of attaching an image goes through the same rules.
    """
    filename = upload.filename or DEFAULT_FILENAME
    data = await upload.read()
    mime_type = resolve_mime_type(filename, upload.content_type)

    logger.debug(f"Read upload: filename={filename}, size={len(data)} bytes, mime={mime_type}")

    return ImageAttachment(filename=filename, mime_type=mime_type, data=data)
