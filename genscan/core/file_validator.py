"""
Upload validation and log sanitization utilities.

Checks run before any provider call so oversized or mislabelled uploads are
rejected without spending provider quota.
"""

import os
import re
import logging

from fastapi import HTTPException

from genscan.config import settings
from genscan.schemas.detection import ContentType

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = ('.jpg', '.jpeg', '.png', '.webp', '.gif', '.heic', '.heif', '.tiff', '.tif', '.bmp')
VIDEO_EXTENSIONS = ('.mp4', '.mov', '.avi', '.mkv', '.webm')
AUDIO_EXTENSIONS = ('.mp3', '.wav', '.m4a', '.aac', '.ogg', '.flac', '.opus', '.webm')


def _limits(content_type: ContentType) -> tuple:
    if content_type == ContentType.IMAGE:
        return IMAGE_EXTENSIONS, settings.max_image_upload_bytes
    if content_type == ContentType.VIDEO:
        return VIDEO_EXTENSIONS, settings.max_video_upload_bytes
    if content_type == ContentType.AUDIO:
        return AUDIO_EXTENSIONS, settings.max_audio_upload_bytes
    raise HTTPException(status_code=400, detail=f"{content_type.value} detection does not accept file uploads.")


def validate_file(content_type: ContentType, filename: str, filesize: int) -> bool:
    """Check the extension and size of an upload against its content type."""
    extensions, max_bytes = _limits(content_type)
    ext = os.path.splitext(filename)[1].lower()

    if ext not in extensions:
        raise HTTPException(status_code=415, detail=f"Unsupported {content_type.value} format.")

    if filesize > max_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"{content_type.value.capitalize()} too large. Max {max_bytes // 1024 // 1024}MB allowed."
        )

    return True


def validate_text(text: str) -> bool:
    if len(text) > settings.max_text_chars:
        raise HTTPException(
            status_code=413,
            detail=f"Text too long. Max {settings.max_text_chars} characters allowed."
        )
    return True


def sanitize_log_message(message: str) -> str:
    """Strip credentials that providers echo back in query strings or URLs."""
    msg = re.sub(r'(api_secret|api_user|key)=[^&\s]+', r'\1=[REDACTED]', message)
    msg = re.sub(r'\/[^\s]+\/tmp[a-zA-Z0-9_]+', '[TEMP_FILE]', msg)
    return msg
