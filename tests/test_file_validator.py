"""
Pure unit tests for genscan/core/file_validator.py.
"""

import pytest
from fastapi import HTTPException

from genscan.config import settings
from genscan.core.file_validator import sanitize_log_message, validate_file, validate_text
from genscan.schemas.detection import ContentType


# ---------------------------------------------------------------------------
# Extension + size checks
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "content_type,filename",
    [
        (ContentType.IMAGE, "photo.JPG"),
        (ContentType.IMAGE, "render.webp"),
        (ContentType.VIDEO, "clip.mp4"),
        (ContentType.AUDIO, "voice.wav"),
        (ContentType.AUDIO, "memo.webm"),
    ],
)
def test_valid_extension_and_size(content_type, filename):
    assert validate_file(content_type, filename, 100) is True


def test_image_too_large_raises_413():
    oversized = settings.max_image_upload_bytes + 1
    with pytest.raises(HTTPException) as exc:
        validate_file(ContentType.IMAGE, "photo.jpg", oversized)
    assert exc.value.status_code == 413


def test_video_too_large_raises_413():
    oversized = settings.max_video_upload_bytes + 1
    with pytest.raises(HTTPException) as exc:
        validate_file(ContentType.VIDEO, "clip.mp4", oversized)
    assert exc.value.status_code == 413


def test_audio_at_limit_passes():
    assert validate_file(ContentType.AUDIO, "voice.mp3", settings.max_audio_upload_bytes) is True


def test_unsupported_extension_raises_415():
    with pytest.raises(HTTPException) as exc:
        validate_file(ContentType.IMAGE, "malware.exe", 100)
    assert exc.value.status_code == 415


def test_extension_checked_against_content_type():
    with pytest.raises(HTTPException) as exc:
        validate_file(ContentType.AUDIO, "clip.mp4", 100)
    assert exc.value.status_code == 415


def test_text_type_does_not_accept_uploads():
    with pytest.raises(HTTPException) as exc:
        validate_file(ContentType.TEXT, "notes.txt", 100)
    assert exc.value.status_code == 400


# ---------------------------------------------------------------------------
# Text length
# ---------------------------------------------------------------------------


def test_text_within_limit(monkeypatch):
    monkeypatch.setattr(settings, "max_text_chars", 10)
    assert validate_text("x" * 10) is True


def test_text_over_limit_raises_413(monkeypatch):
    monkeypatch.setattr(settings, "max_text_chars", 10)
    with pytest.raises(HTTPException) as exc:
        validate_text("x" * 11)
    assert exc.value.status_code == 413


# ---------------------------------------------------------------------------
# sanitize_log_message
# ---------------------------------------------------------------------------


def test_sanitize_log_message_strips_temp_path():
    msg = "Processing /tmp/tmpABCDEF/uploaded_file.jpg successfully"
    sanitized = sanitize_log_message(msg)
    assert "/tmp/tmpABCDEF" not in sanitized


def test_sanitize_log_message_redacts_credentials():
    msg = "GET /1.0/video/byid.json?id=med_1&api_user=1234&api_secret=s3cr3t failed"
    sanitized = sanitize_log_message(msg)
    assert "1234" not in sanitized
    assert "s3cr3t" not in sanitized
    assert "id=med_1" in sanitized


def test_sanitize_log_message_keeps_non_path_content():
    msg = "No issues found"
    assert sanitize_log_message(msg) == msg
