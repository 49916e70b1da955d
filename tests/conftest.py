"""
Shared pytest fixtures for all test modules.

Provider credentials and demo mode are pinned through the environment before
the app is imported so a developer's local .env cannot leak into tests.
Real provider calls never happen — the aiohttp session is always mocked.
"""

import os

os.environ["DEMO_MODE"] = "false"
os.environ["SAPLING_API_KEY"] = ""
os.environ["SIGHTENGINE_API_USER"] = ""
os.environ["SIGHTENGINE_API_SECRET"] = ""

import pytest
from fastapi.testclient import TestClient

from genscan.config import settings
from genscan.schemas.detection import MediaFile

# App import happens AFTER the environment is pinned above.
from genscan.main import app  # noqa: E402


# ---------------------------------------------------------------------------
# Core infrastructure fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def client():
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def sapling_key(monkeypatch):
    monkeypatch.setattr(settings, "sapling_api_key", "sapling-test-key")
    return "sapling-test-key"


@pytest.fixture
def sightengine_creds(monkeypatch):
    monkeypatch.setattr(settings, "sightengine_api_user", "se-user")
    monkeypatch.setattr(settings, "sightengine_api_secret", "se-secret")
    from genscan.integrations.sightengine import SightengineCredentials

    return SightengineCredentials("se-user", "se-secret")


@pytest.fixture
def fast_polling(monkeypatch):
    """No real delay between video status polls."""
    monkeypatch.setattr(settings, "video_poll_interval_sec", 0)


# ---------------------------------------------------------------------------
# Shared test-data helpers
# ---------------------------------------------------------------------------


def make_media(filename: str = "photo.jpg", mime_type: str = "image/jpeg") -> MediaFile:
    return MediaFile(filename, b"\xff\xd8\xff\xe0fake-bytes", mime_type)


@pytest.fixture
def image_file() -> MediaFile:
    return make_media()


@pytest.fixture
def video_file() -> MediaFile:
    return make_media("clip.mp4", "video/mp4")


@pytest.fixture
def audio_file() -> MediaFile:
    return make_media("voice.mp3", "audio/mpeg")
