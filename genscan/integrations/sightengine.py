"""
Sightengine client — image, video and audio AI-generation checks.

Endpoints used:
  POST /1.0/check.json          image, synchronous
  POST /1.0/video/check.json    video submission, returns `media.id`
  GET  /1.0/video/byid.json     video job status + per-frame results
  POST /1.0/audio/check.json    audio, synchronous
  POST /1.0/feedback.json       classification feedback (best effort)

Every call raises ProviderError on a non-200 status. Payload-level failure
checks that differ per endpoint live next to the call that needs them.
"""

import logging
from typing import NamedTuple

import aiohttp

from genscan.config import settings
from genscan.core.errors import ConfigurationError, ProviderError
from genscan.integrations import http_client as http_module
from genscan.schemas.detection import MediaFile

logger = logging.getLogger(__name__)

PROVIDER = "Sightengine"


class SightengineCredentials(NamedTuple):
    api_user: str
    api_secret: str


def get_credentials() -> SightengineCredentials:
    user = settings.sightengine_api_user
    secret = settings.sightengine_api_secret
    if not user or not secret:
        raise ConfigurationError(
            "Sightengine credentials not configured. "
            "Set SIGHTENGINE_API_USER and SIGHTENGINE_API_SECRET in .env"
        )
    return SightengineCredentials(user, secret)


def _error_message(data: dict, default: str) -> str:
    return ((data.get("error") or {}).get("message")) or default


def _media_form(field: str, media: MediaFile, creds: SightengineCredentials, **fields: str) -> aiohttp.FormData:
    form = aiohttp.FormData()
    form.add_field(field, media.data, filename=media.filename, content_type=media.mime_type)
    for name, value in fields.items():
        form.add_field(name, value)
    form.add_field("api_user", creds.api_user)
    form.add_field("api_secret", creds.api_secret)
    return form


async def _post_form(path: str, form: aiohttp.FormData, label: str) -> dict:
    url = f"{settings.sightengine_base_url}{path}"
    async with http_module.request_session() as sess:
        async with sess.post(url, data=form) as response:
            if response.status != 200:
                logger.error(f"[SIGHTENGINE] {label} error: {response.status}")
                raise ProviderError(PROVIDER, f"{label} error: {response.status}", status=response.status)
            return await response.json()


async def check_image(media: MediaFile, creds: SightengineCredentials) -> dict:
    form = _media_form("media", media, creds, models="genai,deepfake", opt_generators="on")
    data = await _post_form("/1.0/check.json", form, "Sightengine API")
    if data.get("status") == "failure":
        raise ProviderError(PROVIDER, f"Sightengine image check failed: {_error_message(data, 'Unknown error')}")
    return data


async def submit_video(media: MediaFile, creds: SightengineCredentials) -> str:
    """Submits a video for asynchronous analysis and returns the media id."""
    form = _media_form("media", media, creds, models="genai", opt_generators="on")
    data = await _post_form("/1.0/video/check.json", form, "Sightengine Video API")

    if data.get("status") != "success":
        raise ProviderError(PROVIDER, f"Sightengine submission failed: {_error_message(data, 'Unknown error')}")

    media_id = (data.get("media") or {}).get("id")
    if not media_id:
        raise ProviderError(PROVIDER, "Sightengine failed to return a media ID")

    logger.info(f"[SIGHTENGINE] Video submitted, media_id={media_id}")
    return media_id


async def get_video_job(media_id: str, creds: SightengineCredentials) -> dict:
    """Returns the `output.data` block of a video job: status, frames, timestamps."""
    url = f"{settings.sightengine_base_url}/1.0/video/byid.json"
    params = {"id": media_id, "api_user": creds.api_user, "api_secret": creds.api_secret}
    async with http_module.request_session() as sess:
        async with sess.get(url, params=params) as response:
            if response.status != 200:
                logger.error(f"[SIGHTENGINE] Polling error: {response.status}")
                raise ProviderError(PROVIDER, f"Sightengine polling error: {response.status}", status=response.status)
            data = await response.json()
    return (data.get("output") or {}).get("data") or {}


async def check_audio(media: MediaFile, creds: SightengineCredentials) -> dict:
    form = _media_form("audio", media, creds, models="genai")
    data = await _post_form("/1.0/audio/check.json", form, "Sightengine Audio API")
    if data.get("status") != "success":
        raise ProviderError(PROVIDER, f"Sightengine audio check failed: {_error_message(data, 'Unknown error')}")
    return data


async def send_feedback(
    media: MediaFile,
    creds: SightengineCredentials,
    classification: str,
    model: str = "genai",
) -> dict:
    form = _media_form("audio", media, creds, model=model, **{"class": classification})
    return await _post_form("/1.0/feedback.json", form, "Sightengine Feedback API")
