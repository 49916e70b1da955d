"""
Top-level detection entry point — public API for the /detect route.

`detect` routes a request to the detector for its content type, or to the
demo generator when demo mode is on:

  text  -> Sapling                       (payload: str)
  image -> Sightengine check             (payload: MediaFile)
  video -> Sightengine submit + poll     (payload: MediaFile)
  audio -> Sightengine audio + feedback  (payload: MediaFile)
  web   -> unsupported in live mode      (payload: URL str)
"""

import asyncio
import logging
from typing import Optional, Union

from genscan.config import settings
from genscan.core.errors import InvalidPayloadError, UnknownContentTypeError
from genscan.detection.audio_detector import detect_audio
from genscan.detection.demo import simulate_detection
from genscan.detection.image_detector import detect_image
from genscan.detection.text_detector import detect_text
from genscan.detection.video_detector import detect_video
from genscan.detection.web_detector import detect_web
from genscan.schemas.detection import ContentType, DetectionResult, MediaFile

logger = logging.getLogger(__name__)

Payload = Union[str, MediaFile, None]


def parse_content_type(content_type: Union[str, ContentType]) -> ContentType:
    try:
        return ContentType(content_type)
    except ValueError:
        raise UnknownContentTypeError(f"Unknown content type: {content_type!r}")


def _require_text(content_type: ContentType, payload: Payload) -> str:
    if not isinstance(payload, str) or not payload.strip():
        raise InvalidPayloadError(f"Non-empty text is required for {content_type.value} detection")
    return payload


def _require_media(content_type: ContentType, payload: Payload) -> MediaFile:
    if not isinstance(payload, MediaFile) or not payload.data:
        raise InvalidPayloadError(f"A file upload is required for {content_type.value} detection")
    return payload


async def detect(
    content_type: Union[str, ContentType],
    payload: Payload = None,
    *,
    demo_mode: Optional[bool] = None,
    cancel_event: Optional[asyncio.Event] = None,
) -> DetectionResult:
    ct = parse_content_type(content_type)
    demo = settings.demo_mode if demo_mode is None else demo_mode

    if demo:
        return await simulate_detection(ct)

    logger.info(f"[DETECT] Live {ct.value} detection")

    if ct == ContentType.TEXT:
        return await detect_text(_require_text(ct, payload))
    if ct == ContentType.WEB:
        return await detect_web(payload)

    media = _require_media(ct, payload)
    if ct == ContentType.IMAGE:
        return await detect_image(media)
    if ct == ContentType.VIDEO:
        return await detect_video(media, cancel_event=cancel_event)
    return await detect_audio(media)
