"""
Video detection via Sightengine's asynchronous video API.

Flow:
  1. Submit the clip, receive a media id.
  2. Poll the job every `video_poll_interval_sec` until it finishes, fails,
     or `video_poll_max_attempts` is reached (see detection/polling.py).
  3. Average per-frame `ai_generated` scores into one confidence and average
     the per-frame generator breakdowns to name the likely model.
"""

import asyncio
import logging
import math
from functools import partial
from typing import Optional

from genscan.config import settings
from genscan.detection.assembly import NOT_AVAILABLE, assemble_result
from genscan.detection.evidence import synthesize
from genscan.detection.polling import poll_until_finished
from genscan.detection.scoring import mean_frame_score, normalize_score
from genscan.integrations import sightengine
from genscan.schemas.detection import ContentType, DetectionResult, MediaFile

logger = logging.getLogger(__name__)

ANALYSIS_METHOD = "Proprietary Video Sequence Analysis"


def format_processing_time(job: dict) -> str:
    """Provider-side duration (`last_update - started`) in whole seconds."""
    started = job.get("started")
    last_update = job.get("last_update")
    if not started or not last_update:
        return NOT_AVAILABLE
    return f"{int(math.floor(last_update - started + 0.5))}s"


async def detect_video(media: MediaFile, cancel_event: Optional[asyncio.Event] = None) -> DetectionResult:
    creds = sightengine.get_credentials()
    media_id = await sightengine.submit_video(media, creds)

    job = await poll_until_finished(
        media_id,
        partial(sightengine.get_video_job, creds=creds),
        interval=settings.video_poll_interval_sec,
        max_attempts=settings.video_poll_max_attempts,
        provider=sightengine.PROVIDER,
        cancel_event=cancel_event,
    )

    frames = job.get("frames") or []
    if not frames:
        logger.warning(f"[VIDEO] {media_id} finished with no frames, reporting 0%")

    score = normalize_score(mean_frame_score(frames))
    logger.info(f"[VIDEO] {media_id}: frames={len(frames)} confidence={score.confidence}")

    return assemble_result(
        ContentType.VIDEO,
        score,
        {"frames": frames},
        analysis_method=ANALYSIS_METHOD,
        patterns=synthesize(ContentType.VIDEO, score.is_ai_generated),
        processing_time=format_processing_time(job),
        frames_analyzed=len(frames),
    )
