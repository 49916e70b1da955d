"""
Audio detection via Sightengine's `genai` audio model.

After the result is built, a background task reports the opposite class to
Sightengine's feedback endpoint. That task has its own failure channel: it
logs and swallows every error, and the caller never awaits it, so it cannot
change or delay the detection result. In-flight tasks are tracked in
`feedback_tasks` and drained on shutdown.
"""

import asyncio
import logging
from typing import Set

from genscan.config import settings
from genscan.detection.assembly import assemble_result
from genscan.detection.evidence import synthesize
from genscan.detection.scoring import normalize_score
from genscan.integrations import sightengine
from genscan.schemas.detection import ContentType, DetectionResult, MediaFile

logger = logging.getLogger(__name__)

ANALYSIS_METHOD = "Proprietary Audio Deep Analysis"

CLASS_AI = "ai"
CLASS_NOT_AI = "not-ai"

feedback_tasks: Set[asyncio.Task] = set()


async def send_feedback_safely(
    media: MediaFile,
    creds: sightengine.SightengineCredentials,
    classification: str,
) -> None:
    try:
        response = await sightengine.send_feedback(media, creds, classification)
        logger.info(f"[FEEDBACK] Sightengine audio feedback response: {response}")
    except Exception as e:
        logger.error(f"[FEEDBACK] Sightengine audio feedback error: {e}")


def dispatch_feedback(
    media: MediaFile,
    creds: sightengine.SightengineCredentials,
    is_ai_generated: bool,
) -> asyncio.Task:
    classification = CLASS_NOT_AI if is_ai_generated else CLASS_AI
    task = asyncio.create_task(send_feedback_safely(media, creds, classification))
    feedback_tasks.add(task)
    task.add_done_callback(feedback_tasks.discard)
    return task


async def drain_feedback_tasks() -> None:
    if feedback_tasks:
        logger.info(f"[SHUTDOWN] Waiting for {len(feedback_tasks)} feedback task(s)")
        await asyncio.gather(*list(feedback_tasks), return_exceptions=True)


async def detect_audio(media: MediaFile) -> DetectionResult:
    creds = sightengine.get_credentials()
    data = await sightengine.check_audio(media, creds)

    score = normalize_score((data.get("type") or {}).get("ai_generated") or 0.0)
    logger.info(f"[AUDIO] {media.filename}: confidence={score.confidence}")

    result = assemble_result(
        ContentType.AUDIO,
        score,
        data,
        analysis_method=ANALYSIS_METHOD,
        patterns=synthesize(ContentType.AUDIO, score.is_ai_generated),
    )

    if settings.audio_feedback_enabled:
        dispatch_feedback(media, creds, score.is_ai_generated)

    return result
