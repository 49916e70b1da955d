"""
Image detection via Sightengine's `genai` and `deepfake` models.

The generator breakdown (`type.ai_generators`) names the likely model; older
payloads expose `type.ai_generated_<model>` keys instead, and when neither
yields a specific label the echoed media URI or the upload's filename is
scanned for well-known generator names.
"""

import logging

from genscan.detection.assembly import assemble_result
from genscan.detection.evidence import synthesize
from genscan.detection.scoring import normalize_score
from genscan.integrations import sightengine
from genscan.schemas.detection import ContentType, DetectionResult, MediaFile

logger = logging.getLogger(__name__)

ANALYSIS_METHOD = "Proprietary Image Deep Analysis"


async def detect_image(media: MediaFile) -> DetectionResult:
    creds = sightengine.get_credentials()
    data = await sightengine.check_image(media, creds)

    score = normalize_score((data.get("type") or {}).get("ai_generated") or 0.0)
    logger.info(f"[IMAGE] {media.filename}: confidence={score.confidence}")

    return assemble_result(
        ContentType.IMAGE,
        score,
        data,
        analysis_method=ANALYSIS_METHOD,
        patterns=synthesize(ContentType.IMAGE, score.is_ai_generated),
        filename_hint=media.filename,
    )
