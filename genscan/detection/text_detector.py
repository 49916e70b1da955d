"""Text detection via Sapling AI."""

import logging

from genscan.detection.assembly import assemble_result
from genscan.detection.evidence import flagged_sentences, synthesize
from genscan.detection.scoring import normalize_score
from genscan.integrations import sapling
from genscan.schemas.detection import ContentType, DetectionResult

logger = logging.getLogger(__name__)

ANALYSIS_METHOD = "Proprietary Deep Analysis"


async def detect_text(text: str) -> DetectionResult:
    api_key = sapling.get_api_key()
    data = await sapling.detect_text(text, api_key)

    score = normalize_score(data.get("score") or 0.0)
    evidence = flagged_sentences(data.get("sentence_scores"))
    logger.info(f"[TEXT] confidence={score.confidence} flagged_sentences={len(evidence)}")

    return assemble_result(
        ContentType.TEXT,
        score,
        data,
        analysis_method=ANALYSIS_METHOD,
        patterns=synthesize(ContentType.TEXT, score.is_ai_generated, evidence),
    )
