"""
Builds the unified DetectionResult from a normalized score and raw payload.

This is the single place where the resolver is consulted, and only for
AI-generated content, so `detected_model` is set exactly when
`is_ai_generated` is true on every detector path.
"""

from typing import List, Optional

from genscan.config import settings
from genscan.detection.resolver import ModelNameResolver, model_resolver
from genscan.detection.scoring import NormalizedScore
from genscan.detection.vocabulary import VOCABULARIES
from genscan.schemas.detection import AnalysisDetails, ContentType, DetectedModel, DetectionResult

NOT_AVAILABLE = "N/A"


def assemble_result(
    content_type: ContentType,
    score: NormalizedScore,
    payload: dict,
    *,
    analysis_method: str,
    patterns: List[str],
    processing_time: str = NOT_AVAILABLE,
    frames_analyzed: Optional[int] = None,
    filename_hint: Optional[str] = None,
    resolver: ModelNameResolver = model_resolver,
) -> DetectionResult:
    detected_model = None
    if score.is_ai_generated:
        match = resolver.match(content_type, payload, filename_hint, score.confidence)
        detected_model = DetectedModel(
            name=match.name,
            provider=settings.model_provider_label,
            description=VOCABULARIES[content_type].description,
            confidence=match.confidence if match.confidence is not None else score.confidence,
        )

    return DetectionResult(
        is_ai_generated=score.is_ai_generated,
        confidence=score.confidence,
        verdict=score.verdict,
        detected_model=detected_model,
        content_type=content_type,
        details=AnalysisDetails(
            analysis_method=analysis_method,
            processing_time=processing_time,
            patterns=patterns,
            frames_analyzed=frames_analyzed,
        ),
    )
