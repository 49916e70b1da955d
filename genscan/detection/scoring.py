"""
Score normalization — provider 0..1 floats to the 0..100 result scale.

Two thresholds are applied and they are deliberately different:
  - AI_DECISION_THRESHOLD (50) decides `is_ai_generated`.
  - VERDICT_AI_THRESHOLD (60) / VERDICT_MIXED_THRESHOLD (30) decide `verdict`.
A 55% result is therefore AI-generated with a "mixed" verdict.
"""

import math
from typing import Iterable, NamedTuple

from genscan.schemas.detection import Verdict

AI_DECISION_THRESHOLD = 50
VERDICT_AI_THRESHOLD = 60
VERDICT_MIXED_THRESHOLD = 30


class NormalizedScore(NamedTuple):
    confidence: int
    is_ai_generated: bool
    verdict: Verdict


def to_percent(raw_score: float) -> int:
    """Round half-up to an integer percentage, clamped to 0..100."""
    percent = int(math.floor(raw_score * 100 + 0.5))
    return max(0, min(100, percent))


def verdict_for(confidence: int) -> Verdict:
    if confidence >= VERDICT_AI_THRESHOLD:
        return Verdict.AI
    if confidence >= VERDICT_MIXED_THRESHOLD:
        return Verdict.MIXED
    return Verdict.HUMAN


def normalize_score(raw_score: float) -> NormalizedScore:
    confidence = to_percent(raw_score or 0.0)
    return NormalizedScore(
        confidence=confidence,
        # Not the verdict threshold: 50..59 is AI-generated but "mixed".
        is_ai_generated=confidence >= AI_DECISION_THRESHOLD,
        verdict=verdict_for(confidence),
    )


def frame_score(frame: dict) -> float:
    score = (frame.get("type") or {}).get("ai_generated")
    return float(score) if isinstance(score, (int, float)) else 0.0


def mean_frame_score(frames: Iterable[dict]) -> float:
    """
    Arithmetic mean of per-frame `type.ai_generated`.

    Frames without a score count as 0. No frames yields 0.0 rather than an
    error, which surfaces as a 0% human verdict.
    """
    scores = [frame_score(f) for f in frames]
    if not scores:
        return 0.0
    return sum(scores) / len(scores)
