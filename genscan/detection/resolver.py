"""
Model-name resolution — which generator most likely produced the content.

Three strategies implement the same `match()` contract:

  BreakdownResolver       provider reports a generator -> sub-score mapping
                          (image: `type.ai_generators`, video: averaged
                          over frames)
  LegacyPrefixResolver    older image payloads with `type.ai_generated_<x>` keys
  ConfidenceTierResolver  text/audio: no generator data upstream, so the
                          content confidence is bucketed into label tiers

A strategy returns None when the payload does not have the shape it reads,
letting ModelNameResolver fall through to the next strategy. When the label
is still generic, vocabularies with filename hints scan the echoed media URI
or the uploaded filename.

Resolvers only read their vocabulary and the payload, so calling them twice
with the same input gives the same answer.
"""

import logging
from dataclasses import dataclass
from typing import Mapping, NamedTuple, Optional, Sequence, Tuple

from genscan.core.errors import UnsupportedOperationError
from genscan.detection.scoring import to_percent
from genscan.detection.vocabulary import (
    AUDIO_VOCABULARY,
    IMAGE_VOCABULARY,
    TEXT_VOCABULARY,
    VIDEO_VOCABULARY,
    ModelVocabulary,
)
from genscan.schemas.detection import ContentType

logger = logging.getLogger(__name__)

EXCLUDED_GENERATOR_KEY = "other"


class ModelMatch(NamedTuple):
    name: str
    # Certainty in the label (0..100); None means "use the content confidence".
    confidence: Optional[int] = None


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def pick_top_generator(scores: Mapping[str, float]) -> Optional[Tuple[str, float]]:
    """
    Key with the highest score, ignoring `other`.

    Strict `>` against a running max that starts at 0: the first key seen at
    the maximum wins, and all-zero breakdowns produce no winner.
    """
    best_key, best_score = None, 0.0
    for key, score in scores.items():
        if key == EXCLUDED_GENERATOR_KEY or not _is_number(score):
            continue
        if score > best_score:
            best_key, best_score = key, score
    if best_key is None:
        return None
    return best_key, best_score


def average_frame_breakdown(frames: Sequence[dict]) -> Optional[dict]:
    """
    Per-generator average over the frames that report a breakdown.

    Returns None when no frame carries `type.ai_generators`.
    """
    totals: dict = {}
    reporting = 0
    for frame in frames:
        generators = (frame.get("type") or {}).get("ai_generators")
        if not isinstance(generators, dict):
            continue
        reporting += 1
        for key, score in generators.items():
            if _is_number(score):
                totals[key] = totals.get(key, 0.0) + score
    if reporting == 0:
        return None
    return {key: total / reporting for key, total in totals.items()}


def generator_breakdown(payload: dict) -> Optional[dict]:
    """Image responses carry one breakdown; finished video jobs carry frames."""
    if "frames" in payload:
        return average_frame_breakdown(payload.get("frames") or [])
    generators = (payload.get("type") or {}).get("ai_generators")
    return generators if isinstance(generators, dict) else None


@dataclass(frozen=True)
class BreakdownResolver:
    vocabulary: ModelVocabulary

    def match(self, payload: dict, confidence: int) -> Optional[ModelMatch]:
        breakdown = generator_breakdown(payload)
        if breakdown is None:
            return None
        top = pick_top_generator(breakdown)
        if top is None:
            return ModelMatch(self.vocabulary.default_label)
        key, score = top
        return ModelMatch(self.vocabulary.label_for(key), to_percent(score))


@dataclass(frozen=True)
class LegacyPrefixResolver:
    vocabulary: ModelVocabulary

    def match(self, payload: dict, confidence: int) -> Optional[ModelMatch]:
        type_scores = payload.get("type")
        prefix = self.vocabulary.legacy_prefix
        if not isinstance(type_scores, dict) or not prefix:
            return None
        prefixed = {
            key[len(prefix):]: score
            for key, score in type_scores.items()
            if key.startswith(prefix)
        }
        top = pick_top_generator(prefixed)
        if top is None:
            return ModelMatch(self.vocabulary.default_label)
        suffix, score = top
        return ModelMatch(self.vocabulary.legacy_label_for(suffix), to_percent(score))


@dataclass(frozen=True)
class ConfidenceTierResolver:
    vocabulary: ModelVocabulary

    def match(self, payload: dict, confidence: int) -> Optional[ModelMatch]:
        for minimum, label in self.vocabulary.confidence_tiers:
            if confidence >= minimum:
                return ModelMatch(label)
        return ModelMatch(self.vocabulary.default_label)


def match_filename(vocabulary: ModelVocabulary, filename: str) -> Optional[str]:
    lowered = filename.lower()
    for fragments, label in vocabulary.filename_hints:
        if any(fragment in lowered for fragment in fragments):
            return label
    return None


class ModelNameResolver:
    """Selects the strategy chain for a content type and applies fallbacks."""

    def __init__(self, strategies: Mapping[ContentType, Sequence]):
        self._strategies = {ct: tuple(chain) for ct, chain in strategies.items()}

    def match(
        self,
        content_type: ContentType,
        payload: dict,
        filename_hint: Optional[str] = None,
        confidence: int = 0,
    ) -> ModelMatch:
        chain = self._strategies.get(content_type)
        if not chain:
            raise UnsupportedOperationError(f"No model resolver for content type '{content_type.value}'")

        vocabulary = chain[0].vocabulary
        result = ModelMatch(vocabulary.default_label)
        for strategy in chain:
            found = strategy.match(payload, confidence)
            if found is not None:
                result = found
                break

        if vocabulary.filename_hints and vocabulary.is_generic(result.name):
            source = ((payload.get("media") or {}).get("uri")) or filename_hint or ""
            hinted = match_filename(vocabulary, source)
            if hinted:
                logger.info(f"[RESOLVER] Filename hint '{source}' -> {hinted}")
                result = ModelMatch(hinted)

        return result

    def resolve(
        self,
        content_type: ContentType,
        payload: dict,
        filename_hint: Optional[str] = None,
        confidence: int = 0,
    ) -> str:
        return self.match(content_type, payload, filename_hint, confidence).name


def build_default_resolver() -> ModelNameResolver:
    return ModelNameResolver({
        ContentType.TEXT: (ConfidenceTierResolver(TEXT_VOCABULARY),),
        ContentType.AUDIO: (ConfidenceTierResolver(AUDIO_VOCABULARY),),
        ContentType.IMAGE: (
            BreakdownResolver(IMAGE_VOCABULARY),
            LegacyPrefixResolver(IMAGE_VOCABULARY),
        ),
        ContentType.VIDEO: (BreakdownResolver(VIDEO_VOCABULARY),),
    })


# Shared instance, holds no per-request state.
model_resolver = build_default_resolver()
