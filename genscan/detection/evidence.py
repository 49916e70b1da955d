"""
Evidence synthesis — the short "patterns" list shown next to a verdict.

Provider evidence wins when there is any (Sapling flags individual
sentences); otherwise a fixed list per content type is used, picked by
`is_ai_generated` rather than by the three-way verdict.
"""

from typing import List, Mapping, Optional, Sequence, Tuple

from genscan.schemas.detection import ContentType

MAX_PATTERNS = 3
SENTENCE_FLAG_THRESHOLD = 0.5

# content type -> (AI-leaning patterns, human-leaning patterns)
FALLBACK_PATTERNS: Mapping[ContentType, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    ContentType.TEXT: (
        ("Low mathematical perplexity detected",
         "Highly uniform token distribution",
         "Predictable sentence structures"),
        ("Natural language variance detected",
         "High lexical diversity",
         "Human-like burstiness in formatting"),
    ),
    ContentType.IMAGE: (
        ("Non-organic pixel pattern anomalies detected",
         "Latent space generation signatures found",
         "Unnatural boundary blending"),
        ("Natural chromatic noise distribution",
         "Authentic photographic depth characteristics"),
    ),
    ContentType.VIDEO: (
        ("Temporal spatial inconsistencies detected",
         "High frequency frame-level artificial artifacts",
         "Physics engine violations"),
        ("Consistent natural temporal flow",
         "Coherent inter-frame movement"),
    ),
    ContentType.AUDIO: (
        ("Synthetic waveform signatures detected",
         "Unnatural prosody and gating",
         "Artificial background noise floor"),
        ("Natural speech breathing patterns",
         "Authentic biological pitch variance"),
    ),
}


def flagged_sentences(sentence_scores: Optional[Sequence]) -> List[str]:
    """
    Sentences from Sapling `(start, end, text, score)` tuples scoring above
    the flag threshold, in provider order.
    """
    flagged = []
    for entry in sentence_scores or []:
        try:
            text, score = entry[2], entry[3]
        except (IndexError, TypeError):
            continue
        if isinstance(score, (int, float)) and score > SENTENCE_FLAG_THRESHOLD:
            flagged.append(str(text))
    return flagged


def synthesize(
    content_type: ContentType,
    is_ai_generated: bool,
    provider_evidence: Optional[Sequence[str]] = None,
) -> List[str]:
    if provider_evidence:
        return list(provider_evidence)[:MAX_PATTERNS]

    ai_patterns, human_patterns = FALLBACK_PATTERNS.get(content_type, ((), ()))
    chosen = ai_patterns if is_ai_generated else human_patterns
    return list(chosen)[:MAX_PATTERNS]
