"""
Immutable provider vocabularies used by the model-name resolver.

Each ModelVocabulary bundles what one content type needs to turn raw
provider keys into display labels. Tables are wrapped in MappingProxyType so
resolvers can share them without anyone mutating them at runtime.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from genscan.schemas.detection import ContentType

# Sentinel labels that trigger the filename fallback for images.
GENERIC_SENTINELS = ("Other",)


def _frozen(table: dict) -> Mapping[str, str]:
    return MappingProxyType(dict(table))


def humanize_key(key: str) -> str:
    """`stable_video` -> `Stable Video`, `z-image` -> `Z-Image`."""
    return re.sub(r"\b\w", lambda m: m.group().upper(), key.replace("_", " "))


@dataclass(frozen=True)
class ModelVocabulary:
    content_type: ContentType
    default_label: str
    description: str
    generators: Mapping[str, str] = field(default_factory=lambda: _frozen({}))
    legacy_prefix: str = ""
    legacy_generators: Mapping[str, str] = field(default_factory=lambda: _frozen({}))
    # Ordered (fragments, label) pairs; first matching entry wins.
    filename_hints: Tuple[Tuple[Tuple[str, ...], str], ...] = ()
    # Ordered (minimum confidence, label) pairs, highest first.
    confidence_tiers: Tuple[Tuple[int, str], ...] = ()

    def label_for(self, key: str) -> str:
        return self.generators.get(key) or humanize_key(key)

    def legacy_label_for(self, suffix: str) -> str:
        return self.legacy_generators.get(suffix) or humanize_key(suffix)

    def is_generic(self, label: str) -> bool:
        return label == self.default_label or label in GENERIC_SENTINELS


IMAGE_VOCABULARY = ModelVocabulary(
    content_type=ContentType.IMAGE,
    default_label="AI Image Generator",
    description="Image analyzed for AI generation artifacts and model signatures.",
    generators=_frozen({
        "midjourney": "Midjourney",
        "dalle": "DALL·E",
        "gpt": "DALL·E / ChatGPT",
        "stable_diffusion": "Stable Diffusion",
        "firefly": "Adobe Firefly",
        "imagen": "Google Imagen",
        "flux": "Flux",
        "ideogram": "Ideogram",
        "recraft": "Recraft",
        "gan": "GAN",
        "wan": "Wan",
        "qwen": "Qwen",
        "z_image": "Z-Image",
    }),
    legacy_prefix="ai_generated_",
    legacy_generators=_frozen({
        "midjourney": "Midjourney",
        "dalle": "DALL·E",
        "stablediffusion": "Stable Diffusion",
        "adobe": "Adobe Firefly",
    }),
    filename_hints=(
        (("chatgpt", "dalle", "dall-e"), "DALL·E / ChatGPT"),
        (("midjourney",), "Midjourney"),
        (("stable diffusion", "stablediffusion"), "Stable Diffusion"),
        (("firefly", "adobe"), "Adobe Firefly"),
    ),
)

VIDEO_VOCABULARY = ModelVocabulary(
    content_type=ContentType.VIDEO,
    default_label="AI Video Generator",
    description="Video frames analyzed for temporal consistency and AI artifacts.",
    generators=_frozen({
        "kling": "Kling",
        "midjourney": "Midjourney",
        "pika": "Pika",
        "runway": "Runway",
        "sora": "Sora",
        "veo": "Veo",
        "wan": "Wan",
    }),
)

TEXT_VOCABULARY = ModelVocabulary(
    content_type=ContentType.TEXT,
    default_label="AI Generated",
    description="Text analyzed for AI generation patterns including perplexity and burstiness.",
    confidence_tiers=(
        (85, "High-Confidence AI"),
        (65, "AI Generated"),
        (50, "Likely AI"),
    ),
)

AUDIO_VOCABULARY = ModelVocabulary(
    content_type=ContentType.AUDIO,
    default_label="AI Voice/Audio Generator",
    description="Audio analyzed for synthetic speech patterns and AI generation artifacts.",
    confidence_tiers=(
        (85, "High-Confidence AI Voice"),
        (65, "AI Voice/Audio Generator"),
        (50, "Likely AI Voice"),
    ),
)

VOCABULARIES: Mapping[ContentType, ModelVocabulary] = MappingProxyType({
    v.content_type: v
    for v in (TEXT_VOCABULARY, IMAGE_VOCABULARY, VIDEO_VOCABULARY, AUDIO_VOCABULARY)
})
