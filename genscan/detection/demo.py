"""
Demo-mode result generator.

Produces plausible results without touching any provider, drawing the
detected model from a per-content-type pool. Results go through the same
DetectionResult schema as live detections.
"""

import asyncio
import logging
import random
from typing import Dict, Tuple

from genscan.config import settings
from genscan.detection.scoring import verdict_for
from genscan.schemas.detection import AnalysisDetails, ContentType, DetectedModel, DetectionResult

logger = logging.getLogger(__name__)

AI_ODDS = 0.85

# (name, provider, description, typical confidence)
MODEL_POOLS: Dict[ContentType, Tuple[Tuple[str, str, str, int], ...]] = {
    ContentType.TEXT: (
        ("GPT-4o", "OpenAI",
         "Large language model by OpenAI, known for fluent, structured text generation.", 89),
        ("Claude 3.5 Sonnet", "Anthropic",
         "Anthropic's conversational AI known for nuanced, safety-aware text outputs.", 76),
        ("Gemini 2.0 Flash", "Google DeepMind",
         "Google's multimodal model excelling at fast, high-quality text generation.", 72),
        ("LLaMA 3.1", "Meta",
         "Meta's open-source LLM known for competitive performance at various sizes.", 65),
    ),
    ContentType.IMAGE: (
        ("DALL·E 3", "OpenAI",
         "OpenAI's image generation model with strong prompt following and text rendering.", 92),
        ("Midjourney v6", "Midjourney",
         "Known for highly artistic, photorealistic image generation with distinctive aesthetics.", 87),
        ("Stable Diffusion XL", "Stability AI",
         "Open-source diffusion model capable of high-resolution, detailed image synthesis.", 78),
        ("Adobe Firefly", "Adobe",
         "Adobe's commercially-safe generative model trained on licensed content.", 68),
    ),
    ContentType.VIDEO: (
        ("Sora", "OpenAI",
         "OpenAI's video generation model creating realistic scenes from text prompts.", 85),
        ("Veo 2", "Google DeepMind",
         "Google's video generation AI with high temporal coherence and motion fidelity.", 79),
        ("Runway Gen-3 Alpha", "Runway",
         "Runway's latest video generation model offering fine-grained artistic control.", 74),
        ("Pika 1.5", "Pika Labs",
         "Video synthesis model focused on creative and stylistic video generation.", 62),
    ),
    ContentType.AUDIO: (
        ("ElevenLabs", "ElevenLabs",
         "Industry-leading AI voice synthesis with natural intonation and emotion.", 91),
        ("Bark", "Suno AI",
         "Open-source text-to-audio model supporting speech, music, and sound effects.", 73),
        ("XTTS v2", "Coqui",
         "Open-source voice cloning model supporting cross-lingual speech synthesis.", 66),
        ("Azure Neural TTS", "Microsoft",
         "Microsoft's neural text-to-speech with highly natural-sounding voices.", 60),
    ),
    ContentType.WEB: (
        ("GPT-4o", "OpenAI",
         "Large language model by OpenAI, commonly used for blog/article generation.", 84),
        ("Claude 3.5 Sonnet", "Anthropic",
         "Often used for long-form, well-structured web content creation.", 71),
        ("Jasper AI", "Jasper",
         "Marketing-focused AI writing tool powered by multiple LLMs.", 68),
    ),
}

AI_PATTERNS = [
    "Micro-patterns indicative of generation",
    "Extremely low variance in distribution",
    "Predictable structural repetition",
]
HUMAN_PATTERNS = [
    "High structural entropy",
    "Natural biological variance in distribution",
]


def mock_result(content_type: ContentType, rng: random.Random = random) -> DetectionResult:
    pool = MODEL_POOLS.get(content_type, MODEL_POOLS[ContentType.TEXT])
    name, provider, description, typical = rng.choice(pool)

    is_ai = rng.random() < AI_ODDS
    confidence = rng.randint(65, 98) if is_ai else rng.randint(8, 35)

    detected_model = None
    if is_ai:
        detected_model = DetectedModel(
            name=name,
            provider=provider,
            description=description,
            confidence=rng.randint(typical - 10, typical),
        )

    return DetectionResult(
        is_ai_generated=is_ai,
        confidence=confidence,
        verdict=verdict_for(confidence),
        detected_model=detected_model,
        content_type=content_type,
        details=AnalysisDetails(
            analysis_method="Deep Neural Pattern Matching" if is_ai else "Heuristic Biological Scoring",
            processing_time=f"{rng.randint(200, 1500)}ms",
            patterns=list(AI_PATTERNS if is_ai else HUMAN_PATTERNS),
        ),
    )


async def simulate_detection(content_type: ContentType) -> DetectionResult:
    delay_ms = random.uniform(settings.demo_min_delay_ms, settings.demo_max_delay_ms)
    logger.info(f"[DEMO] Simulating {content_type.value} detection ({delay_ms:.0f}ms)")
    await asyncio.sleep(delay_ms / 1000)
    return mock_result(content_type)
