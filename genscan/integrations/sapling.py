"""
Sapling AI text-detection client.

Free tier: 50,000 characters per day. The response carries an overall
`score` (0..1, 1 = fully AI-generated) and `sentence_scores` as
`[start, end, sentence, score]` tuples.
"""

import logging

from genscan.config import settings
from genscan.core.errors import ConfigurationError, ProviderError
from genscan.integrations import http_client as http_module

logger = logging.getLogger(__name__)

PROVIDER = "Sapling"


def get_api_key() -> str:
    api_key = settings.sapling_api_key
    if not api_key:
        raise ConfigurationError("Sapling API key not configured. Set SAPLING_API_KEY in .env")
    return api_key


async def detect_text(text: str, api_key: str) -> dict:
    url = f"{settings.sapling_base_url}/api/v1/aidetect"
    async with http_module.request_session() as sess:
        async with sess.post(url, json={"key": api_key, "text": text}) as response:
            if response.status != 200:
                logger.error(f"[SAPLING] API error: {response.status}")
                raise ProviderError(PROVIDER, f"Sapling API error: {response.status}", status=response.status)
            data = await response.json()

    logger.info(
        f"[SAPLING] score={data.get('score')} sentences={len(data.get('sentence_scores') or [])}"
    )
    return data
