"""Web page detection — only available through the demo generator."""

from typing import Optional

from genscan.core.errors import UnsupportedOperationError
from genscan.schemas.detection import DetectionResult


async def detect_web(url: Optional[str]) -> DetectionResult:
    raise UnsupportedOperationError(
        "Web content detection requires a backend proxy to fetch URLs. "
        "In demo mode, this works with mock data. "
        "For live mode, set up a server-side proxy."
    )
