"""
System / health routes.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from genscan.config import settings

router = APIRouter(tags=["System"])


@router.get("/health")
async def health():
    return {"status": "healthy", "mode": "demo" if settings.demo_mode else "live"}


@router.get("/robots.txt", response_class=PlainTextResponse)
def robots():
    return "User-agent: *\nDisallow: /"
