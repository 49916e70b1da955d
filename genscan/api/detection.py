"""
Detection route: /detect

Accepts either a JSON body { "contentType": "text", "text": "..." } /
{ "contentType": "web", "url": "https://..." }, or multipart/form-data with a
`content_type` field plus `text`, `url` or `file`. URL-encoded forms are
accepted for text and web.

Detection errors propagate to the exception handler in genscan/main.py,
which maps them to HTTP statuses.
"""

import json
import logging
import time

from fastapi import APIRouter, HTTPException, Request
from pydantic import ValidationError

from genscan.core.file_validator import validate_file, validate_text
from genscan.detection.pipeline import detect, parse_content_type
from genscan.schemas.detection import ContentType, DetectionResult, DetectRequest, MediaFile

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Detection"])

FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


async def _read_json(request: Request) -> DetectRequest:
    try:
        return DetectRequest.model_validate(await request.json())
    except json.JSONDecodeError:
        raise HTTPException(status_code=400, detail="Invalid JSON body")
    except ValidationError:
        raise HTTPException(status_code=400, detail="Missing 'contentType' in JSON body")


@router.post("/detect", response_model=DetectionResult)
async def detect_content(request: Request):
    """
    Detect AI-generated text, images, video, audio or web pages.
    """
    content_type_header = request.headers.get("content-type", "")

    if "application/json" in content_type_header:
        body = await _read_json(request)
        content_type = parse_content_type(body.content_type)
        payload = body.url if content_type == ContentType.WEB else body.text

    elif any(form_type in content_type_header for form_type in FORM_CONTENT_TYPES):
        form = await request.form()
        raw_type = form.get("content_type") or form.get("contentType")
        if not raw_type or not isinstance(raw_type, str):
            raise HTTPException(status_code=400, detail="Must provide 'content_type' in form data")
        content_type = parse_content_type(raw_type)

        file_obj = form.get("file")
        if content_type in (ContentType.IMAGE, ContentType.VIDEO, ContentType.AUDIO):
            # Form values are plain strings unless an upload was attached.
            if file_obj is None or isinstance(file_obj, str):
                raise HTTPException(status_code=400, detail="Must provide 'file' in form data")
            data = await file_obj.read()
            filename = file_obj.filename or "uploaded_file"
            validate_file(content_type, filename, len(data))
            payload = MediaFile(filename, data, file_obj.content_type or "application/octet-stream")
        else:
            field = "url" if content_type == ContentType.WEB else "text"
            value = form.get(field)
            payload = value if isinstance(value, str) else None

    else:
        raise HTTPException(
            status_code=415,
            detail="Unsupported Media Type. Use multipart/form-data, a URL-encoded form or application/json"
        )

    if content_type == ContentType.TEXT and isinstance(payload, str):
        validate_text(payload)

    start_time = time.time()
    result = await detect(content_type, payload)
    duration = time.time() - start_time

    logger.info(
        f"[ROUTE] {content_type.value} -> {result.verdict.value} "
        f"({result.confidence}%) in {duration:.2f}s"
    )
    return result
