"""
Stand-in for the shared aiohttp session.

`make_response` builds an object usable as `async with sess.post(...) as r`.
`patch_session` swaps http_client.request_session so provider modules get
the mock session instead of opening a real connection.
"""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, patch


def make_response(status: int = 200, json_data: dict = None) -> MagicMock:
    mock_resp = MagicMock()
    mock_resp.__aenter__ = AsyncMock(return_value=mock_resp)
    mock_resp.__aexit__ = AsyncMock(return_value=None)
    mock_resp.status = status
    mock_resp.json = AsyncMock(return_value=json_data if json_data is not None else {})
    return mock_resp


def make_session(post=None, get=None) -> MagicMock:
    """
    `post` / `get` may be a single response (returned on every call) or a
    list of responses (returned in order).
    """
    mock_session = MagicMock()
    for name, responses in (("post", post), ("get", get)):
        if isinstance(responses, list):
            setattr(mock_session, name, MagicMock(side_effect=responses))
        elif responses is not None:
            setattr(mock_session, name, MagicMock(return_value=responses))
    return mock_session


def patch_session(mock_session):
    @asynccontextmanager
    async def _fake_request_session():
        yield mock_session

    return patch(
        "genscan.integrations.http_client.request_session",
        side_effect=_fake_request_session,
    )


def poll_response(status: str, frames=None, **extra) -> MagicMock:
    data = {"status": status, **extra}
    if frames is not None:
        data["frames"] = frames
    return make_response(200, {"status": "success", "output": {"data": data}})
