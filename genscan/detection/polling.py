"""
Asynchronous submit/poll protocol for long-running provider jobs (video).

    submitted -> polling -> finished | failed | timed_out | cancelled

Each attempt first waits `interval` seconds, then asks the provider for the
job status. `finished` returns the job payload, `failure` raises
ProviderError, anything else (e.g. `ongoing`) keeps polling until the attempt
ceiling is hit. An optional asyncio.Event aborts the wait early.

The PollSession is local to one call and dropped once it returns or raises.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional

from genscan.core.errors import DetectionCancelledError, DetectionTimeoutError, ProviderError

logger = logging.getLogger(__name__)

STATUS_FINISHED = "finished"
STATUS_FAILURE = "failure"


class PollState(str, Enum):
    SUBMITTED = "submitted"
    POLLING = "polling"
    FINISHED = "finished"
    FAILED = "failed"
    TIMED_OUT = "timed_out"
    CANCELLED = "cancelled"


@dataclass
class PollSession:
    media_id: str
    state: PollState = PollState.SUBMITTED
    attempts: int = 0


async def _pause(interval: float, cancel_event: Optional[asyncio.Event]) -> bool:
    """Sleeps for `interval`; returns True if cancellation was signalled."""
    if cancel_event is None:
        await asyncio.sleep(interval)
        return False
    if cancel_event.is_set():
        return True
    try:
        await asyncio.wait_for(cancel_event.wait(), timeout=interval)
    except asyncio.TimeoutError:
        return False
    return True


async def poll_until_finished(
    media_id: str,
    fetch_status: Callable[[str], Awaitable[dict]],
    *,
    interval: float,
    max_attempts: int,
    provider: str = "Sightengine",
    cancel_event: Optional[asyncio.Event] = None,
) -> dict:
    session = PollSession(media_id)
    session.state = PollState.POLLING

    while session.attempts < max_attempts:
        session.attempts += 1

        if await _pause(interval, cancel_event):
            session.state = PollState.CANCELLED
            logger.info(f"[POLL] {media_id} cancelled after {session.attempts - 1} polls")
            raise DetectionCancelledError("Video analysis was cancelled.")

        job = await fetch_status(media_id)
        status = job.get("status")

        if status == STATUS_FINISHED:
            session.state = PollState.FINISHED
            logger.info(f"[POLL] {media_id} finished after {session.attempts} polls")
            return job

        if status == STATUS_FAILURE:
            session.state = PollState.FAILED
            message = ((job.get("error") or {}).get("message")) or "Unknown processing error"
            logger.error(f"[POLL] {media_id} failed: {message}")
            raise ProviderError(provider, f"{provider} video processing failed: {message}")

        logger.debug(f"[POLL] {media_id} attempt {session.attempts}/{max_attempts}: {status}")

    session.state = PollState.TIMED_OUT
    logger.warning(f"[POLL] {media_id} timed out after {session.attempts} polls")
    raise DetectionTimeoutError(
        f"{provider} video processing timed out after {max_attempts} status checks. "
        "Try a shorter clip or retry later."
    )
