"""
Unit tests for genscan/detection/video_detector.py — submit, poll, aggregate.

Submission and polls go through a mocked aiohttp session; `fast_polling`
sets the poll interval to 0.
"""

import pytest

from genscan.config import settings
from genscan.core.errors import ConfigurationError, DetectionTimeoutError, ProviderError
from genscan.detection.evidence import FALLBACK_PATTERNS
from genscan.detection.video_detector import detect_video, format_processing_time
from genscan.schemas.detection import ContentType, Verdict
from tests.mocks.http_mock import make_response, make_session, patch_session, poll_response

def _submitted():
    return make_response(200, {"status": "success", "media": {"id": "med_vid_1"}})


async def test_mean_of_frames_and_poll_sequence(sightengine_creds, fast_polling, video_file):
    frames = [{"type": {"ai_generated": 0.2}}, {"type": {"ai_generated": 0.8}}]
    session = make_session(
        post=_submitted(),
        get=[
            poll_response("ongoing"),
            poll_response("ongoing"),
            poll_response("finished", frames, started=1700000000.0, last_update=1700000012.6),
        ],
    )
    with patch_session(session):
        result = await detect_video(video_file)

    assert session.get.call_count == 3
    _, kwargs = session.get.call_args
    assert kwargs["params"] == {"id": "med_vid_1", "api_user": "se-user", "api_secret": "se-secret"}

    assert result.content_type == ContentType.VIDEO
    assert result.confidence == 50
    assert result.verdict == Verdict.MIXED
    assert result.is_ai_generated is True
    assert result.detected_model.name == "AI Video Generator"
    assert result.details.frames_analyzed == 2
    assert result.details.processing_time == "13s"
    assert result.details.analysis_method == "Proprietary Video Sequence Analysis"
    assert result.details.patterns == list(FALLBACK_PATTERNS[ContentType.VIDEO][0])


async def test_generator_breakdown_across_frames(sightengine_creds, fast_polling, video_file):
    frames = [
        {"type": {"ai_generated": 0.95, "ai_generators": {"sora": 0.9, "veo": 0.3, "other": 0.95}}},
        {"type": {"ai_generated": 0.85, "ai_generators": {"sora": 0.7, "veo": 0.5, "other": 0.95}}},
    ]
    session = make_session(post=_submitted(), get=[poll_response("finished", frames)])
    with patch_session(session):
        result = await detect_video(video_file)

    assert result.verdict == Verdict.AI
    assert result.detected_model.name == "Sora"
    assert result.detected_model.confidence == 80
    assert result.details.processing_time == "N/A"


async def test_zero_frames_reports_human(sightengine_creds, fast_polling, video_file):
    session = make_session(post=_submitted(), get=[poll_response("finished", [])])
    with patch_session(session):
        result = await detect_video(video_file)

    assert result.confidence == 0
    assert result.verdict == Verdict.HUMAN
    assert result.is_ai_generated is False
    assert result.detected_model is None
    assert result.details.frames_analyzed == 0
    assert result.details.patterns == list(FALLBACK_PATTERNS[ContentType.VIDEO][1])


async def test_submission_failure(sightengine_creds, fast_polling, video_file):
    rejected = make_response(200, {"status": "failure", "error": {"message": "Unsupported codec"}})
    session = make_session(post=rejected)
    with patch_session(session):
        with pytest.raises(ProviderError) as exc:
            await detect_video(video_file)

    assert "Unsupported codec" in str(exc.value)
    session.get.assert_not_called()


async def test_missing_media_id(sightengine_creds, fast_polling, video_file):
    session = make_session(post=make_response(200, {"status": "success", "media": {}}))
    with patch_session(session):
        with pytest.raises(ProviderError) as exc:
            await detect_video(video_file)

    assert "media ID" in str(exc.value)


async def test_provider_reports_processing_failure(sightengine_creds, fast_polling, video_file):
    failed = poll_response("failure", error={"message": "Video too long"})
    session = make_session(post=_submitted(), get=[poll_response("ongoing"), failed])
    with patch_session(session):
        with pytest.raises(ProviderError) as exc:
            await detect_video(video_file)

    assert "Video too long" in str(exc.value)


async def test_poll_http_error(sightengine_creds, fast_polling, video_file):
    session = make_session(post=_submitted(), get=[make_response(502)])
    with patch_session(session):
        with pytest.raises(ProviderError) as exc:
            await detect_video(video_file)

    assert exc.value.status == 502


async def test_poll_ceiling(sightengine_creds, fast_polling, monkeypatch, video_file):
    monkeypatch.setattr(settings, "video_poll_max_attempts", 4)
    session = make_session(post=_submitted(), get=poll_response("ongoing"))
    with patch_session(session):
        with pytest.raises(DetectionTimeoutError):
            await detect_video(video_file)

    assert session.get.call_count == 4


async def test_missing_credentials_fail_before_network(video_file):
    session = make_session(post=_submitted())
    with patch_session(session) as mock_request_session:
        with pytest.raises(ConfigurationError):
            await detect_video(video_file)

    mock_request_session.assert_not_called()


def test_processing_time_needs_both_timestamps():
    assert format_processing_time({"started": 10.0}) == "N/A"
    assert format_processing_time({"started": 10.0, "last_update": 14.4}) == "4s"
