from genscan.schemas.detection import (
    AnalysisDetails,
    ContentType,
    DetectedModel,
    DetectionResult,
    DetectRequest,
    MediaFile,
    Verdict,
)

__all__ = [
    "AnalysisDetails",
    "ContentType",
    "DetectedModel",
    "DetectionResult",
    "DetectRequest",
    "MediaFile",
    "Verdict",
]
