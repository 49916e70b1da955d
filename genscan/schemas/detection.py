from enum import Enum
from typing import List, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class ContentType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    WEB = "web"


class Verdict(str, Enum):
    HUMAN = "human"
    MIXED = "mixed"
    AI = "ai"


class _ContractModel(BaseModel):
    # Attributes are snake_case in Python, camelCase on the wire.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class DetectedModel(_ContractModel):
    name: str
    provider: str
    description: str
    confidence: int = Field(ge=0, le=100, description="Certainty in this specific label")


class AnalysisDetails(_ContractModel):
    analysis_method: str
    processing_time: str
    patterns: List[str] = Field(default_factory=list)
    frames_analyzed: Optional[int] = None


class DetectionResult(_ContractModel):
    """Unified result produced by every detector and by the demo generator."""
    is_ai_generated: bool
    confidence: int = Field(ge=0, le=100)
    verdict: Verdict
    detected_model: Optional[DetectedModel] = None
    content_type: ContentType
    details: AnalysisDetails

    @model_validator(mode="after")
    def _model_present_iff_ai(self) -> "DetectionResult":
        if self.is_ai_generated != (self.detected_model is not None):
            raise ValueError("detected_model must be set exactly when is_ai_generated is true")
        return self


class DetectRequest(_ContractModel):
    """JSON body accepted by POST /detect for text and web submissions."""
    content_type: str
    text: Optional[str] = None
    url: Optional[str] = None


class MediaFile(NamedTuple):
    """Binary upload handed to the image, video and audio detectors."""
    filename: str
    data: bytes
    mime_type: str = "application/octet-stream"
