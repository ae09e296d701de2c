from dataclasses import dataclass
from enum import Enum

from app.rendering.models import RenderedPage


class AnalysisType(str, Enum):
    """Analysis categories that have a dedicated instruction template."""

    REVIEW = "review"
    PERCENTAGE = "percentage"


@dataclass(frozen=True)
class AnalysisRequest:
    """Everything the AI model is given for one resume evaluation."""

    job_description: str
    analysis_type: str
    page: RenderedPage


@dataclass(frozen=True)
class AnalysisResult:
    """Non-empty model evaluation plus the category it was produced for."""

    analysis: str
    analysis_type: str
