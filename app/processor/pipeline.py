from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from app.rendering.models import RenderedPage


@dataclass(slots=True)
class PipelineContext:
    file_path: Path
    job_description: str
    analysis_type: str
    page: RenderedPage | None = None
    prompt: str = ""
    analysis: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
