from pathlib import Path

from app.analysis.factory import EvaluatorFactory
from app.analysis.models import AnalysisResult
from app.config.settings import Settings
from app.logging.logger import Log
from app.processor.exceptions import AnalysisFailedError
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.steps import EvaluateStep, RenderPageStep, SelectPromptStep
from app.rendering.factory import PageRendererFactory


class Processor:
    """Orchestrates the resume analysis pipeline for one uploaded file.

    Pipeline: render page one -> select prompt -> evaluate.
    The uploaded PDF itself is left in place; the caller owns it.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def analyze(
        self,
        file_path: Path,
        job_description: str,
        analysis_type: str,
    ) -> AnalysisResult:
        """Run every step in order and return the model's evaluation.

        Raises:
            AnalysisFailedError: wrapping the first step failure.
        """
        Log.info(f"Analyzing {file_path.name} (analysis type '{analysis_type}')")
        context = PipelineContext(
            file_path=file_path,
            job_description=job_description,
            analysis_type=analysis_type,
        )
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            Log.error(f"Resume analysis error: {exc}")
            raise AnalysisFailedError(f"Analysis failed: {exc}") from exc

        if not context.analysis:
            raise AnalysisFailedError("Analysis failed: no analysis text produced")
        return AnalysisResult(analysis=context.analysis, analysis_type=analysis_type)


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with the configured renderer and evaluator."""
    renderer = PageRendererFactory.create(settings)
    evaluator = EvaluatorFactory.create(settings)
    return Processor(
        steps=[
            RenderPageStep(renderer),
            SelectPromptStep(),
            EvaluateStep(evaluator),
        ]
    )
