from app.analysis.base import BaseEvaluator
from app.analysis.models import AnalysisRequest
from app.analysis.prompt_loader import select_prompt
from app.logging.logger import Log
from app.processor.pipeline import PipelineContext, PipelineStep
from app.rendering.base import BasePageRenderer


class RenderPageStep(PipelineStep):
    def __init__(self, renderer: BasePageRenderer) -> None:
        self._renderer = renderer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.page = self._renderer.render(context.file_path)
        return context


class SelectPromptStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.prompt = select_prompt(context.analysis_type)
        Log.info(f"Selected prompt for analysis type '{context.analysis_type}'")
        return context


class EvaluateStep(PipelineStep):
    def __init__(self, evaluator: BaseEvaluator) -> None:
        self._evaluator = evaluator

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.page is None:
            raise ValueError("PipelineContext.page must be set before evaluation")
        request = AnalysisRequest(
            job_description=context.job_description,
            analysis_type=context.analysis_type,
            page=context.page,
        )
        context.analysis = self._evaluator.evaluate(request, context.prompt)
        return context
