from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalysisResponse(_CamelModel):
    success: bool = True
    message: str = "Analysis completed successfully"
    analysis: str
    analysis_type: str


class ErrorResponse(_CamelModel):
    success: bool = False
    message: str


class HealthResponse(_CamelModel):
    status: str = "OK"
    service: str
    timestamp: str
