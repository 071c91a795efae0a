from typing import Any, Dict, List, Union

from pydantic import BaseModel, Field

from services.readiness_engine.results_generator import ResultsReport


class AssessmentRequest(BaseModel):
    # question_id -> "1".."5" (or the int) for scaled questions, option text otherwise
    answers: Dict[str, Union[str, int]] = Field(default_factory=dict)


class QuestionListResponse(BaseModel):
    version: str
    title: str
    count: int
    questions: List[Dict[str, Any]]


class AssessmentResponse(BaseModel):
    result: Dict[str, Any]  # camelCase result shape, see AssessmentResult.to_dict
    report: ResultsReport
