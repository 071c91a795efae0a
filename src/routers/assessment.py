import logging

from fastapi import APIRouter, Depends, HTTPException

from services.readiness_engine.catalog import QuestionCatalog
from services.readiness_engine.models import CatalogConfigurationError, InvalidSubmissionError
from services.readiness_engine.results_generator import generate_report
from services.readiness_engine.scorer import compute_result
from src.core.config import get_catalog
from src.schemas.assessment import AssessmentRequest, AssessmentResponse, QuestionListResponse

router = APIRouter()
logger = logging.getLogger(__name__)


def get_question_catalog() -> QuestionCatalog:
    return get_catalog()


@router.get("/assessment/questions", response_model=QuestionListResponse)
async def list_questions(catalog: QuestionCatalog = Depends(get_question_catalog)):
    """Returns the catalog in presentation order, without scoring data."""
    return QuestionListResponse(
        version=catalog.version,
        title=catalog.title,
        count=len(catalog),
        questions=catalog.describe(),
    )


@router.post("/assessment/score", response_model=AssessmentResponse)
async def score_assessment(
    request: AssessmentRequest,
    catalog: QuestionCatalog = Depends(get_question_catalog),
):
    """
    Scores a completed answer set and returns the result together with the
    results-page report. Unanswered questions are scored neutrally.
    """
    try:
        result = compute_result(request.answers, catalog)
        report = generate_report(result)
    except InvalidSubmissionError as e:
        logger.error(f"Invalid submission: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except CatalogConfigurationError as e:
        logger.error(f"Question catalog misconfigured: {e}")
        raise HTTPException(status_code=500, detail="Assessment is misconfigured")
    except Exception as e:
        logger.exception(f"Unexpected error during assessment scoring: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")

    logger.info(
        f"Assessment scored: overall={result.overall_score} recommendation={result.recommendation.value} "
        f"answered={len(request.answers)}/{len(catalog)}"
    )
    return AssessmentResponse(result=result.to_dict(), report=report)
