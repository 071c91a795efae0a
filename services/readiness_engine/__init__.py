from .answers import AnswerSet
from .catalog import QuestionCatalog, default_catalog
from .loader import load_catalog_data, load_catalog_from_file
from .models import (
    AssessmentResult,
    CatalogConfigurationError,
    InvalidSubmissionError,
    Recommendation,
    SessionStateError,
)
from .results_generator import generate_report
from .scorer import compute_result
from .session import AssessmentSession

__all__ = [
    "AnswerSet",
    "AssessmentResult",
    "AssessmentSession",
    "CatalogConfigurationError",
    "InvalidSubmissionError",
    "QuestionCatalog",
    "Recommendation",
    "SessionStateError",
    "compute_result",
    "default_catalog",
    "generate_report",
    "load_catalog_data",
    "load_catalog_from_file",
]
