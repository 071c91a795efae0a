import copy

import pytest

from services.readiness_engine.catalog import default_catalog
from services.readiness_engine.models import OptionTier, QuestionType

# Smallest catalog the engine accepts: one question per category plus a
# binary source for real-world alignment.
MINIMAL_CATALOG = {
    "version": "0.1.0",
    "title": "Minimal",
    "questions": [
        {
            "id": "d1", "type": "scaled", "category": "disposition",
            "section": "Interest", "prompt": "Disposition?",
            "scale_bounds": {"low": "Low", "high": "High"},
        },
        {
            "id": "k1", "type": "single-choice", "category": "domain-knowledge",
            "section": "Knowledge", "prompt": "Knowledge?",
            "options": [
                {"text": "Right", "tier": "best"},
                {"text": "Plausible", "tier": "neutral"},
                {"text": "No idea", "tier": "unfamiliar"},
            ],
        },
        {
            "id": "r1", "type": "scaled", "category": "readiness-framework",
            "section": "Will", "prompt": "Readiness?",
            "scale_bounds": {"low": "Never", "high": "Always"},
        },
        {
            "id": "r2", "type": "binary", "category": "readiness-framework",
            "section": "Real-World Alignment", "prompt": "Would you?",
            "options": [
                {"text": "Yes", "tier": "positive"},
                {"text": "No", "tier": "negative"},
            ],
        },
    ],
    "dimension_sources": {
        "persistence": "r1",
        "interest": "r1",
        "cognitive": "r1",
        "ability_to_learn": "r1",
        "real_world_alignment": "r2",
    },
}


@pytest.fixture
def minimal_catalog_data() -> dict:
    # Deep copy so tests can mutate freely
    return copy.deepcopy(MINIMAL_CATALOG)


@pytest.fixture
def catalog():
    """The embedded smart city catalog."""
    return default_catalog()


def _answers_for(catalog, scale_value: str, choice_tiers) -> dict:
    answers = {}
    for question in catalog:
        if question.type == QuestionType.SCALED:
            answers[question.id] = scale_value
            continue
        for tier in choice_tiers:
            option = next((o for o in question.options if o.tier == tier), None)
            if option is not None:
                answers[question.id] = option.text
                break
    return answers


@pytest.fixture
def best_answers(catalog) -> dict:
    """Every scaled question at 5, best option everywhere, affirmative binary answer."""
    return _answers_for(catalog, "5", [OptionTier.BEST, OptionTier.POSITIVE])


@pytest.fixture
def worst_answers(catalog) -> dict:
    """
    Every scaled question at 1, the unfamiliar option where one exists
    (a plausible wrong answer otherwise), negative binary answer.
    """
    return _answers_for(catalog, "1", [OptionTier.UNFAMILIAR, OptionTier.NEUTRAL, OptionTier.NEGATIVE])
