# services/readiness_engine/scorer.py
# Converts a completed answer set into category, framework and overall scores.

import logging
import math
from collections.abc import Mapping
from typing import Dict, List, Optional

from .answers import validate_answer
from .catalog import QuestionCatalog, default_catalog
from .models import (
    AssessmentResult,
    CatalogConfigurationError,
    Category,
    CategoryScores,
    FrameworkScores,
    InvalidSubmissionError,
    OptionTier,
    Question,
    QuestionType,
    Recommendation,
    ScoringRules,
)

logger = logging.getLogger(__name__)

TIER_POINTS = {
    OptionTier.BEST: "best_points",
    OptionTier.NEUTRAL: "neutral_points",
    OptionTier.UNFAMILIAR: "unfamiliar_points",
    OptionTier.POSITIVE: "positive_points",
    OptionTier.NEGATIVE: "negative_points",
}


def round_half_up(value: float) -> int:
    """Rounds .5 upwards, unlike the built-in round() which rounds to even."""
    return int(math.floor(value + 0.5))


# --- Scoring Functions ---

def validate_answers(answers: Mapping, catalog: QuestionCatalog) -> None:
    """Rejects unknown question ids and out-of-domain values. Missing answers are fine."""
    for question_id, value in answers.items():
        if question_id not in catalog:
            raise InvalidSubmissionError(f"Unknown question id: {question_id}")
        validate_answer(catalog.get(question_id), value)


def score_question(question: Question, answer: Optional[str], rules: ScoringRules) -> int:
    """
    Returns a single question's 0-100 contribution.

    Unanswered questions contribute a neutral value: the neutral scale point
    for scaled questions, neutral points for single-choice and negative
    points for binary questions.
    """
    if question.type == QuestionType.SCALED:
        value = int(answer) if answer is not None else rules.neutral_scale_value
        return value * rules.scale_multiplier

    if answer is None:
        if question.type == QuestionType.BINARY:
            return rules.negative_points
        return rules.neutral_points

    option = question.option_for(answer)
    if option is None:
        raise InvalidSubmissionError(f"Invalid answer {answer!r} for question '{question.id}'")
    return getattr(rules, TIER_POINTS[option.tier])


def _category_score(category: Category, questions, answers: Mapping, rules: ScoringRules) -> int:
    if not questions:
        raise CatalogConfigurationError(f"Category '{category.value}' has no questions to score")
    contributions = [score_question(q, answers.get(q.id), rules) for q in questions]
    return round_half_up(sum(contributions) / len(contributions))


def calculate_category_scores(answers: Mapping, catalog: QuestionCatalog) -> CategoryScores:
    """Unweighted mean of question contributions per category, over every question in it."""
    rules = catalog.scoring_rules
    scores: Dict[str, int] = {}
    for category in Category:
        scores[category.name.lower()] = _category_score(
            category, catalog.by_category(category), answers, rules
        )
    return CategoryScores(**scores)


def calculate_framework_scores(
    answers: Mapping, catalog: QuestionCatalog, domain_knowledge_score: int
) -> FrameworkScores:
    """
    Derives each framework dimension from its source question. Skill reuses
    the domain-knowledge category score rather than recomputing it.
    """
    rules = catalog.scoring_rules
    sources = catalog.dimension_sources

    def from_source(question_id: str) -> int:
        return round_half_up(score_question(catalog.get(question_id), answers.get(question_id), rules))

    return FrameworkScores(
        persistence=from_source(sources.persistence),
        interest=from_source(sources.interest),
        skill=domain_knowledge_score,
        cognitive=from_source(sources.cognitive),
        ability_to_learn=from_source(sources.ability_to_learn),
        real_world_alignment=from_source(sources.real_world_alignment),
    )


def calculate_overall_score(category_scores: CategoryScores, framework_scores: FrameworkScores) -> int:
    """
    Three-term average: disposition, domain knowledge and the mean of the
    framework dimensions. The readiness-framework category score is not a term.
    """
    dimension_values: List[int] = framework_scores.values()
    framework_mean = sum(dimension_values) / len(dimension_values)
    return round_half_up(
        (category_scores.disposition + category_scores.domain_knowledge + framework_mean) / 3
    )


def determine_recommendation(overall_score: int, rules: Optional[ScoringRules] = None) -> Recommendation:
    rules = rules or ScoringRules()
    if overall_score >= rules.strong_match_threshold:
        return Recommendation.STRONG_MATCH
    if overall_score >= rules.good_potential_threshold:
        return Recommendation.GOOD_POTENTIAL
    return Recommendation.CONSIDER_ALTERNATIVES


def compute_result(answers: Mapping, catalog: Optional[QuestionCatalog] = None) -> AssessmentResult:
    """
    Scores a submission.

    Args:
        answers: question id -> raw answer ("1".."5" for scaled questions,
                 the selected option text otherwise). May be an AnswerSet.
        catalog: the catalog the answers were collected against; defaults to
                 the embedded smart city catalog.

    Returns:
        A fresh, immutable AssessmentResult.

    Raises:
        InvalidSubmissionError: an id or value is outside the catalog's domain.
        CatalogConfigurationError: a category has nothing to score.
    """
    if catalog is None:
        catalog = default_catalog()
    validate_answers(answers, catalog)

    category_scores = calculate_category_scores(answers, catalog)
    framework_scores = calculate_framework_scores(answers, catalog, category_scores.domain_knowledge)
    overall_score = calculate_overall_score(category_scores, framework_scores)
    recommendation = determine_recommendation(overall_score, catalog.scoring_rules)

    logger.debug(
        "Scored %d/%d answers: categories=%s framework=%s overall=%d (%s)",
        len(answers), len(catalog),
        category_scores.model_dump(), framework_scores.model_dump(),
        overall_score, recommendation.value,
    )

    return AssessmentResult(
        category_scores=category_scores,
        framework_scores=framework_scores,
        overall_score=overall_score,
        recommendation=recommendation,
    )
