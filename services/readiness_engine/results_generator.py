# services/readiness_engine/results_generator.py
# Builds the descriptive results report shown after an assessment.

import logging
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from .models import AssessmentResult, Recommendation

logger = logging.getLogger(__name__)

# --- Report content ---

RECOMMENDATION_MESSAGES = {
    Recommendation.STRONG_MATCH: "You show excellent alignment with smart city infrastructure roles!",
    Recommendation.GOOD_POTENTIAL: "You have good potential with some areas to develop.",
    Recommendation.CONSIDER_ALTERNATIVES: "Consider exploring related fields that might be a better fit.",
}

CATEGORY_LABELS = {
    "disposition": "Psychometric Fit",
    "domain_knowledge": "Technical Readiness",
    "readiness_framework": "WISCAR Readiness",
}

DIMENSION_LABELS = {
    "persistence": "Will",
    "interest": "Interest",
    "skill": "Skill",
    "cognitive": "Cognitive",
    "ability_to_learn": "Ability to Learn",
    "real_world_alignment": "Real World",
}

EXCELLENT_THRESHOLD = 80
GOOD_THRESHOLD = 60

CAREER_ROLES = [
    "Smart City Infrastructure Specialist",
    "Urban IoT Systems Engineer",
    "Digital Twin Analyst",
    "Sustainable Urban Planner",
    "Smart Mobility Expert",
]

LEARNING_PATH = [
    {
        "level": "Beginner",
        "courses": [
            "Intro to Smart Cities (Coursera/EdX)",
            "What is IoT? Basics of connectivity and sensors",
            "Urban Planning 101",
        ],
    },
    {
        "level": "Intermediate",
        "courses": [
            "Smart Mobility, Energy & Waste Management Systems",
            "Understanding Urban Data Pipelines",
            "Working with Smart Infrastructure APIs",
        ],
    },
    {
        "level": "Advanced",
        "courses": [
            "Digital Twins and GIS systems",
            "Cybersecurity in Urban Networks",
            "Public-Private Partnerships for Smart Cities",
        ],
    },
]

ALTERNATIVE_CAREERS = [
    {"role": "Environmental Data Analyst", "reason": "More data-driven focus"},
    {"role": "Urban UX Designer", "reason": "Creative problem solving approach"},
    {"role": "Civil Engineering Technologist", "reason": "Hands-on with physical systems"},
    {"role": "Smart Grid Technician", "reason": "Energy systems specialization"},
]

NEXT_STEPS = {
    Recommendation.STRONG_MATCH: {
        "intro": "Ready to start your journey:",
        "steps": [
            "Enroll in a smart city fundamentals course",
            "Join civic hackathons or smart city projects",
            "Connect with urban tech communities",
        ],
    },
    Recommendation.GOOD_POTENTIAL: {
        "intro": "Build your foundation:",
        "steps": [
            "Start with IoT and urban systems basics",
            "Practice with smart city simulation tools",
            "Explore open data projects in your city",
        ],
    },
}


# --- Report models ---

class ScoreLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    score: int
    badge: str

class LearningLevel(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: str
    courses: List[str]

class AlternativeCareer(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: str
    reason: str

class NextSteps(BaseModel):
    model_config = ConfigDict(frozen=True)

    intro: str
    steps: List[str]

class ResultsReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_score: int
    recommendation: Recommendation
    message: str
    category_breakdown: List[ScoreLine]
    framework_breakdown: List[ScoreLine]
    career_roles: List[str]
    learning_path: List[LearningLevel]
    alternative_careers: List[AlternativeCareer]
    next_steps: Optional[NextSteps] = None


# --- Report generation ---

def score_badge(score: int) -> str:
    """Qualitative badge for a single 0-100 score."""
    if score >= EXCELLENT_THRESHOLD:
        return "Excellent"
    if score >= GOOD_THRESHOLD:
        return "Good"
    return "Needs Work"


def _score_lines(scores: Dict[str, int], labels: Dict[str, str]) -> List[ScoreLine]:
    return [
        ScoreLine(key=key, label=labels.get(key, key.replace("_", " ").title()), score=score, badge=score_badge(score))
        for key, score in scores.items()
    ]


def generate_report(result: AssessmentResult) -> ResultsReport:
    """
    Turns a scored result into the content of the results page.

    Alternative careers are only offered to respondents in the bottom tier;
    next steps are only offered to the two upper tiers.
    """
    recommendation = result.recommendation
    show_alternatives = recommendation == Recommendation.CONSIDER_ALTERNATIVES
    next_steps = NEXT_STEPS.get(recommendation)

    report = ResultsReport(
        overall_score=result.overall_score,
        recommendation=recommendation,
        message=RECOMMENDATION_MESSAGES[recommendation],
        category_breakdown=_score_lines(result.category_scores.model_dump(), CATEGORY_LABELS),
        framework_breakdown=_score_lines(result.framework_scores.model_dump(), DIMENSION_LABELS),
        career_roles=list(CAREER_ROLES),
        learning_path=[LearningLevel(**level) for level in LEARNING_PATH],
        alternative_careers=[AlternativeCareer(**alt) for alt in ALTERNATIVE_CAREERS] if show_alternatives else [],
        next_steps=NextSteps(**next_steps) if next_steps else None,
    )
    logger.debug(f"Generated results report for recommendation '{recommendation.value}'")
    return report
