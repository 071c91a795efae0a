from enum import Enum
from typing import Annotated, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


# Custom Error Classes
class InvalidSubmissionError(ValueError):
    """Raised when an answer id or value falls outside the catalog's domain."""
    pass

class CatalogConfigurationError(ValueError):
    """Raised when the question catalog cannot be scored (empty category, missing source question, bad file)."""
    pass

class SessionStateError(RuntimeError):
    """Raised when an assessment session is driven out of order."""
    pass


SCALE_MIN = 1
SCALE_MAX = 5
SCALE_VALUES = tuple(str(v) for v in range(SCALE_MIN, SCALE_MAX + 1))


class QuestionType(str, Enum):
    SCALED = "scaled"
    SINGLE_CHOICE = "single-choice"
    BINARY = "binary"

class Category(str, Enum):
    DISPOSITION = "disposition"
    DOMAIN_KNOWLEDGE = "domain-knowledge"
    READINESS_FRAMEWORK = "readiness-framework"

class OptionTier(str, Enum):
    # single-choice
    BEST = "best"
    NEUTRAL = "neutral"
    UNFAMILIAR = "unfamiliar"
    # binary
    POSITIVE = "positive"
    NEGATIVE = "negative"

class Recommendation(str, Enum):
    STRONG_MATCH = "Strong Match"
    GOOD_POTENTIAL = "Good Potential"
    CONSIDER_ALTERNATIVES = "Consider Alternatives"


SINGLE_CHOICE_TIERS = {OptionTier.BEST, OptionTier.NEUTRAL, OptionTier.UNFAMILIAR}
BINARY_TIERS = {OptionTier.POSITIVE, OptionTier.NEGATIVE}


class ScaleBounds(BaseModel):
    model_config = ConfigDict(frozen=True)

    low: str
    high: str

class AnswerOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    tier: OptionTier = OptionTier.NEUTRAL

class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: QuestionType
    category: Category
    section: str = ""
    prompt: str
    scale_bounds: Optional[ScaleBounds] = None
    options: List[AnswerOption] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_shape(self) -> "Question":
        if self.type == QuestionType.SCALED:
            if self.scale_bounds is None:
                raise ValueError(f"Scaled question '{self.id}' requires scale_bounds")
            if self.options:
                raise ValueError(f"Scaled question '{self.id}' must not define options")
            return self

        if len(self.options) < 2:
            raise ValueError(f"Question '{self.id}' requires at least two options")
        texts = [o.text for o in self.options]
        if len(set(texts)) != len(texts):
            raise ValueError(f"Duplicate option text in question '{self.id}'")

        tiers = [o.tier for o in self.options]
        if self.type == QuestionType.SINGLE_CHOICE:
            if not set(tiers) <= SINGLE_CHOICE_TIERS:
                raise ValueError(f"Single-choice question '{self.id}' uses a binary tier")
            if tiers.count(OptionTier.BEST) != 1:
                raise ValueError(f"Single-choice question '{self.id}' must have exactly one best option")
        else:
            if len(self.options) != 2 or set(tiers) != BINARY_TIERS:
                raise ValueError(
                    f"Binary question '{self.id}' must have exactly one positive and one negative option"
                )
        return self

    @property
    def option_texts(self) -> List[str]:
        return [o.text for o in self.options]

    def option_for(self, text: str) -> Optional[AnswerOption]:
        for option in self.options:
            if option.text == text:
                return option
        return None

class DimensionSources(BaseModel):
    """Question ids feeding the framework dimensions. Skill is derived from the domain-knowledge category."""
    model_config = ConfigDict(frozen=True)

    persistence: str
    interest: str
    cognitive: str
    ability_to_learn: str
    real_world_alignment: str

PointValue = Annotated[int, Field(ge=0, le=100)]

class ScoringRules(BaseModel):
    """Points per answer and tier thresholds. Every value lands on the 0-100 score scale."""
    model_config = ConfigDict(frozen=True)

    scale_multiplier: int = Field(20, ge=0)
    neutral_scale_value: int = Field(3, ge=SCALE_MIN, le=SCALE_MAX)
    best_points: PointValue = 100
    neutral_points: PointValue = 60
    unfamiliar_points: PointValue = 20
    positive_points: PointValue = 85
    negative_points: PointValue = 45
    strong_match_threshold: PointValue = 80
    good_potential_threshold: PointValue = 65

    @model_validator(mode="after")
    def _check_ranges(self) -> "ScoringRules":
        if self.scale_multiplier * SCALE_MAX > 100:
            raise ValueError(
                f"scale_multiplier {self.scale_multiplier} takes a {SCALE_MAX} answer past 100"
            )
        if self.good_potential_threshold > self.strong_match_threshold:
            raise ValueError(
                f"good_potential_threshold ({self.good_potential_threshold}) must not exceed "
                f"strong_match_threshold ({self.strong_match_threshold})"
            )
        return self

class CatalogConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str
    title: str = ""
    questions: List[Question]
    dimension_sources: DimensionSources
    scoring_rules: ScoringRules = Field(default_factory=ScoringRules)


# --- Result ---

ScoreValue = Annotated[int, Field(ge=0, le=100)]

class _ResultModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

class CategoryScores(_ResultModel):
    disposition: ScoreValue
    domain_knowledge: ScoreValue
    readiness_framework: ScoreValue

class FrameworkScores(_ResultModel):
    persistence: ScoreValue
    interest: ScoreValue
    skill: ScoreValue
    cognitive: ScoreValue
    ability_to_learn: ScoreValue
    real_world_alignment: ScoreValue

    def values(self) -> List[int]:
        return [getattr(self, name) for name in type(self).model_fields]

class AssessmentResult(_ResultModel):
    category_scores: CategoryScores
    framework_scores: FrameworkScores
    overall_score: ScoreValue
    recommendation: Recommendation

    def to_dict(self) -> Dict[str, object]:
        """Flat camelCase representation handed to renderers and storage."""
        return self.model_dump(mode="json", by_alias=True)
