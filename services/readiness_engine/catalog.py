import logging
from functools import lru_cache
from typing import Any, Dict, Iterator, List, Tuple

from .definitions import DEFAULT_CATALOG_DATA
from .models import (
    CatalogConfig,
    CatalogConfigurationError,
    Category,
    DimensionSources,
    Question,
    QuestionType,
    ScoringRules,
)

logger = logging.getLogger(__name__)

# Dimension -> question type its source question must have
SOURCE_TYPES = {
    "persistence": QuestionType.SCALED,
    "interest": QuestionType.SCALED,
    "cognitive": QuestionType.SCALED,
    "ability_to_learn": QuestionType.SCALED,
    "real_world_alignment": QuestionType.BINARY,
}


class QuestionCatalog:
    """
    Read-only, ordered view over a validated catalog configuration.

    The catalog is validated once at construction; a catalog that would make
    scoring impossible never gets built. Instances hold no mutable state and
    may be shared across any number of assessments.
    """

    def __init__(self, config: CatalogConfig):
        self._config = config
        self._questions: Tuple[Question, ...] = tuple(config.questions)
        self._validate_unique_ids()
        self._build_lookup_maps()
        self._validate_categories()
        self._validate_dimension_sources()
        logger.debug(
            "Question catalog %s loaded with %d questions", config.version, len(self._questions)
        )

    def _validate_unique_ids(self):
        """Checks for duplicate question IDs."""
        ids = set()
        for question in self._questions:
            if question.id in ids:
                raise CatalogConfigurationError(f"Duplicate Question ID found: {question.id}")
            ids.add(question.id)

    def _build_lookup_maps(self):
        self._by_id: Dict[str, Question] = {q.id: q for q in self._questions}
        self._by_category: Dict[Category, Tuple[Question, ...]] = {
            category: tuple(q for q in self._questions if q.category == category)
            for category in Category
        }

    def _validate_categories(self):
        empty = [c.value for c, questions in self._by_category.items() if not questions]
        if empty:
            raise CatalogConfigurationError(f"Categories without questions: {empty}")

    def _validate_dimension_sources(self):
        sources = self._config.dimension_sources
        for dimension, expected_type in SOURCE_TYPES.items():
            question_id = getattr(sources, dimension)
            question = self._by_id.get(question_id)
            if question is None:
                raise CatalogConfigurationError(
                    f"Source question '{question_id}' for dimension '{dimension}' not found in catalog"
                )
            if question.type != expected_type:
                raise CatalogConfigurationError(
                    f"Source question '{question_id}' for dimension '{dimension}' must be "
                    f"{expected_type.value}, got {question.type.value}"
                )

    @property
    def version(self) -> str:
        return self._config.version

    @property
    def title(self) -> str:
        return self._config.title

    @property
    def questions(self) -> Tuple[Question, ...]:
        return self._questions

    @property
    def ids(self) -> List[str]:
        return [q.id for q in self._questions]

    @property
    def dimension_sources(self) -> DimensionSources:
        return self._config.dimension_sources

    @property
    def scoring_rules(self) -> ScoringRules:
        return self._config.scoring_rules

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._by_id

    def get(self, question_id: str) -> Question:
        """Looks up a question by id. Raises KeyError for unknown ids."""
        try:
            return self._by_id[question_id]
        except KeyError:
            raise KeyError(f"Unknown question id: {question_id}") from None

    def by_category(self, category) -> Tuple[Question, ...]:
        return self._by_category[Category(category)]

    def describe(self) -> List[Dict[str, Any]]:
        """
        Returns the questions as plain dicts for presentation.
        Option tiers are scoring data and are left out.
        """
        described = []
        for q in self._questions:
            entry: Dict[str, Any] = {
                "id": q.id,
                "type": q.type.value,
                "category": q.category.value,
                "section": q.section,
                "prompt": q.prompt,
            }
            if q.type == QuestionType.SCALED:
                entry["scale_bounds"] = q.scale_bounds.model_dump()
            else:
                entry["options"] = q.option_texts
            described.append(entry)
        return described


@lru_cache(maxsize=1)
def default_catalog() -> QuestionCatalog:
    """The embedded smart city catalog, built once per process."""
    return QuestionCatalog(CatalogConfig.model_validate(DEFAULT_CATALOG_DATA))
