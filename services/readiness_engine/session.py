import logging
from typing import Optional

from .answers import AnswerSet, AnswerValue
from .catalog import QuestionCatalog, default_catalog
from .models import AssessmentResult, Question, SessionStateError
from .scorer import compute_result

logger = logging.getLogger(__name__)


class AssessmentSession:
    """
    Walks one respondent through the catalog a question at a time.

    Holds the cursor and the respondent's AnswerSet, gates moving forward on
    the current question being answered, and scores the answers exactly once
    on submit. The result stays on the session for whatever renders it.
    """

    def __init__(self, catalog: Optional[QuestionCatalog] = None):
        self.catalog = catalog if catalog is not None else default_catalog()
        self.answers = AnswerSet(self.catalog)
        self.result: Optional[AssessmentResult] = None
        self._index = 0

    @property
    def current_question(self) -> Question:
        return self.catalog.questions[self._index]

    @property
    def position(self) -> int:
        return self._index + 1

    @property
    def total(self) -> int:
        return len(self.catalog)

    @property
    def progress(self) -> float:
        """Percent of the way through the catalog, counting the current question."""
        return self.position / self.total * 100

    @property
    def is_first(self) -> bool:
        return self._index == 0

    @property
    def is_last(self) -> bool:
        return self._index == self.total - 1

    @property
    def is_submitted(self) -> bool:
        return self.result is not None

    @property
    def can_proceed(self) -> bool:
        return self.answers.is_answered(self.current_question.id)

    def _ensure_open(self):
        if self.is_submitted:
            raise SessionStateError("Assessment already submitted")

    def answer(self, value: AnswerValue) -> str:
        self._ensure_open()
        return self.answers.record(self.current_question.id, value)

    def next(self) -> Question:
        self._ensure_open()
        if not self.can_proceed:
            raise SessionStateError(f"Question '{self.current_question.id}' has not been answered")
        if self.is_last:
            raise SessionStateError("Already at the last question; submit instead")
        self._index += 1
        return self.current_question

    def previous(self) -> Question:
        self._ensure_open()
        if not self.is_first:
            self._index -= 1
        return self.current_question

    def go_to(self, index: int) -> Question:
        """Jumps to an earlier question to revise it."""
        self._ensure_open()
        if not 0 <= index <= self._index:
            raise SessionStateError(f"Cannot jump to question {index} from question {self._index}")
        self._index = index
        return self.current_question

    def submit(self) -> AssessmentResult:
        self._ensure_open()
        if not self.is_last:
            raise SessionStateError("Submit is only available on the last question")
        if not self.can_proceed:
            raise SessionStateError(f"Question '{self.current_question.id}' has not been answered")

        self.result = compute_result(self.answers, self.catalog)
        logger.info(
            f"Assessment submitted: overall={self.result.overall_score} "
            f"recommendation={self.result.recommendation.value} "
            f"unanswered={len(self.answers.unanswered())}"
        )
        return self.result
