from collections.abc import Mapping
from typing import Dict, Iterator, List, Union

from .catalog import QuestionCatalog
from .models import SCALE_VALUES, InvalidSubmissionError, Question, QuestionType

AnswerValue = Union[str, int]


def validate_answer(question: Question, value: object) -> str:
    """
    Checks a raw answer against the question's domain and returns it as stored.

    Scaled answers are the strings "1".."5"; choice answers must match one of
    the option texts verbatim. Nothing is coerced beyond turning an int scale
    value into its string form.
    """
    if question.type == QuestionType.SCALED:
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str) or value not in SCALE_VALUES:
            raise InvalidSubmissionError(
                f"Invalid answer {value!r} for scaled question '{question.id}'. Valid values: {list(SCALE_VALUES)}"
            )
        return value

    if not isinstance(value, str) or question.option_for(value) is None:
        raise InvalidSubmissionError(
            f"Invalid answer {value!r} for question '{question.id}'. Valid options: {question.option_texts}"
        )
    return value


class AnswerSet(Mapping):
    """
    One respondent's answers, keyed by question id.

    Every recorded value has been checked against the catalog, and recording
    the same question twice keeps the latest value.
    """

    def __init__(self, catalog: QuestionCatalog):
        self.catalog = catalog
        self._answers: Dict[str, str] = {}

    @classmethod
    def from_mapping(cls, catalog: QuestionCatalog, answers: Mapping) -> "AnswerSet":
        answer_set = cls(catalog)
        for question_id, value in answers.items():
            answer_set.record(question_id, value)
        return answer_set

    def _question(self, question_id: str) -> Question:
        if question_id not in self.catalog:
            raise InvalidSubmissionError(f"Unknown question id: {question_id}")
        return self.catalog.get(question_id)

    def record(self, question_id: str, value: AnswerValue) -> str:
        stored = validate_answer(self._question(question_id), value)
        self._answers[question_id] = stored
        return stored

    def clear(self, question_id: str) -> None:
        self._question(question_id)
        self._answers.pop(question_id, None)

    def is_answered(self, question_id: str) -> bool:
        return question_id in self._answers

    def unanswered(self) -> List[str]:
        return [qid for qid in self.catalog.ids if qid not in self._answers]

    @property
    def is_complete(self) -> bool:
        return len(self._answers) == len(self.catalog)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._answers)

    def __getitem__(self, question_id: str) -> str:
        return self._answers[question_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._answers)

    def __len__(self) -> int:
        return len(self._answers)

    def __repr__(self) -> str:
        return f"AnswerSet({len(self._answers)}/{len(self.catalog)} answered)"
