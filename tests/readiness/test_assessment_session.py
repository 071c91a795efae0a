import pytest

from services.readiness_engine.models import InvalidSubmissionError, Recommendation, SessionStateError
from services.readiness_engine.session import AssessmentSession


@pytest.fixture
def session(catalog):
    return AssessmentSession(catalog)


def _answer_all(session, answers):
    while True:
        session.answer(answers[session.current_question.id])
        if session.is_last:
            return
        session.next()


def test_session_starts_at_first_question(session):
    assert session.current_question.id == "psych_1"
    assert session.position == 1
    assert session.total == 15
    assert session.is_first
    assert not session.can_proceed
    assert session.result is None

def test_progress_counts_current_question(session):
    assert session.progress == pytest.approx(100 / 15)
    session.answer("3")
    session.next()
    assert session.progress == pytest.approx(200 / 15)

def test_cannot_proceed_without_answer(session):
    with pytest.raises(SessionStateError, match="'psych_1' has not been answered"):
        session.next()

def test_answer_then_next(session):
    session.answer("4")
    assert session.can_proceed
    assert session.next().id == "psych_2"
    assert session.answers["psych_1"] == "4"

def test_previous_is_noop_on_first_question(session):
    assert session.previous().id == "psych_1"

def test_revisit_and_overwrite(session):
    session.answer("2")
    session.next()
    session.answer("3")
    session.previous()
    assert session.current_question.id == "psych_1"
    session.answer("5")
    assert session.answers["psych_1"] == "5"
    assert session.next().id == "psych_2"
    assert session.can_proceed

def test_go_to_earlier_question(session):
    session.answer("2")
    session.next()
    session.answer("2")
    session.next()
    assert session.go_to(0).id == "psych_1"
    with pytest.raises(SessionStateError):
        session.go_to(5)

def test_invalid_answer_is_not_recorded(session):
    with pytest.raises(InvalidSubmissionError):
        session.answer("9")
    assert not session.can_proceed

def test_submit_only_on_last_question(session):
    session.answer("3")
    with pytest.raises(SessionStateError, match="only available on the last question"):
        session.submit()

def test_next_on_last_question_asks_for_submit(session, best_answers):
    _answer_all(session, best_answers)
    with pytest.raises(SessionStateError, match="submit instead"):
        session.next()

def test_full_walkthrough_submits_once(session, best_answers):
    _answer_all(session, best_answers)
    assert session.is_last
    assert session.progress == pytest.approx(100.0)

    result = session.submit()
    assert result.recommendation == Recommendation.STRONG_MATCH
    assert result.overall_score == 99
    assert session.result is result
    assert session.is_submitted

    with pytest.raises(SessionStateError, match="already submitted"):
        session.submit()
    with pytest.raises(SessionStateError):
        session.answer("5")

def test_submit_requires_answer_on_last_question(session, best_answers):
    _answer_all(session, best_answers)
    session.answers.clear(session.current_question.id)
    with pytest.raises(SessionStateError, match="'wiscar_5' has not been answered"):
        session.submit()

def test_sessions_do_not_share_answers(catalog):
    first = AssessmentSession(catalog)
    second = AssessmentSession(catalog)
    first.answer("5")
    assert not second.can_proceed
    assert first.catalog is second.catalog
