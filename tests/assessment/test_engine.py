# tests/assessment/test_engine.py
from datetime import datetime, timezone

import pytest
import yaml
from pytest import approx

from services.counselor_assessment.definitions import DEFAULT_CATALOG_DATA, RATING_LABELS
from services.counselor_assessment.engine import AssessmentEngine
from services.counselor_assessment.models import (
    AnswerValidationError,
    OptionIndex,
    Rating,
    Recommendation,
    Section,
    UnknownQuestionError,
)

START = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


# --- Helper Functions ---
def answer_and_advance(engine, value=None):
    question = engine.current_question()
    if value is None:
        if question.response_type == "scaled-rating":
            value = 5
        else:
            value = engine.catalog.answer_key[question.id]
    engine.record_answer(question.id, value)
    assert engine.advance() is True


def test_default_engine_uses_built_in_catalog():
    engine = AssessmentEngine()
    assert engine.total_questions() == 20
    assert engine.state.section == Section.INTRO
    assert engine.state.started_at is not None


def test_start_stamps_clock_and_reports_change(engine):
    assert engine.state.started_at == START
    assert engine.start() is True
    assert engine.state.section == Section.PSYCHOMETRIC
    assert engine.state.started_at > START
    assert engine.start() is False


def test_intro_accessors(engine):
    assert engine.current_question() is None
    assert engine.current_answer() is None
    assert engine.position() == 0
    assert engine.progress_percent() == 0
    assert engine.can_advance() is False
    assert engine.can_retreat() is False
    assert engine.current_section_title() is None


def test_advance_and_retreat_report_whether_state_changed(started_engine):
    assert started_engine.advance() is False
    assert started_engine.retreat() is False

    started_engine.record_answer("p1", 4)
    assert started_engine.can_advance() is True
    assert started_engine.advance() is True
    assert started_engine.question_number() == 2
    assert started_engine.retreat() is True
    assert started_engine.current_answer() == Rating(value=4)


def test_record_answer_errors_propagate(started_engine):
    with pytest.raises(UnknownQuestionError):
        started_engine.record_answer("zz", 1)
    with pytest.raises(AnswerValidationError):
        started_engine.record_answer("p1", 0)
    assert started_engine.state.answers == {}


def test_answer_for_returns_tagged_value(started_engine):
    started_engine.record_answer("t4", 3)
    assert started_engine.answer_for("t4") == OptionIndex(value=3)
    assert started_engine.answer_for("t5") is None


def test_section_titles_follow_the_walk(started_engine):
    psychometric_title = started_engine.current_section_title()
    for _ in range(5):
        answer_and_advance(started_engine)
    assert started_engine.state.section == Section.TECHNICAL
    assert started_engine.current_section_title() != psychometric_title


def test_rating_labels_are_a_copy(engine):
    labels = engine.rating_labels()
    assert labels == list(RATING_LABELS)
    assert len(labels) == 5
    labels.clear()
    assert engine.rating_labels() == list(RATING_LABELS)


def test_full_walk_reaches_strong_recommendation(started_engine):
    total = started_engine.total_questions()
    for _ in range(total):
        answer_and_advance(started_engine)

    assert started_engine.state.section == Section.RESULTS
    assert started_engine.state.is_complete is True
    assert started_engine.progress_percent() == approx(100.0)
    assert started_engine.current_question() is None
    assert started_engine.can_retreat() is False

    results = started_engine.compute_results()
    assert results.psychometric_fit == approx(100.0)
    assert results.technical_readiness == approx(100.0)
    assert results.overall_confidence_score == approx(100.0)
    assert results.recommendation == Recommendation.YES
    assert len(results.career_roles) == 5


def test_results_can_be_computed_mid_session(started_engine):
    started_engine.record_answer("p1", 5)
    results = started_engine.compute_results()
    assert results.psychometric_fit == approx(100.0)
    assert results.overall_confidence_score == approx(100.0 / 3)
    assert results.recommendation == Recommendation.NO


def test_restart_clears_everything(started_engine):
    for _ in range(7):
        answer_and_advance(started_engine)
    before = started_engine.state.started_at

    started_engine.restart()

    state = started_engine.state
    assert state.section == Section.INTRO
    assert state.question_index == 0
    assert state.answers == {}
    assert state.is_complete is False
    assert state.started_at > before


def test_restart_after_completion_allows_new_walk(started_engine):
    for _ in range(started_engine.total_questions()):
        answer_and_advance(started_engine)
    started_engine.restart()
    assert started_engine.start() is True
    assert started_engine.current_question().id == "p1"


def test_from_catalog_file(tmp_path, clock):
    data = {
        "psychometric": DEFAULT_CATALOG_DATA["psychometric"][:1],
        "technical": DEFAULT_CATALOG_DATA["technical"][:1],
        "wiscar-framework": DEFAULT_CATALOG_DATA["wiscar-framework"][:2],
        "answer_key": {"t1": DEFAULT_CATALOG_DATA["answer_key"]["t1"]},
    }
    catalog_file = tmp_path / "catalog.yaml"
    catalog_file.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")

    engine = AssessmentEngine.from_catalog_file(str(catalog_file), clock=clock)

    assert engine.total_questions() == 4
    assert engine.state.started_at == START
    engine.start()
    for _ in range(4):
        answer_and_advance(engine)
    assert engine.state.is_complete is True
