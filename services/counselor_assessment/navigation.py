# services/counselor_assessment/navigation.py
# Question sequencing for an assessment session.
#
# Every function here is pure: it takes a SessionState (and the catalog it
# walks over) and returns either a derived value or a new SessionState.
# Requests that cannot be honoured return the state unchanged.

import logging
from datetime import datetime
from typing import Optional

from .models import QUESTION_SECTIONS, Question, QuestionCatalog, Section, SessionState

logger = logging.getLogger(__name__)

# Transition table consulted by both advance and retreat
SECTION_ORDER = (
    Section.INTRO,
    Section.PSYCHOMETRIC,
    Section.TECHNICAL,
    Section.WISCAR,
    Section.RESULTS,
)


def next_section(section: Section) -> Optional[Section]:
    position = SECTION_ORDER.index(section)
    if position + 1 < len(SECTION_ORDER):
        return SECTION_ORDER[position + 1]
    return None


def previous_question_section(section: Section) -> Optional[Section]:
    """The question section before `section`, or None when there is none to step back into."""
    if section not in QUESTION_SECTIONS:
        return None
    position = SECTION_ORDER.index(section)
    candidate = SECTION_ORDER[position - 1]
    return candidate if candidate in QUESTION_SECTIONS else None


def initial_state(now: datetime) -> SessionState:
    return SessionState(started_at=now)


def start(state: SessionState, now: datetime) -> SessionState:
    """Leaves the intro for the first psychometric question."""
    if state.section != Section.INTRO:
        logger.debug(f"Ignoring start request: session already in '{state.section.value}'")
        return state
    return state.model_copy(update={
        "section": Section.PSYCHOMETRIC,
        "question_index": 0,
        "started_at": now,
    })


def current_question(state: SessionState, catalog: QuestionCatalog) -> Optional[Question]:
    questions = catalog.questions_for(state.section)
    if 0 <= state.question_index < len(questions):
        return questions[state.question_index]
    return None


def can_advance(state: SessionState, catalog: QuestionCatalog) -> bool:
    question = current_question(state, catalog)
    return question is not None and question.id in state.answers


def advance(state: SessionState, catalog: QuestionCatalog) -> SessionState:
    if not can_advance(state, catalog):
        logger.debug(f"Ignoring advance request at {state.section.value}[{state.question_index}]: current question unanswered")
        return state

    next_index = state.question_index + 1
    if next_index < len(catalog.questions_for(state.section)):
        return state.model_copy(update={"question_index": next_index})

    following = next_section(state.section)
    update = {"section": following, "question_index": 0}
    if following == Section.RESULTS:
        update["is_complete"] = True
    return state.model_copy(update=update)


def can_retreat(state: SessionState, catalog: QuestionCatalog) -> bool:
    return state.section in QUESTION_SECTIONS and global_position(state, catalog) > 0


def retreat(state: SessionState, catalog: QuestionCatalog) -> SessionState:
    if not can_retreat(state, catalog):
        logger.debug(f"Ignoring retreat request at {state.section.value}[{state.question_index}]")
        return state

    if state.question_index > 0:
        return state.model_copy(update={"question_index": state.question_index - 1})

    previous = previous_question_section(state.section)
    return state.model_copy(update={
        "section": previous,
        "question_index": len(catalog.questions_for(previous)) - 1,
    })


def global_position(state: SessionState, catalog: QuestionCatalog) -> int:
    """
    Zero-based index of the current question over all sections in order.

    The intro sits at 0 and the results section at total_questions.
    """
    if state.section == Section.INTRO:
        return 0
    if state.section == Section.RESULTS:
        return catalog.total_questions

    position = 0
    for section in QUESTION_SECTIONS:
        if section == state.section:
            break
        position += len(catalog.questions_for(section))
    return position + state.question_index


def progress_percent(state: SessionState, catalog: QuestionCatalog) -> float:
    total = catalog.total_questions
    if total == 0:
        return 0.0
    return global_position(state, catalog) / total * 100


def question_number(state: SessionState, catalog: QuestionCatalog) -> int:
    """Human-facing "question N of M" counter."""
    return global_position(state, catalog) + 1
