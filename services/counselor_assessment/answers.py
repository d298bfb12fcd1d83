# services/counselor_assessment/answers.py
# Recording and looking up respondent answers on a SessionState.

import logging
from datetime import datetime
from typing import Optional, Union

from .models import (
    Answer,
    AnswerValidationError,
    AnswerValue,
    OptionIndex,
    Question,
    QuestionCatalog,
    Rating,
    SessionState,
    UnknownQuestionError,
)

logger = logging.getLogger(__name__)

RawAnswerValue = Union[int, Rating, OptionIndex]


def coerce_answer_value(question: Question, value: RawAnswerValue) -> AnswerValue:
    """
    Turns a plain integer into the answer variant the question expects.
    Tagged values are passed through for validation.
    """
    if isinstance(value, (Rating, OptionIndex)):
        return value
    # bool is an int subclass but never a meaningful rating or option
    if isinstance(value, bool) or not isinstance(value, int):
        raise AnswerValidationError(
            f"Answer for question '{question.id}' must be an integer, got {type(value).__name__}"
        )
    if question.response_type == "scaled-rating":
        return Rating(value=value)
    return OptionIndex(value=value)


def validate_answer_value(question: Question, value: AnswerValue) -> None:
    if question.response_type == "scaled-rating":
        if not isinstance(value, Rating):
            raise AnswerValidationError(f"Question '{question.id}' expects a rating, got {value.kind}")
        if not 1 <= value.value <= question.scale:
            raise AnswerValidationError(
                f"Rating {value.value} for question '{question.id}' is outside 1..{question.scale}"
            )
    else:
        if not isinstance(value, OptionIndex):
            raise AnswerValidationError(f"Question '{question.id}' expects an option index, got {value.kind}")
        if not 0 <= value.value < len(question.options):
            raise AnswerValidationError(
                f"Option index {value.value} for question '{question.id}' is outside 0..{len(question.options) - 1}"
            )


def record_answer(
    state: SessionState,
    catalog: QuestionCatalog,
    question_id: str,
    value: RawAnswerValue,
    now: datetime,
) -> SessionState:
    """
    Upserts the answer for `question_id`, replacing any earlier one.

    Raises:
        UnknownQuestionError: If the question is not part of the catalog.
        AnswerValidationError: If the value does not fit the question's response type.
    """
    question = catalog.get_question(question_id)
    if question is None:
        raise UnknownQuestionError(f"Unknown question ID: {question_id}")

    answer_value = coerce_answer_value(question, value)
    validate_answer_value(question, answer_value)

    answers = dict(state.answers)
    if question_id in answers:
        logger.debug(f"Replacing earlier answer for question '{question_id}'")
    answers[question_id] = Answer(question_id=question_id, value=answer_value, captured_at=now)
    return state.model_copy(update={"answers": answers})


def lookup_answer(state: SessionState, question_id: str) -> Optional[AnswerValue]:
    answer = state.answers.get(question_id)
    return answer.value if answer else None
