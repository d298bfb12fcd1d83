import logging
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from . import answers as answer_store
from . import navigation
from .definitions import DIMENSION_LABELS, RATING_LABELS, SECTION_TITLES
from .loader import load_catalog_from_file, load_default_catalog
from .models import (
    AnswerValue,
    AssessmentResults,
    Question,
    QuestionCatalog,
    SessionState,
)
from .answers import RawAnswerValue
from .scorer import compute_results

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AssessmentEngine:
    """
    Owns one assessment session and exposes the operations a presentation
    layer drives it with.

    State transitions are delegated to the pure functions in `navigation` and
    `answers`; the engine only swaps in the returned SessionState.
    """
    def __init__(
        self,
        catalog: Optional[QuestionCatalog] = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """
        Args:
            catalog: Question catalog to administer. Defaults to the built-in bank.
            clock: Source of timestamps for the start time and answer capture.
        """
        self.catalog = catalog if catalog is not None else load_default_catalog()
        self._clock = clock
        self._state = navigation.initial_state(self._clock())

    @classmethod
    def from_catalog_file(cls, config_path: str, **kwargs) -> "AssessmentEngine":
        return cls(catalog=load_catalog_from_file(config_path), **kwargs)

    @property
    def state(self) -> SessionState:
        return self._state

    def start(self) -> bool:
        previous = self._state
        self._state = navigation.start(self._state, self._clock())
        if self._state is previous:
            return False
        logger.info(f"Assessment started with {self.catalog.total_questions} questions")
        return True

    def record_answer(self, question_id: str, value: RawAnswerValue) -> None:
        """
        Raises:
            UnknownQuestionError: If the question is not in the catalog.
            AnswerValidationError: If the value does not fit the question.
        """
        self._state = answer_store.record_answer(
            self._state, self.catalog, question_id, value, self._clock()
        )

    def answer_for(self, question_id: str) -> Optional[AnswerValue]:
        return answer_store.lookup_answer(self._state, question_id)

    def advance(self) -> bool:
        previous = self._state
        self._state = navigation.advance(self._state, self.catalog)
        if self._state.is_complete and not previous.is_complete:
            logger.info(f"Assessment complete with {len(self._state.answers)} answers recorded")
        return self._state is not previous

    def retreat(self) -> bool:
        previous = self._state
        self._state = navigation.retreat(self._state, self.catalog)
        return self._state is not previous

    def current_question(self) -> Optional[Question]:
        return navigation.current_question(self._state, self.catalog)

    def current_answer(self) -> Optional[AnswerValue]:
        question = self.current_question()
        return self.answer_for(question.id) if question else None

    def current_section_title(self) -> Optional[str]:
        return SECTION_TITLES.get(self._state.section.value)

    def rating_labels(self) -> List[str]:
        return list(RATING_LABELS)

    def dimension_labels(self) -> Dict[str, str]:
        return dict(DIMENSION_LABELS)

    def can_advance(self) -> bool:
        return navigation.can_advance(self._state, self.catalog)

    def can_retreat(self) -> bool:
        return navigation.can_retreat(self._state, self.catalog)

    def position(self) -> int:
        return navigation.global_position(self._state, self.catalog)

    def progress_percent(self) -> float:
        return navigation.progress_percent(self._state, self.catalog)

    def question_number(self) -> int:
        return navigation.question_number(self._state, self.catalog)

    def total_questions(self) -> int:
        return self.catalog.total_questions

    def compute_results(self) -> AssessmentResults:
        results = compute_results(self._state.answers, self.catalog)
        logger.info(
            "Computed assessment results",
            extra={
                "overall_confidence_score": round(results.overall_confidence_score, 1),
                "recommendation": results.recommendation.value,
            },
        )
        return results

    def restart(self) -> None:
        self._state = navigation.initial_state(self._clock())
        logger.info("Assessment restarted")
