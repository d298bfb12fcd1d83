from fastapi import APIRouter, HTTPException, Depends, Request
import logging

from src.schemas.assessment import AnswerRequest, QuestionView, ResultsResponse, SessionSnapshot
from services.counselor_assessment.engine import AssessmentEngine
from services.counselor_assessment.models import (
    AnswerValidationError,
    UnknownQuestionError,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def get_assessment_engine(request: Request) -> AssessmentEngine:
    # One in-memory session per process, created at application startup
    return request.app.state.assessment_engine


def build_snapshot(engine: AssessmentEngine, changed: bool = False) -> SessionSnapshot:
    state = engine.state
    question = engine.current_question()
    question_view = None
    if question is not None:
        labels = engine.rating_labels()
        question_view = QuestionView(
            question=question,
            section_title=engine.current_section_title(),
            rating_labels=labels if question.response_type == "scaled-rating" and question.scale == len(labels) else [],
        )
    return SessionSnapshot(
        section=state.section.value,
        question_index=state.question_index,
        position=engine.position(),
        question_number=engine.question_number(),
        total_questions=engine.total_questions(),
        progress_percent=engine.progress_percent(),
        can_advance=engine.can_advance(),
        can_retreat=engine.can_retreat(),
        is_complete=state.is_complete,
        current_question=question_view,
        current_answer=engine.current_answer(),
        changed=changed,
    )


@router.get("/assessment", response_model=SessionSnapshot)
async def get_session(engine: AssessmentEngine = Depends(get_assessment_engine)):
    return build_snapshot(engine)


@router.post("/assessment/start", response_model=SessionSnapshot)
async def start_assessment(engine: AssessmentEngine = Depends(get_assessment_engine)):
    return build_snapshot(engine, changed=engine.start())


@router.post("/assessment/answers", response_model=SessionSnapshot)
async def record_answer(
    request: AnswerRequest,
    engine: AssessmentEngine = Depends(get_assessment_engine),
):
    """
    Records the respondent's answer for a question, replacing any earlier one.
    """
    try:
        engine.record_answer(request.question_id, request.value)
    except UnknownQuestionError as e:
        logger.warning(f"Answer rejected for unknown question: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except AnswerValidationError as e:
        logger.warning(f"Answer rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error recording answer for {request.question_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="An unexpected error occurred while recording the answer.")
    return build_snapshot(engine, changed=True)


@router.post("/assessment/advance", response_model=SessionSnapshot)
async def advance(engine: AssessmentEngine = Depends(get_assessment_engine)):
    return build_snapshot(engine, changed=engine.advance())


@router.post("/assessment/retreat", response_model=SessionSnapshot)
async def retreat(engine: AssessmentEngine = Depends(get_assessment_engine)):
    return build_snapshot(engine, changed=engine.retreat())


@router.get("/assessment/results", response_model=ResultsResponse)
async def get_results(engine: AssessmentEngine = Depends(get_assessment_engine)):
    try:
        results = engine.compute_results()
    except Exception as e:
        logger.error(f"Unexpected error computing results: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="An unexpected error occurred while computing results.")
    return ResultsResponse(**results.model_dump(), dimension_labels=engine.dimension_labels())


@router.post("/assessment/restart", response_model=SessionSnapshot)
async def restart(engine: AssessmentEngine = Depends(get_assessment_engine)):
    engine.restart()
    return build_snapshot(engine, changed=True)
