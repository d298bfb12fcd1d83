from typing import Dict, List, Optional
from pydantic import BaseModel, StrictInt

from services.counselor_assessment.models import AnswerValue, AssessmentResults, Question


class AnswerRequest(BaseModel):
    question_id: str
    value: StrictInt  # rating or option index, per the question's response type


class QuestionView(BaseModel):
    question: Question
    section_title: Optional[str] = None
    rating_labels: List[str] = []


class SessionSnapshot(BaseModel):
    section: str
    question_index: int
    position: int
    question_number: int
    total_questions: int
    progress_percent: float
    can_advance: bool
    can_retreat: bool
    is_complete: bool
    current_question: Optional[QuestionView] = None  # None shows as a "loading" placeholder
    current_answer: Optional[AnswerValue] = None
    changed: bool = False


class ResultsResponse(AssessmentResults):
    dimension_labels: Dict[str, str] = {}
