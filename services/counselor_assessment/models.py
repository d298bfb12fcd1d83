from datetime import datetime
from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Section(str, Enum):
    INTRO = "intro"
    PSYCHOMETRIC = "psychometric"
    TECHNICAL = "technical"
    WISCAR = "wiscar-framework"
    RESULTS = "results"


class Recommendation(str, Enum):
    YES = "Yes"
    MAYBE = "Maybe"
    NO = "No"


# Sections that hold questions, in presentation order
QUESTION_SECTIONS = (Section.PSYCHOMETRIC, Section.TECHNICAL, Section.WISCAR)

DIMENSIONS = (
    "will",
    "interest",
    "skill",
    "cognitive",
    "ability-to-learn",
    "real-world-alignment",
)

ResponseType = Literal["scaled-rating", "single-choice"]


class Question(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    text: str
    response_type: ResponseType = Field(..., alias="type")
    options: Optional[List[str]] = None
    scale: Optional[int] = None
    section: Section
    dimension: Optional[str] = None

    @model_validator(mode="after")
    def check_response_shape(self) -> "Question":
        if self.response_type == "single-choice":
            if not self.options or len(self.options) < 2:
                raise ValueError(f"Single-choice question '{self.id}' needs at least two options")
        elif self.scale is None or self.scale < 2:
            raise ValueError(f"Scaled-rating question '{self.id}' needs a scale of at least 2")
        return self


class Rating(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["rating"] = "rating"
    value: int


class OptionIndex(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["option-index"] = "option-index"
    value: int


AnswerValue = Annotated[Union[Rating, OptionIndex], Field(discriminator="kind")]


class Answer(BaseModel):
    model_config = ConfigDict(frozen=True)

    question_id: str
    value: AnswerValue
    captured_at: datetime


class QuestionCatalog(BaseModel):
    """Ordered questions per scored section plus the technical answer key."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    psychometric: List[Question]
    technical: List[Question]
    wiscar: List[Question] = Field(..., alias="wiscar-framework")
    answer_key: Dict[str, int]

    def questions_for(self, section: Section) -> List[Question]:
        if section == Section.PSYCHOMETRIC:
            return self.psychometric
        if section == Section.TECHNICAL:
            return self.technical
        if section == Section.WISCAR:
            return self.wiscar
        return []

    @property
    def all_questions(self) -> List[Question]:
        return [*self.psychometric, *self.technical, *self.wiscar]

    @property
    def total_questions(self) -> int:
        return len(self.psychometric) + len(self.technical) + len(self.wiscar)

    def get_question(self, question_id: str) -> Optional[Question]:
        for question in self.all_questions:
            if question.id == question_id:
                return question
        return None


class SessionState(BaseModel):
    """
    One assessment attempt. Treated as an immutable value: navigation and
    answer recording return a new state through model_copy.
    """
    model_config = ConfigDict(frozen=True)

    section: Section = Section.INTRO
    question_index: int = 0
    answers: Dict[str, Answer] = Field(default_factory=dict)
    started_at: Optional[datetime] = None
    is_complete: bool = False


class CareerRoleMatch(BaseModel):
    role: str
    match_score: float
    description: str


class AssessmentResults(BaseModel):
    model_config = ConfigDict(frozen=True)

    psychometric_fit: float
    technical_readiness: float
    dimension_scores: Dict[str, float]
    overall_confidence_score: float
    recommendation: Recommendation
    next_steps: List[str]
    career_roles: List[CareerRoleMatch]
    personalized_insight: str


# Custom Error Classes
class CatalogValidationError(ValueError):
    """Raised when a question catalog is inconsistent beyond what the schema catches."""
    pass


class AnswerValidationError(ValueError):
    """Raised when a recorded answer does not fit the question's declared response type."""
    pass


class UnknownQuestionError(AnswerValidationError):
    """Raised when an answer names a question that is not in the catalog."""
    pass
