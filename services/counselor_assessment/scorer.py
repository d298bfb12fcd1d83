# services/counselor_assessment/scorer.py
# Handles scoring and recommendation for the Career Counselor assessment.
#
# All functions are pure over (answers, catalog): the same answer set always
# produces the same results.

import logging
from typing import Dict, List, Mapping

from .models import (
    DIMENSIONS,
    Answer,
    AssessmentResults,
    QuestionCatalog,
    Recommendation,
)
from .results_generator import (
    match_career_roles,
    select_next_steps,
    select_personalized_insight,
)

logger = logging.getLogger(__name__)

# --- Constants ---

# Rated sections are scored on a 1-5 scale; the multiplier maps that onto 0-100
RATING_SCALE = 5
RATING_MULTIPLIER = 20

CORRECT_ANSWER_SCORE = 100.0
INCORRECT_ANSWER_SCORE = 0.0

RECOMMENDATION_THRESHOLDS = [
    (75.0, Recommendation.YES),
    (50.0, Recommendation.MAYBE),
]


def _average(values: List[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


# --- Scoring Functions ---

def calculate_psychometric_fit(answers: Mapping[str, Answer], catalog: QuestionCatalog) -> float:
    """Average scaled rating over answered psychometric questions; unanswered ones are skipped."""
    scaled = [
        answers[q.id].value.value * RATING_MULTIPLIER
        for q in catalog.psychometric
        if q.id in answers
    ]
    return _average(scaled)


def calculate_technical_readiness(answers: Mapping[str, Answer], catalog: QuestionCatalog) -> float:
    """Share of answered technical questions matching the answer key, as 0-100."""
    scored = []
    for question in catalog.technical:
        if question.id not in answers:
            continue
        correct = catalog.answer_key.get(question.id) == answers[question.id].value.value
        scored.append(CORRECT_ANSWER_SCORE if correct else INCORRECT_ANSWER_SCORE)
    return _average(scored)


def calculate_dimension_scores(answers: Mapping[str, Answer], catalog: QuestionCatalog) -> Dict[str, float]:
    """Average scaled rating per WISCAR dimension, 0 for a dimension with no answers."""
    scores = {}
    for dimension in DIMENSIONS:
        scaled = [
            answers[q.id].value.value * RATING_MULTIPLIER
            for q in catalog.wiscar
            if q.dimension == dimension and q.id in answers
        ]
        scores[dimension] = _average(scaled)
    return scores


def calculate_overall_confidence(
    psychometric_fit: float,
    technical_readiness: float,
    dimension_scores: Mapping[str, float],
) -> float:
    """
    Equal three-way weighting: the six dimension scores are pooled into one
    mean first, then weighed against the two section scores.
    """
    dimension_mean = _average([dimension_scores[d] for d in DIMENSIONS])
    return (psychometric_fit + technical_readiness + dimension_mean) / 3


def determine_recommendation(overall_score: float) -> Recommendation:
    for threshold, recommendation in RECOMMENDATION_THRESHOLDS:
        if overall_score >= threshold:
            return recommendation
    return Recommendation.NO


def compute_results(answers: Mapping[str, Answer], catalog: QuestionCatalog) -> AssessmentResults:
    """Generates the complete results for an answer set."""
    psychometric_fit = calculate_psychometric_fit(answers, catalog)
    technical_readiness = calculate_technical_readiness(answers, catalog)
    dimension_scores = calculate_dimension_scores(answers, catalog)
    overall = calculate_overall_confidence(psychometric_fit, technical_readiness, dimension_scores)
    recommendation = determine_recommendation(overall)

    logger.debug(
        f"Scores: psychometric={psychometric_fit}, technical={technical_readiness}, "
        f"dimensions={dimension_scores}, overall={overall}"
    )
    return AssessmentResults(
        psychometric_fit=psychometric_fit,
        technical_readiness=technical_readiness,
        dimension_scores=dimension_scores,
        overall_confidence_score=overall,
        recommendation=recommendation,
        next_steps=select_next_steps(recommendation),
        career_roles=match_career_roles(overall),
        personalized_insight=select_personalized_insight(recommendation),
    )
