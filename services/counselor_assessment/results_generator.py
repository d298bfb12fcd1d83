# services/counselor_assessment/results_generator.py
# Descriptive results: next steps, career role matches and narrative insight.

import logging
from typing import List

from .models import CareerRoleMatch, Recommendation

logger = logging.getLogger(__name__)

NEXT_STEPS = {
    Recommendation.YES: [
        'Enroll in "Career Counseling Foundations" course',
        'Join peer-practice groups',
        'Pursue GCDF or NCDA certification',
        'Start building a portfolio of case studies'
    ],
    Recommendation.MAYBE: [
        'Develop interpersonal listening skills',
        'Study basic psychology or behavioral science',
        'Start with shadowing or mentorship',
        'Practice with career assessment tools'
    ],
    Recommendation.NO: [
        'Consider alternative career paths that align with your strengths',
        'Explore roles in HR, training, or organizational development',
        'Build foundational communication skills',
        'Gain experience in people-focused roles'
    ],
}

# Listed in presentation order; matches keep this order
CAREER_ROLES = [
    {
        "role": "Career Coach",
        "base_score": 85,
        "description": "1-on-1 guidance for mid-career professionals"
    },
    {
        "role": "Academic Counselor",
        "base_score": 80,
        "description": "Work with high school/college students"
    },
    {
        "role": "HR Talent Advisor",
        "base_score": 75,
        "description": "Internal career guidance & development"
    },
    {
        "role": "Life Coach",
        "base_score": 70,
        "description": "Goal-based personal development guidance"
    },
    {
        "role": "Vocational Consultant",
        "base_score": 65,
        "description": "Help people make training/work choices"
    },
]

MINIMUM_ROLE_MATCH = 60

PERSONALIZED_INSIGHTS = {
    Recommendation.YES: (
        "You show strong potential for a career in counseling with excellent interpersonal skills "
        "and technical understanding. Your empathy and analytical abilities make you well-suited for "
        "helping others navigate their career journeys."
    ),
    Recommendation.MAYBE: (
        "You have a good foundation for career counseling but would benefit from developing specific "
        "skills. Focus on building your technical knowledge of career frameworks and practicing active "
        "listening techniques."
    ),
    Recommendation.NO: (
        "While career counseling may not be the ideal fit, your assessment reveals strengths that could "
        "translate well to related fields like HR, training, or organizational development."
    ),
}


def select_next_steps(recommendation: Recommendation) -> List[str]:
    return list(NEXT_STEPS[recommendation])


def match_career_roles(overall_score: float) -> List[CareerRoleMatch]:
    """
    Scales each role's base affinity by the overall score and keeps the
    roles that reach MINIMUM_ROLE_MATCH, in catalog order.
    """
    matches = []
    for role in CAREER_ROLES:
        match_score = min(100.0, role["base_score"] * (overall_score / 100))
        if match_score >= MINIMUM_ROLE_MATCH:
            matches.append(CareerRoleMatch(
                role=role["role"],
                match_score=match_score,
                description=role["description"],
            ))
    logger.debug(f"Career roles unlocked at overall score {overall_score}: {[m.role for m in matches]}")
    return matches


def select_personalized_insight(recommendation: Recommendation) -> str:
    return PERSONALIZED_INSIGHTS[recommendation]
