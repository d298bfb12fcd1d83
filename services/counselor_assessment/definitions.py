# services/counselor_assessment/definitions.py
# Static definitions for the Career Counselor fitness assessment questions and structure.

# --- Section 1: Psychometric Fit ---
PSYCHOMETRIC_QUESTIONS = [
    {
        "id": "p1",
        "text": "I feel fulfilled when I help others solve career problems.",
        "type": "scaled-rating",
        "scale": 5,
        "section": "psychometric",
        "dimension": "interest"
    },
    {
        "id": "p2",
        "text": "I prefer structured conversations with measurable goals.",
        "type": "scaled-rating",
        "scale": 5,
        "section": "psychometric",
        "dimension": "personality"
    },
    {
        "id": "p3",
        "text": "I enjoy analyzing personality assessments and career frameworks.",
        "type": "scaled-rating",
        "scale": 5,
        "section": "psychometric",
        "dimension": "interest"
    },
    {
        "id": "p4",
        "text": "I am patient when working with people who are uncertain about their direction.",
        "type": "scaled-rating",
        "scale": 5,
        "section": "psychometric",
        "dimension": "personality"
    },
    {
        "id": "p5",
        "text": "I actively seek out opportunities to coach or mentor others.",
        "type": "scaled-rating",
        "scale": 5,
        "section": "psychometric",
        "dimension": "motivation"
    },
]

# --- Section 2: Technical Knowledge ---
TECHNICAL_QUESTIONS = [
    {
        "id": "t1",
        "text": "Which of the following best represents the \"S\" in Holland Code?",
        "type": "single-choice",
        "options": [
            "Systematic - prefers organized, methodical work",
            "Social - enjoys helping and working with people",
            "Strategic - focuses on long-term planning",
            "Scientific - enjoys research and analysis"
        ],
        "section": "technical"
    },
    {
        "id": "t2",
        "text": "What is the most ethical response when a client discloses personal trauma during a career session?",
        "type": "single-choice",
        "options": [
            "Provide immediate counseling for the trauma",
            "Acknowledge their trust and refer to appropriate mental health resources",
            "Continue with career planning as trauma is outside scope",
            "End the session immediately"
        ],
        "section": "technical"
    },
    {
        "id": "t3",
        "text": "A client says \"I hate my job but I need the money.\" Your first step would be to:",
        "type": "single-choice",
        "options": [
            "Immediately suggest they quit and find something better",
            "Explore what specifically they dislike about their current role",
            "Focus only on higher-paying alternatives",
            "Recommend they stay until retirement for financial security"
        ],
        "section": "technical"
    },
    {
        "id": "t4",
        "text": "The MBTI assessment primarily measures:",
        "type": "single-choice",
        "options": [
            "Intelligence and cognitive abilities",
            "Personality preferences and decision-making styles",
            "Career aptitude and skills",
            "Emotional intelligence levels"
        ],
        "section": "technical"
    },
    {
        "id": "t5",
        "text": "When working with a client who has unrealistic career expectations, you should:",
        "type": "single-choice",
        "options": [
            "Tell them directly their goals are impossible",
            "Agree with them to maintain rapport",
            "Guide them to research and reality-test their assumptions",
            "Only focus on backup plans"
        ],
        "section": "technical"
    },
]

# Option index of the correct answer for each scored technical question
TECHNICAL_ANSWER_KEY = {
    "t1": 1,  # Social
    "t2": 1,  # Acknowledge and refer
    "t3": 1,  # Explore what they dislike
    "t4": 1,  # Personality preferences
    "t5": 2,  # Guide them to research
}

# --- Section 3: WISCAR Framework ---
WISCAR_QUESTIONS = [
    {
        "id": "w1",
        "text": "I consistently seek opportunities to help others with their career decisions, even outside of work.",
        "type": "scaled-rating",
        "scale": 5,
        "section": "wiscar-framework",
        "dimension": "will"
    },
    {
        "id": "w2",
        "text": "I find myself naturally curious about what drives people's career choices.",
        "type": "scaled-rating",
        "scale": 5,
        "section": "wiscar-framework",
        "dimension": "interest"
    },
    {
        "id": "w3",
        "text": "I am skilled at active listening and asking probing questions.",
        "type": "scaled-rating",
        "scale": 5,
        "section": "wiscar-framework",
        "dimension": "skill"
    },
    {
        "id": "w4",
        "text": "I can analyze complex career scenarios and identify multiple solution paths.",
        "type": "scaled-rating",
        "scale": 5,
        "section": "wiscar-framework",
        "dimension": "cognitive"
    },
    {
        "id": "w5",
        "text": "I am always eager to learn new counseling techniques and frameworks.",
        "type": "scaled-rating",
        "scale": 5,
        "section": "wiscar-framework",
        "dimension": "ability-to-learn"
    },
    {
        "id": "w6",
        "text": "I understand the practical realities of today's job market and career transitions.",
        "type": "scaled-rating",
        "scale": 5,
        "section": "wiscar-framework",
        "dimension": "real-world-alignment"
    },
    {
        "id": "w7",
        "text": "I persist in helping others even when progress seems slow.",
        "type": "scaled-rating",
        "scale": 5,
        "section": "wiscar-framework",
        "dimension": "will"
    },
    {
        "id": "w8",
        "text": "I genuinely enjoy learning about different industries and career paths.",
        "type": "scaled-rating",
        "scale": 5,
        "section": "wiscar-framework",
        "dimension": "interest"
    },
    {
        "id": "w9",
        "text": "I can maintain professional boundaries while being empathetic.",
        "type": "scaled-rating",
        "scale": 5,
        "section": "wiscar-framework",
        "dimension": "skill"
    },
    {
        "id": "w10",
        "text": "I can think strategically about long-term career development paths.",
        "type": "scaled-rating",
        "scale": 5,
        "section": "wiscar-framework",
        "dimension": "cognitive"
    },
]

# --- Presentation metadata ---
SECTION_TITLES = {
    "psychometric": "Psychological Fit",
    "technical": "Technical Knowledge",
    "wiscar-framework": "WISCAR Framework",
}

# Labels for a five-point rating, lowest first
RATING_LABELS = [
    "Strongly Disagree",
    "Disagree",
    "Neutral",
    "Agree",
    "Strongly Agree",
]

DIMENSION_LABELS = {
    "will": "Will & Motivation",
    "interest": "Interest Level",
    "skill": "Current Skills",
    "cognitive": "Cognitive Readiness",
    "ability-to-learn": "Learning Ability",
    "real-world-alignment": "Real-World Fit",
}

DEFAULT_CATALOG_DATA = {
    "psychometric": PSYCHOMETRIC_QUESTIONS,
    "technical": TECHNICAL_QUESTIONS,
    "wiscar-framework": WISCAR_QUESTIONS,
    "answer_key": TECHNICAL_ANSWER_KEY,
}
