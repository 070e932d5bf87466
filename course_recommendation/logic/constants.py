"""
Scoring Engine Constants

Defines all band mappings, weights, thresholds, and enums used by the scoring engine.
All values are deterministic with no AI/ML components.
"""

from enum import Enum
from typing import Dict, List, Tuple


ENGINE_VERSION = "1.0.0"


class CourseLevel(str, Enum):
    """Course difficulty / learner experience level (ordinal)."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ScoringStrategy(str, Enum):
    """Relevance scoring strategies the engine can run."""
    SCOREBAND = "scoreband"  # Mode A - assessment score bands
    WEIGHTED = "weighted"    # Mode B - profile/history weighted factors


# Ordinal position of each level, lowest first
LEVEL_ORDER: List[str] = [
    CourseLevel.BEGINNER.value,
    CourseLevel.INTERMEDIATE.value,
    CourseLevel.ADVANCED.value,
]

# =============================================================================
# SCORE BANDS
# =============================================================================

# score < LOW_BAND_CEILING -> low, score >= HIGH_BAND_FLOOR -> high, else medium
LOW_BAND_CEILING = 40.0
HIGH_BAND_FLOOR = 70.0

# Level preference matrices switch columns on the *average* score:
# avg <= 40 -> low, avg <= 70 -> medium, avg > 70 -> high
LEVEL_PREFERENCE_LOW_MAX = 40.0
LEVEL_PREFERENCE_MEDIUM_MAX = 70.0

MAX_PATHWAYS = 5

# =============================================================================
# CAREER PATHWAY BANDS
# =============================================================================

# category -> band -> pathway labels. Iteration order is significant: it
# decides which labels survive truncation to MAX_PATHWAYS.
PATHWAY_BAND_MAP: Dict[str, Dict[str, List[str]]] = {
    "personality": {
        "low": ["Software Development", "Data Science", "DevOps Engineering"],
        "medium": ["UX/UI Design", "Business Analysis", "Project Management"],
        "high": ["Cloud Solutions Architecture", "Cybersecurity", "Project Management"],
    },
    "career": {
        "low": ["Software Development", "UX/UI Design", "Business Analysis"],
        "medium": ["Data Science", "DevOps Engineering", "Project Management"],
        "high": ["Software Architecture", "Cloud Solutions Architecture", "Cybersecurity"],
    },
    "academic": {
        "low": ["Business Analysis", "UX/UI Design", "Software Development"],
        "medium": ["Data Science", "DevOps Engineering", "Project Management"],
        "high": ["Machine Learning", "Cybersecurity", "Data Science"],
    },
    "aptitude": {
        "low": ["Technical Support", "Software Development", "UX/UI Design"],
        "medium": ["Software Development", "Data Science", "DevOps Engineering"],
        "high": ["Software Architecture", "Machine Learning", "Cybersecurity"],
    },
    "interest": {
        "low": ["Business Analysis", "Technical Support", "Project Management"],
        "medium": ["UX/UI Design", "Data Science", "Product Management"],
        "high": ["Machine Learning", "Product Management", "Cloud Solutions Architecture"],
    },
}

# =============================================================================
# LEVEL PREFERENCE MATRICES (Mode A)
# =============================================================================

# category -> course level -> (points when avg <= 40, <= 70, > 70)
LEVEL_PREFERENCE_MAP: Dict[str, Dict[str, Tuple[int, int, int]]] = {
    "personality": {
        "beginner": (25, 20, 15),
        "intermediate": (15, 25, 20),
        "advanced": (10, 20, 25),
    },
    "aptitude": {
        "beginner": (25, 15, 10),
        "intermediate": (15, 25, 20),
        "advanced": (10, 20, 25),
    },
    "interest": {
        "beginner": (20, 25, 15),
        "intermediate": (15, 20, 25),
        "advanced": (15, 15, 20),
    },
}

DEFAULT_LEVEL_POINTS = 15

# =============================================================================
# CATEGORY SKILL KEYWORDS (Mode A)
# =============================================================================

CATEGORY_SKILL_KEYWORDS: Dict[str, List[str]] = {
    "personality": ["communication", "leadership", "teamwork", "collaboration", "management"],
    "aptitude": ["technical", "analytical", "problem-solving", "development", "design"],
    "interest": ["creative", "innovation", "research", "strategy", "planning"],
    "career": ["career", "professional", "industry", "architecture", "security"],
    "academic": ["theory", "mathematics", "statistics", "analysis", "programming"],
}

# =============================================================================
# POINT SCALES (Mode A)
# =============================================================================

# pathway matches (0, 1, 2+) -> points at an average score of 100
PATHWAY_MATCH_POINTS: Tuple[int, int, int] = (10, 20, 30)

MAX_SKILLS_MATCH = 20
MAX_CATEGORY_MATCH = 15
DEFAULT_SKILLS_MATCH = 10     # course lists no skills
DEFAULT_CATEGORY_MATCH = 5

# Diversity bonus against the running selection state
DIVERSITY_POINTS_PER_PATHWAY = 2
DIVERSITY_PATHWAY_CAP = 5
DIVERSITY_POINTS_NEW_LEVEL = 5
DIVERSITY_POINTS_PER_SKILL = 1
DIVERSITY_SKILL_CAP = 5

MAX_RELEVANCE_SCORE = 100

# =============================================================================
# FACTOR WEIGHTS (Mode B)
# =============================================================================

# Weights for each weighted-mode factor (must sum to 1.0)
WEIGHTED_FACTOR_WEIGHTS: Dict[str, float] = {
    "career_pathway_match": 0.35,  # Prior assessment pathways vs course pathways
    "skill_gap_match": 0.25,       # New skills the course would add
    "level_match": 0.15,           # Course level vs experience level
    "prerequisite_match": 0.15,    # Requirements already covered
    "user_history_match": 0.10,    # Similarity to enrolled courses
}

LEVEL_EXACT_MATCH = 1.0
LEVEL_NEAR_MATCH = 0.8
LEVEL_TOO_ADVANCED = 0.0
DEFAULT_HISTORY_MATCH = 0.5

# Mode B composite lives in [0, 1]; multiply for the shared display scale
WEIGHTED_DISPLAY_SCALE = 100

# =============================================================================
# EXPLANATION THRESHOLDS
# =============================================================================

EXPLAIN_CAREER_PATHWAY_MIN = 0.8     # strictly above
EXPLAIN_SKILL_GAP_MIN = 0.8          # strictly above
EXPLAIN_LEVEL_MATCH_BELOW = 0.8      # strictly below
EXPLAIN_PREREQUISITE_BELOW = 0.5     # strictly below

EXPLAIN_PATHWAY_POINTS_MIN = 20
EXPLAIN_LEVEL_POINTS_MIN = 20
EXPLAIN_SKILLS_POINTS_MIN = 10
EXPLAIN_DIVERSITY_POINTS_MIN = 10

MAX_SKILLS_IN_EXPLANATION = 3

# =============================================================================
# RANKING CONFIGURATION
# =============================================================================

DEFAULT_RECOMMENDATION_LIMIT = 5
