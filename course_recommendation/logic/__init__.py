"""
Recommendation Logic Module

Provides the deterministic scoring engine for course recommendations.
"""

from .contracts import (
    AssessmentScore,
    Course,
    UserProfile,
    PriorAssessmentResult,
    SelectionState,
    ScoredCourse,
    RecommendationResult,
    RecommendationOutput,
)
from .engine import RecommendationEngine, get_recommendations
from .pathways import derive_pathways
from .ranker import select_top_n
from .explainer import explain
from .dimension_scorers import jaccard_similarity
from .tables import ScoringTables, DEFAULT_TABLES
from .constants import CourseLevel, ScoringStrategy

__all__ = [
    # Main engine
    "RecommendationEngine",
    "get_recommendations",
    "derive_pathways",
    "select_top_n",
    "explain",
    "jaccard_similarity",

    # Contracts
    "AssessmentScore",
    "Course",
    "UserProfile",
    "PriorAssessmentResult",
    "SelectionState",
    "ScoredCourse",
    "RecommendationResult",
    "RecommendationOutput",

    # Configuration
    "ScoringTables",
    "DEFAULT_TABLES",

    # Enums
    "CourseLevel",
    "ScoringStrategy",
]
