"""
Data Contracts for the Course Recommendation Engine

Defines Pydantic models for the engine inputs (scores, courses, profile, prior
results) and outputs (RecommendationResult, RecommendationOutput).
These contracts are the API boundary for the scoring engine.
"""

from typing import List, Optional, Dict, FrozenSet
from pydantic import BaseModel, Field, field_validator

from .constants import CourseLevel, ScoringStrategy, ENGINE_VERSION


def _as_str_list(value) -> List[str]:
    """Coerce a list-ish field to non-blank strings; a bare string is one item."""
    if isinstance(value, str):
        value = [value]
    elif not isinstance(value, (list, tuple)):
        return []
    return [v for v in value if isinstance(v, str) and v.strip()]


def _as_list(value) -> list:
    return list(value) if isinstance(value, (list, tuple)) else []


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class AssessmentScore(BaseModel):
    """One graded assessment category (0-100)."""
    category: str = ""
    score: float = 0.0

    @field_validator("category", mode="before")
    @classmethod
    def _category_or_blank(cls, value):
        return value if isinstance(value, str) else ""

    @field_validator("score", mode="before")
    @classmethod
    def _clamp_score(cls, value):
        # Malformed scores count as 0 instead of failing the request
        try:
            score = float(value)
        except (TypeError, ValueError):
            return 0.0
        if score != score:  # NaN
            return 0.0
        return max(0.0, min(100.0, score))


class Course(BaseModel):
    """
    Catalog course as the engine sees it.
    Only active courses are eligible for recommendation.
    """
    id: str
    title: str = ""
    code: str = ""
    description: str = ""
    level: str = CourseLevel.BEGINNER.value
    duration: str = ""
    career_pathways: List[str] = Field(default_factory=list)
    requirements: List[str] = Field(default_factory=list)
    skills_developed: List[str] = Field(default_factory=list)
    is_active: bool = True

    @field_validator("career_pathways", "requirements", "skills_developed", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return _as_str_list(value)

    @field_validator("level", mode="before")
    @classmethod
    def _level_or_default(cls, value):
        if not value:
            return CourseLevel.BEGINNER.value
        return str(value).strip().lower() or CourseLevel.BEGINNER.value

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value):
        return str(value)


class UserProfile(BaseModel):
    """Learner skills and history, used by the weighted strategy."""
    user_id: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    experience_level: str = CourseLevel.BEGINNER.value
    enrolled_courses: List[Course] = Field(default_factory=list)

    @field_validator("skills", mode="before")
    @classmethod
    def _skills_to_list(cls, value):
        return _as_str_list(value)

    @field_validator("enrolled_courses", mode="before")
    @classmethod
    def _enrolled_to_list(cls, value):
        return _as_list(value)

    @field_validator("experience_level", mode="before")
    @classmethod
    def _level_or_default(cls, value):
        if not value:
            return CourseLevel.BEGINNER.value
        return str(value).strip().lower() or CourseLevel.BEGINNER.value


class PriorAssessmentResult(BaseModel):
    """Career pathways previously derived for one of the user's assessments."""
    assessment_id: Optional[str] = None
    career_pathways: List[str] = Field(default_factory=list)

    @field_validator("career_pathways", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return _as_str_list(value)


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class SelectionState(BaseModel):
    """
    Running record of what earlier-scored courses already cover.

    Threaded through the scoreband scoring fold; every course is absorbed
    after it is scored, whether or not it ends up selected.
    """
    pathways: FrozenSet[str] = frozenset()
    levels: FrozenSet[str] = frozenset()
    skills: FrozenSet[str] = frozenset()

    class Config:
        frozen = True

    def absorb(self, course: Course) -> "SelectionState":
        """Return a new state that also covers `course`."""
        return SelectionState(
            pathways=self.pathways | {p.lower() for p in course.career_pathways},
            levels=self.levels | ({course.level} if course.level else set()),
            skills=self.skills | {s.lower() for s in course.skills_developed},
        )


class ScoredCourse(BaseModel):
    """
    A course with computed factor scores.
    Used between scoring and selection stages.
    """
    course: Course
    strategy: ScoringStrategy = ScoringStrategy.SCOREBAND
    relevance_score: float = 0.0  # 0-100 display scale
    match_factors: Dict[str, float] = Field(default_factory=dict)
    matched_pathways: List[str] = Field(default_factory=list)


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class RecommendationResult(BaseModel):
    """Single course recommendation with score breakdown and explanation."""
    course: Course
    relevance_score: int = Field(ge=0, le=100)
    match_factors: Dict[str, float] = Field(default_factory=dict)
    explanations: List[str] = Field(default_factory=list)
    rank: int = 0


class RecommendationOutput(BaseModel):
    """
    Output contract for the scoring engine.
    Contains ranked recommendations with summary statistics.
    """
    # Request tracking
    user_id: Optional[str] = None
    assessment_id: Optional[str] = None
    strategy: ScoringStrategy = ScoringStrategy.SCOREBAND

    # Derived pathways and ranked recommendations
    career_pathways: List[str] = Field(default_factory=list)
    recommendations: List[RecommendationResult] = Field(default_factory=list)

    # Summary Statistics
    total_courses_evaluated: int = 0
    total_eligible: int = 0
    total_recommended: int = 0

    # Processing metadata
    processing_time_ms: Optional[float] = None
    engine_version: str = ENGINE_VERSION

    # Warnings/Notes
    warnings: List[str] = Field(default_factory=list)

    @property
    def recommended_course_ids(self) -> List[str]:
        return [rec.course.id for rec in self.recommendations]
