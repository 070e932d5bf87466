"""
Score Aggregator

Combines individual factor scores into an overall relevance score for each
strategy, and folds a catalog through the scorer.
"""

from typing import List, Optional, Sequence, Tuple

from .contracts import (
    AssessmentScore,
    Course,
    UserProfile,
    PriorAssessmentResult,
    SelectionState,
    ScoredCourse,
)
from .dimension_scorers import (
    score_pathway_match,
    score_level_match,
    score_skills_match,
    score_diversity_bonus,
    score_career_pathway_match,
    score_skill_gap_match,
    score_level_fit,
    score_prerequisite_match,
    score_user_history_match,
)
from .tables import ScoringTables, DEFAULT_TABLES
from .constants import ScoringStrategy, MAX_RELEVANCE_SCORE, WEIGHTED_DISPLAY_SCALE


def aggregate_scoreband(
    course: Course,
    scores: Sequence[AssessmentScore],
    pathways: Sequence[str],
    state: SelectionState,
    tables: ScoringTables = DEFAULT_TABLES
) -> ScoredCourse:
    """
    Score one course with the score-band strategy.

    Args:
        course: Course to score
        scores: Assessment scores
        pathways: Derived career pathways
        state: What the previously scored courses already cover

    Returns:
        ScoredCourse with points per factor and a 0-100 relevance score
    """
    pathway_match, matched = score_pathway_match(course, pathways, scores, tables)
    level_match = score_level_match(course, scores, tables)
    skills_match, category_match = score_skills_match(course, scores, tables)
    diversity_bonus = score_diversity_bonus(course, state)

    total = pathway_match + level_match + skills_match + category_match + diversity_bonus

    return ScoredCourse(
        course=course,
        strategy=ScoringStrategy.SCOREBAND,
        relevance_score=max(0, min(MAX_RELEVANCE_SCORE, total)),
        match_factors={
            "pathway_match": pathway_match,
            "level_match": level_match,
            "skills_match": skills_match,
            "category_match": category_match,
            "diversity_bonus": diversity_bonus,
        },
        matched_pathways=matched,
    )


def aggregate_weighted(
    course: Course,
    profile: UserProfile,
    prior_results: Sequence[PriorAssessmentResult],
    tables: ScoringTables = DEFAULT_TABLES
) -> ScoredCourse:
    """
    Score one course with the weighted multi-factor strategy.

    The weighted sum lies in [0, 1] and is scaled to the 0-100 display range.
    """
    factors = {
        "career_pathway_match": score_career_pathway_match(course, prior_results),
        "skill_gap_match": score_skill_gap_match(course, profile),
        "level_match": score_level_fit(course, profile),
        "prerequisite_match": score_prerequisite_match(course, profile),
        "user_history_match": score_user_history_match(course, profile),
    }

    composite = sum(
        value * tables.weighted_factor_weights.get(name, 0.0)
        for name, value in factors.items()
    )
    composite = max(0.0, min(1.0, composite))

    prior_pathways = {
        p.lower() for result in prior_results for p in result.career_pathways
    }

    return ScoredCourse(
        course=course,
        strategy=ScoringStrategy.WEIGHTED,
        relevance_score=composite * WEIGHTED_DISPLAY_SCALE,
        match_factors=factors,
        matched_pathways=[p for p in course.career_pathways if p.lower() in prior_pathways],
    )


def batch_aggregate_scoreband(
    courses: Sequence[Course],
    scores: Sequence[AssessmentScore],
    pathways: Sequence[str],
    tables: ScoringTables = DEFAULT_TABLES,
    state: Optional[SelectionState] = None
) -> Tuple[List[ScoredCourse], SelectionState]:
    """
    Score courses in catalog order, threading the selection state.

    Returns:
        (scored courses in input order, final state)
    """
    if state is None:
        state = SelectionState()
    scored: List[ScoredCourse] = []

    for course in courses:
        scored.append(aggregate_scoreband(course, scores, pathways, state, tables))
        state = state.absorb(course)

    return scored, state


def batch_aggregate_weighted(
    courses: Sequence[Course],
    profile: UserProfile,
    prior_results: Sequence[PriorAssessmentResult],
    tables: ScoringTables = DEFAULT_TABLES
) -> List[ScoredCourse]:
    """Score multiple courses with the weighted strategy."""
    return [aggregate_weighted(c, profile, prior_results, tables) for c in courses]
