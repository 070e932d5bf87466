"""
Output Assembler

Transforms selected ScoredCourses into the final RecommendationOutput contract.
Attaches explanations and warnings.
"""

import logging
from typing import List, Optional, Sequence

from .contracts import (
    AssessmentScore,
    ScoredCourse,
    RecommendationResult,
    RecommendationOutput,
)
from .constants import ScoringStrategy, ENGINE_VERSION, MAX_RELEVANCE_SCORE
from .explainer import explain

logger = logging.getLogger(__name__)


def assemble_recommendation(
    scored: ScoredCourse,
    rank: int,
    pathways: Sequence[str] = (),
    user_skills: Sequence[str] = ()
) -> RecommendationResult:
    """
    Convert a ScoredCourse into a RecommendationResult.

    Relevance is rounded to an integer; weighted factors are rounded to three
    decimals so repeated runs render identically.
    """
    if scored.strategy == ScoringStrategy.WEIGHTED:
        factors = {name: round(value, 3) for name, value in scored.match_factors.items()}
    else:
        factors = dict(scored.match_factors)

    relevance = int(round(scored.relevance_score))

    return RecommendationResult(
        course=scored.course,
        relevance_score=max(0, min(MAX_RELEVANCE_SCORE, relevance)),
        match_factors=factors,
        explanations=explain(scored, pathways=pathways, user_skills=user_skills),
        rank=rank,
    )


def assemble_output(
    selected: Sequence[ScoredCourse],
    strategy: ScoringStrategy,
    scores: Sequence[AssessmentScore],
    career_pathways: Sequence[str],
    total_evaluated: int,
    total_eligible: int,
    limit: int,
    user_skills: Sequence[str] = (),
    user_id: Optional[str] = None,
    assessment_id: Optional[str] = None,
    processing_time_ms: Optional[float] = None,
    warnings: Optional[List[str]] = None
) -> RecommendationOutput:
    """
    Assemble the final RecommendationOutput.

    Args:
        selected: Diversified picks, best first
        strategy: Strategy that produced the scores
        scores: Assessment scores the request was made with
        career_pathways: Derived pathways
        total_evaluated: Courses handed to the engine
        total_eligible: Active courses that were scored
        limit: Number of recommendations requested
        processing_time_ms: Processing time in milliseconds
        warnings: Warnings collected earlier in the pipeline

    Returns:
        Complete RecommendationOutput
    """
    recommendations = [
        assemble_recommendation(scored, rank, career_pathways, user_skills)
        for rank, scored in enumerate(selected, 1)
    ]

    all_warnings = list(warnings or [])
    all_warnings.extend(_generate_warnings(scores, total_eligible, len(recommendations), limit))

    return RecommendationOutput(
        user_id=user_id,
        assessment_id=assessment_id,
        strategy=strategy,
        career_pathways=list(career_pathways),
        recommendations=recommendations,
        total_courses_evaluated=total_evaluated,
        total_eligible=total_eligible,
        total_recommended=len(recommendations),
        processing_time_ms=processing_time_ms,
        engine_version=ENGINE_VERSION,
        warnings=all_warnings,
    )


def _generate_warnings(
    scores: Sequence[AssessmentScore],
    total_eligible: int,
    total_recommended: int,
    limit: int
) -> List[str]:
    """Generate any warnings for the output."""
    warnings = []

    if not scores:
        warnings.append("No assessment scores provided. Pathways fall back to the full catalog of career tracks.")

    if total_eligible == 0:
        warnings.append("No active courses available to recommend.")
    elif total_recommended < limit:
        msg = f"Only {total_recommended} course(s) available; fewer than the {limit} requested."
        logger.warning(msg)
        warnings.append(msg)

    return warnings
