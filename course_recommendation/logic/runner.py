"""
Engine Runner

Orchestrates one recommendation request:
1. Fetches active courses (and prior results) via the adapter
2. Runs the recommendation engine
3. Records the chosen course ids and pathways
4. Returns the recommendations

This is a pure orchestration layer - NO scoring, NO business logic.
"""

import logging
from typing import List, Dict, Any, Optional, Sequence

from sqlalchemy.orm import Session

from .adapter import fetch_active_courses, fetch_prior_results
from .contracts import AssessmentScore, UserProfile, RecommendationOutput
from .engine import RecommendationEngine
from .recorder import ResultRecorder, SqlAlchemyResultRecorder
from .constants import ScoringStrategy
from .. import config

logger = logging.getLogger(__name__)


def run_recommendations(
    db: Session,
    user_id: str,
    assessment_id: str,
    scores: Sequence[AssessmentScore],
    user_profile: Optional[UserProfile] = None,
    strategy: Optional[ScoringStrategy] = None,
    limit: Optional[int] = None,
    recorder: Optional[ResultRecorder] = None,
    engine: Optional[RecommendationEngine] = None
) -> RecommendationOutput:
    """
    Main entry point: run full recommendation pipeline.

    Args:
        db: Database session
        user_id: User the recommendations are for
        assessment_id: Assessment the scores came from
        scores: Assessment scores
        user_profile: Optional profile; enables weighted scoring
        strategy: Force a strategy; defaults to RECOMMENDATION_STRATEGY or auto
        limit: Number of recommendations; defaults to RECOMMENDATION_LIMIT
        recorder: Where to persist the result; defaults to the database

    Returns:
        RecommendationOutput, even when persisting it failed
    """
    if limit is None:
        limit = config.RECOMMENDATION_LIMIT
    if strategy is None and config.RECOMMENDATION_STRATEGY:
        strategy = ScoringStrategy(config.RECOMMENDATION_STRATEGY)
    recorder = recorder or SqlAlchemyResultRecorder(db)
    engine = engine or RecommendationEngine()

    logger.info(f"🚀 Starting recommendation pipeline for user={user_id} assessment={assessment_id}")

    # Step 1: Fetch inputs
    courses = fetch_active_courses(db)
    prior_results = fetch_prior_results(db, user_id, exclude_assessment_id=assessment_id) if user_profile else []

    if not courses:
        logger.warning("⚠️ No active courses found")

    # Step 2: Run engine
    output = engine.recommend(
        scores,
        courses,
        strategy=strategy,
        user_profile=user_profile,
        prior_results=prior_results,
        limit=limit,
        user_id=user_id,
        assessment_id=assessment_id,
    )
    logger.info(f"🏆 Recommended {output.total_recommended} of {output.total_eligible} courses")

    # Step 3: Record result - a failure here must not lose the recommendations
    try:
        recorder.record(
            user_id=user_id,
            assessment_id=assessment_id,
            recommended_course_ids=output.recommended_course_ids,
            career_pathways=output.career_pathways,
        )
    except Exception as e:
        logger.error(f"Could not save recommendations for user={user_id}: {e}")
        output.warnings.append("Recommendations could not be saved to your assessment result.")

    logger.info(f"✨ Recommendation pipeline complete ({output.processing_time_ms:.2f}ms)")

    return output


def run_recommendations_from_dict(
    db: Session,
    payload: Dict[str, Any],
    **kwargs
) -> RecommendationOutput:
    """
    Convenience wrapper accepting plain dicts.

    Expected keys: user_id, assessment_id, scores, optional user_profile.
    """
    profile_data = payload.get("user_profile")
    return run_recommendations(
        db,
        user_id=str(payload["user_id"]),
        assessment_id=str(payload["assessment_id"]),
        scores=[AssessmentScore(**s) for s in payload.get("scores") or []],
        user_profile=UserProfile(**profile_data) if profile_data else None,
        **kwargs
    )


def get_recommendations_simple(
    db: Session,
    user_id: str,
    assessment_id: str,
    scores: Sequence[AssessmentScore],
    **kwargs
) -> List[Dict[str, Any]]:
    """
    Simplified output format for easier consumption.

    Returns list of dicts instead of full RecommendationOutput.
    """
    output = run_recommendations(db, user_id, assessment_id, scores, **kwargs)

    results = []
    for rec in output.recommendations:
        results.append({
            "course_id": rec.course.id,
            "title": rec.course.title,
            "code": rec.course.code,
            "level": rec.course.level,
            "career_pathways": rec.course.career_pathways,
            "relevance_score": rec.relevance_score,
            "rank": rec.rank,
            "match_factors": rec.match_factors,
            "explanations": rec.explanations,
        })

    return results


# =============================================================================
# VALIDATION
# =============================================================================

def validate_runner():
    """
    Developer sanity check - runs the full pipeline against the configured DB.
    """
    from ..db import SessionLocal, init_db

    config.configure_logging()
    init_db()

    scores = [
        AssessmentScore(category="career", score=82),
        AssessmentScore(category="personality", score=55),
    ]

    db = SessionLocal()
    try:
        print("=" * 60)
        print("RUNNER VALIDATION")
        print("=" * 60)

        output = run_recommendations(db, "validate_runner_user", "validate_runner_assessment", scores)

        print(f"\nStrategy: {output.strategy.value}")
        print(f"Career Pathways: {', '.join(output.career_pathways)}")
        print(f"Total Evaluated: {output.total_courses_evaluated}")
        print(f"Total Recommended: {output.total_recommended}")

        for rec in output.recommendations:
            print(f"\n{rec.rank}. {rec.course.title} [{rec.course.level}] - {rec.relevance_score}")
            for line in rec.explanations:
                print(f"   {line}")

        if output.warnings:
            print(f"\n--- WARNINGS ---")
            for w in output.warnings:
                print(f"  ⚠️  {w}")

        return output

    finally:
        db.close()


if __name__ == "__main__":
    validate_runner()
