"""
Test the scoring engine with the mock catalog.
"""

from course_recommendation.logic import (
    RecommendationEngine,
    AssessmentScore,
    UserProfile,
    PriorAssessmentResult,
    ScoringStrategy,
)
from course_recommendation.logic.adapter import generate_mock_courses


def test_scoring_engine():
    """Test the scoring engine with a sample set of assessment scores."""

    scores = [
        AssessmentScore(category="career", score=82),
        AssessmentScore(category="personality", score=55),
        AssessmentScore(category="aptitude", score=74),
    ]
    courses = generate_mock_courses()

    print("=" * 60)
    print("SCORING ENGINE TEST")
    print("=" * 60)
    print("\nAssessment Scores:")
    for s in scores:
        print(f"  {s.category}: {s.score}")

    engine = RecommendationEngine()
    output = engine.recommend(scores, courses, user_id="test_user_001", assessment_id="a1")

    print(f"\n" + "=" * 60)
    print("RESULTS")
    print("=" * 60)
    print(f"\nCareer Pathways: {', '.join(output.career_pathways)}")
    print(f"Total Evaluated: {output.total_courses_evaluated}")
    print(f"Total Recommended: {output.total_recommended}")
    print(f"Processing Time: {output.processing_time_ms:.2f}ms")

    for rec in output.recommendations:
        print(f"  #{rec.rank}: {rec.course.title} [{rec.course.level}] - {rec.relevance_score}")

    assert output.strategy == ScoringStrategy.SCOREBAND
    assert output.total_courses_evaluated == 10
    assert output.total_recommended == 5
    assert [rec.rank for rec in output.recommendations] == [1, 2, 3, 4, 5]
    assert len(set(output.recommended_course_ids)) == 5
    assert output.warnings == []

    scores_in_order = [rec.relevance_score for rec in output.recommendations]
    assert scores_in_order[0] == max(scores_in_order)

    for rec in output.recommendations:
        assert rec.explanations[0] == f"Consider the {rec.course.title} program which aligns with your interests."

    # Single course scoring
    print(f"\n" + "=" * 60)
    print("SINGLE COURSE SCORING TEST")
    print("=" * 60)

    first = output.recommendations[0]
    detail = engine.score_single_course(first.course, scores)

    print(f"\nDetailed scoring for: {first.course.title}")
    for name, value in detail["match_factors"].items():
        print(f"  {name}: {value}")

    assert detail["course_id"] == first.course.id
    assert detail["career_pathways"] == output.career_pathways

    print("\n" + "=" * 60)
    print("TEST COMPLETE ✓")
    print("=" * 60)


def test_scoring_engine_weighted():
    """Profile-driven scoring over the same catalog."""
    profile = UserProfile(
        user_id="test_user_002",
        skills=["Programming", "linux", "networking"],
        experience_level="intermediate",
        enrolled_courses=generate_mock_courses(1),
    )
    prior = [PriorAssessmentResult(assessment_id="a0", career_pathways=["Cybersecurity", "DevOps Engineering"])]

    output = RecommendationEngine().recommend([], generate_mock_courses(), user_profile=profile, prior_results=prior)

    assert output.strategy == ScoringStrategy.WEIGHTED
    assert output.total_recommended == 5
    for rec in output.recommendations:
        assert set(rec.match_factors) == {
            "career_pathway_match",
            "skill_gap_match",
            "level_match",
            "prerequisite_match",
            "user_history_match",
        }
        assert all(0.0 <= v <= 1.0 for v in rec.match_factors.values())


if __name__ == "__main__":
    test_scoring_engine()
