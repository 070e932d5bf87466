"""
Recommendation Engine

Main orchestrator that combines all scoring components into a single pipeline.
This is the primary entry point for generating recommendations.
"""

import logging
import time
from typing import List, Optional, Sequence

from .contracts import (
    AssessmentScore,
    Course,
    UserProfile,
    PriorAssessmentResult,
    SelectionState,
    ScoredCourse,
    RecommendationOutput,
)
from .pathways import derive_pathways
from .aggregator import (
    aggregate_scoreband,
    aggregate_weighted,
    batch_aggregate_scoreband,
    batch_aggregate_weighted,
)
from .ranker import select_top_n
from .output_assembler import assemble_output
from .explainer import explain
from .tables import ScoringTables, DEFAULT_TABLES
from .constants import ScoringStrategy, ENGINE_VERSION, DEFAULT_RECOMMENDATION_LIMIT

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """
    Stateless course recommendation engine.

    Pipeline flow:
    1. Eligibility - Keep active courses only
    2. Pathway Derivation - Scores -> candidate career pathways
    3. Relevance Scoring - Score-band or weighted factors per course
    4. Diversified Selection - Greedy top-N favouring new pathways/levels
    5. Output Assembly - Explanations, warnings, RecommendationOutput
    """

    def __init__(self, tables: ScoringTables = DEFAULT_TABLES):
        """
        Initialize the recommendation engine.

        Args:
            tables: Lookup tables; the defaults unless a caller substitutes its own.
        """
        self.tables = tables
        self.version = ENGINE_VERSION

    @staticmethod
    def choose_strategy(user_profile: Optional[UserProfile]) -> ScoringStrategy:
        """Weighted scoring needs a profile; otherwise score bands are used."""
        if user_profile is not None:
            return ScoringStrategy.WEIGHTED
        return ScoringStrategy.SCOREBAND

    def recommend(
        self,
        scores: Sequence[AssessmentScore],
        courses: Sequence[Course],
        strategy: Optional[ScoringStrategy] = None,
        user_profile: Optional[UserProfile] = None,
        prior_results: Optional[Sequence[PriorAssessmentResult]] = None,
        limit: int = DEFAULT_RECOMMENDATION_LIMIT,
        user_id: Optional[str] = None,
        assessment_id: Optional[str] = None
    ) -> RecommendationOutput:
        """
        Generate course recommendations.

        Args:
            scores: Assessment scores for the user
            courses: Catalog courses (inactive ones are skipped)
            strategy: Scoring strategy; chosen from the inputs when None
            user_profile: Skills, experience level and enrollment history
            prior_results: Pathways derived for the user's earlier assessments
            limit: Maximum number of recommendations

        Returns:
            RecommendationOutput with ranked, explained recommendations
        """
        start_time = time.perf_counter()
        warnings: List[str] = []

        strategy = self._resolve_strategy(strategy, user_profile, warnings)
        scores = list(scores)
        prior_results = list(prior_results or [])

        eligible = [c for c in courses if c.is_active]
        pathways = derive_pathways(scores, self.tables)

        logger.info(
            "Scoring %d/%d active courses with %s strategy",
            len(eligible), len(courses), strategy.value
        )

        scored = self._score(strategy, eligible, scores, pathways, user_profile, prior_results)
        selected = select_top_n(scored, limit)

        processing_time = (time.perf_counter() - start_time) * 1000

        return assemble_output(
            selected=selected,
            strategy=strategy,
            scores=scores,
            career_pathways=pathways,
            total_evaluated=len(courses),
            total_eligible=len(eligible),
            limit=limit,
            user_skills=user_profile.skills if user_profile else [],
            user_id=user_id,
            assessment_id=assessment_id,
            processing_time_ms=round(processing_time, 2),
            warnings=warnings,
        )

    def recommend_from_dict(
        self,
        payload: dict,
        **kwargs
    ) -> RecommendationOutput:
        """
        Generate recommendations from plain dictionaries.

        Convenience method for API integration. Recognised keys: scores,
        courses, user_profile, prior_results, strategy, limit.
        """
        profile_data = payload.get("user_profile")
        strategy = payload.get("strategy")

        params = {
            "scores": [AssessmentScore(**s) for s in payload.get("scores") or []],
            "courses": [Course(**c) for c in payload.get("courses") or []],
            "user_profile": UserProfile(**profile_data) if profile_data else None,
            "prior_results": [PriorAssessmentResult(**r) for r in payload.get("prior_results") or []],
            "strategy": ScoringStrategy(strategy) if strategy else None,
        }
        if payload.get("limit") is not None:
            params["limit"] = int(payload["limit"])
        params.update(kwargs)
        return self.recommend(**params)

    def score_single_course(
        self,
        course: Course,
        scores: Sequence[AssessmentScore],
        strategy: Optional[ScoringStrategy] = None,
        user_profile: Optional[UserProfile] = None,
        prior_results: Optional[Sequence[PriorAssessmentResult]] = None
    ) -> dict:
        """
        Score a single course for a user.

        Useful for getting detailed scoring on a specific course the user is
        interested in. Scored against an empty selection state, so the
        diversity bonus is at its maximum for the course.
        """
        warnings: List[str] = []
        strategy = self._resolve_strategy(strategy, user_profile, warnings)
        pathways = derive_pathways(scores, self.tables)

        if strategy == ScoringStrategy.WEIGHTED:
            scored = aggregate_weighted(course, user_profile, list(prior_results or []), self.tables)
        else:
            scored = aggregate_scoreband(course, list(scores), pathways, SelectionState(), self.tables)

        return {
            "course_id": course.id,
            "strategy": strategy.value,
            "relevance_score": round(scored.relevance_score, 2),
            "match_factors": dict(scored.match_factors),
            "career_pathways": pathways,
            "explanations": explain(
                scored,
                pathways=pathways,
                user_skills=user_profile.skills if user_profile else [],
            ),
            "warnings": warnings,
        }

    def _resolve_strategy(
        self,
        strategy: Optional[ScoringStrategy],
        user_profile: Optional[UserProfile],
        warnings: List[str]
    ) -> ScoringStrategy:
        if strategy is None:
            return self.choose_strategy(user_profile)

        strategy = ScoringStrategy(strategy)
        if strategy == ScoringStrategy.WEIGHTED and user_profile is None:
            msg = "Weighted scoring requested without a user profile; using score-band scoring."
            logger.warning(msg)
            warnings.append(msg)
            return ScoringStrategy.SCOREBAND
        return strategy

    def _score(
        self,
        strategy: ScoringStrategy,
        courses: Sequence[Course],
        scores: Sequence[AssessmentScore],
        pathways: Sequence[str],
        user_profile: Optional[UserProfile],
        prior_results: Sequence[PriorAssessmentResult]
    ) -> List[ScoredCourse]:
        if strategy == ScoringStrategy.WEIGHTED:
            return batch_aggregate_weighted(courses, user_profile, prior_results, self.tables)
        scored, _ = batch_aggregate_scoreband(courses, scores, pathways, self.tables)
        return scored


# Convenience function for simple usage
def get_recommendations(
    scores: Sequence[AssessmentScore],
    courses: Sequence[Course],
    user_profile: Optional[UserProfile] = None,
    prior_results: Optional[Sequence[PriorAssessmentResult]] = None,
    limit: int = DEFAULT_RECOMMENDATION_LIMIT
) -> RecommendationOutput:
    """
    Convenience function to get recommendations with the default tables.
    """
    engine = RecommendationEngine()
    return engine.recommend(
        scores,
        courses,
        user_profile=user_profile,
        prior_results=prior_results,
        limit=limit,
    )
