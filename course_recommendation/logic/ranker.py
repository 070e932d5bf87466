"""
Ranker

Ranks scored courses and picks a diversified top-N so that the final list
covers varied pathways and levels rather than near-duplicates.
"""

from typing import List, Sequence, Set

from .contracts import ScoredCourse
from .constants import DEFAULT_RECOMMENDATION_LIMIT


def rank_courses(
    scored_courses: Sequence[ScoredCourse]
) -> List[ScoredCourse]:
    """
    Rank courses by relevance score (descending).

    The sort is stable, so equal scores keep their input order.
    """
    return sorted(
        scored_courses,
        key=lambda x: x.relevance_score,
        reverse=True
    )


def select_top_n(
    scored_courses: Sequence[ScoredCourse],
    n: int = DEFAULT_RECOMMENDATION_LIMIT
) -> List[ScoredCourse]:
    """
    Greedy diversified selection.

    The best-scoring course is always picked first. Every later pick is the
    highest-scoring remaining course that adds a pathway or level not seen
    yet; if none does, the highest-scoring remaining course is taken.

    Args:
        scored_courses: Scored candidates, in catalog order
        n: Maximum number of picks

    Returns:
        Up to n courses, no course id repeated
    """
    if n <= 0:
        return []

    pool = rank_courses(_unique_by_id(scored_courses))
    if not pool:
        return []

    selected: List[ScoredCourse] = []
    seen_pathways: Set[str] = set()
    seen_levels: Set[str] = set()

    while pool and len(selected) < n:
        pick_index = 0
        if selected:
            for index, scored in enumerate(pool):
                if _adds_novelty(scored, seen_pathways, seen_levels):
                    pick_index = index
                    break

        pick = pool.pop(pick_index)
        selected.append(pick)
        seen_pathways.update(p.lower() for p in pick.course.career_pathways)
        if pick.course.level:
            seen_levels.add(pick.course.level)

    return selected


def _adds_novelty(
    scored: ScoredCourse,
    seen_pathways: Set[str],
    seen_levels: Set[str]
) -> bool:
    """True when the course brings a new pathway or a new level."""
    if any(p.lower() not in seen_pathways for p in scored.course.career_pathways):
        return True
    return bool(scored.course.level) and scored.course.level not in seen_levels


def _unique_by_id(scored_courses: Sequence[ScoredCourse]) -> List[ScoredCourse]:
    """Drop repeated course ids, keeping the first occurrence."""
    seen: Set[str] = set()
    unique = []
    for scored in scored_courses:
        if scored.course.id in seen:
            continue
        seen.add(scored.course.id)
        unique.append(scored)
    return unique
