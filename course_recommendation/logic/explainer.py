"""
Explainer

Turns a scored course into human-readable explanation lines.
Pure formatting: the thresholds mirror the scoring internals.
"""

from typing import Iterable, List

from .contracts import ScoredCourse
from .constants import (
    ScoringStrategy,
    EXPLAIN_CAREER_PATHWAY_MIN,
    EXPLAIN_SKILL_GAP_MIN,
    EXPLAIN_LEVEL_MATCH_BELOW,
    EXPLAIN_PREREQUISITE_BELOW,
    EXPLAIN_PATHWAY_POINTS_MIN,
    EXPLAIN_LEVEL_POINTS_MIN,
    EXPLAIN_SKILLS_POINTS_MIN,
    EXPLAIN_DIVERSITY_POINTS_MIN,
    MAX_SKILLS_IN_EXPLANATION,
)


def explain(
    scored: ScoredCourse,
    pathways: Iterable[str] = (),
    user_skills: Iterable[str] = ()
) -> List[str]:
    """
    Explain why a course was recommended.

    Args:
        scored: The scored course
        pathways: Career pathways derived for the user
        user_skills: Skills the user already has

    Returns:
        Explanation sentences, headline first
    """
    course = scored.course
    lines = [f"Consider the {course.title or course.code or 'recommended'} program which aligns with your interests."]

    if scored.strategy == ScoringStrategy.WEIGHTED:
        lines.extend(_explain_weighted(scored, user_skills))
    else:
        lines.extend(_explain_scoreband(scored, pathways, user_skills))

    return lines


def _explain_weighted(scored: ScoredCourse, user_skills: Iterable[str]) -> List[str]:
    course = scored.course
    factors = scored.match_factors
    lines = []

    if factors.get("career_pathway_match", 0.0) > EXPLAIN_CAREER_PATHWAY_MIN and course.career_pathways:
        lines.append(
            f"This course strongly aligns with your career interests in {', '.join(course.career_pathways)}."
        )

    if factors.get("skill_gap_match", 0.0) > EXPLAIN_SKILL_GAP_MIN:
        new_skills = _new_skills(course.skills_developed, user_skills)
        if new_skills:
            lines.append(f"You'll develop valuable skills in {', '.join(new_skills)}.")

    if factors.get("level_match", 1.0) < EXPLAIN_LEVEL_MATCH_BELOW:
        lines.append(
            f"This course is at a {course.level} level, which will help you build on your existing knowledge."
        )

    if factors.get("prerequisite_match", 1.0) < EXPLAIN_PREREQUISITE_BELOW:
        known = {s.lower() for s in user_skills}
        missing = [r for r in course.requirements if r.lower() not in known]
        if missing:
            lines.append(f"Review the prerequisites before enrolling: {', '.join(missing)}.")

    return lines


def _explain_scoreband(
    scored: ScoredCourse,
    pathways: Iterable[str],
    user_skills: Iterable[str]
) -> List[str]:
    course = scored.course
    factors = scored.match_factors
    lines = []

    matched = scored.matched_pathways
    if not matched:
        wanted = {p.lower() for p in pathways}
        matched = [p for p in course.career_pathways if p.lower() in wanted]

    if factors.get("pathway_match", 0) >= EXPLAIN_PATHWAY_POINTS_MIN and matched:
        lines.append(f"It supports your recommended career pathways: {', '.join(matched)}.")

    if factors.get("level_match", 0) >= EXPLAIN_LEVEL_POINTS_MIN:
        lines.append(f"The {course.level} level is a good fit for your assessment results.")

    if factors.get("skills_match", 0) >= EXPLAIN_SKILLS_POINTS_MIN:
        skills = _new_skills(course.skills_developed, user_skills) or list(course.skills_developed)
        if skills:
            lines.append(
                f"It develops skills that build on your strengths: {', '.join(skills[:MAX_SKILLS_IN_EXPLANATION])}."
            )

    if factors.get("diversity_bonus", 0) >= EXPLAIN_DIVERSITY_POINTS_MIN:
        lines.append("It broadens your options with topics your other recommendations do not cover.")

    return lines


def _new_skills(course_skills: Iterable[str], user_skills: Iterable[str]) -> List[str]:
    """Course skills the user does not have yet, in course order."""
    known = {s.lower() for s in user_skills}
    return [s for s in course_skills if s.lower() not in known]
