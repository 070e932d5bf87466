"""
Dimension Scorers

Individual scoring functions for each match factor.
Score-band factors return integer points on their own scale; weighted factors
return a normalized score between 0.0 and 1.0.
All logic is deterministic - no AI/ML components.
"""

from typing import Iterable, List, Sequence, Set, Tuple

from .contracts import AssessmentScore, Course, UserProfile, PriorAssessmentResult, SelectionState
from .tables import ScoringTables, DEFAULT_TABLES
from .constants import (
    LEVEL_ORDER,
    MAX_SKILLS_MATCH,
    MAX_CATEGORY_MATCH,
    DEFAULT_SKILLS_MATCH,
    DEFAULT_CATEGORY_MATCH,
    DIVERSITY_POINTS_PER_PATHWAY,
    DIVERSITY_PATHWAY_CAP,
    DIVERSITY_POINTS_NEW_LEVEL,
    DIVERSITY_POINTS_PER_SKILL,
    DIVERSITY_SKILL_CAP,
    LEVEL_EXACT_MATCH,
    LEVEL_NEAR_MATCH,
    LEVEL_TOO_ADVANCED,
    DEFAULT_HISTORY_MATCH,
)


# =============================================================================
# SCORE-BAND FACTORS (Mode A)
# =============================================================================

def score_pathway_match(
    course: Course,
    pathways: Sequence[str],
    scores: Sequence[AssessmentScore],
    tables: ScoringTables = DEFAULT_TABLES
) -> Tuple[int, List[str]]:
    """
    Score overlap between the course's pathways and the derived pathways.

    Points scale with the average assessment score: 10/20/30 at an average of
    100 for zero/one/two-or-more matches.

    Returns:
        (points, matched course pathways)
    """
    wanted = {p.lower() for p in pathways}
    matched = [p for p in course.career_pathways if p.lower() in wanted]

    multiplier = average_score(scores) / 100
    none_pts, one_pt, many_pts = tables.pathway_match_points

    if not matched:
        points = none_pts
    elif len(matched) == 1:
        points = one_pt
    else:
        points = many_pts

    return round(points * multiplier), matched


def score_level_match(
    course: Course,
    scores: Sequence[AssessmentScore],
    tables: ScoringTables = DEFAULT_TABLES
) -> int:
    """
    Score how well the course level suits the learner's assessment results.

    Each score whose category has a level-preference matrix votes with weight
    score/100; the matrix column is chosen by the average score.
    """
    column = tables.level_column(average_score(scores))

    total_weight = 0.0
    weighted_points = 0.0

    for score in scores:
        matrix = tables.level_preferences.get(score.category.lower())
        if not matrix:
            continue
        level_points = matrix.get(course.level.lower())
        points = level_points[column] if level_points else tables.default_level_points
        weight = score.score / 100
        weighted_points += points * weight
        total_weight += weight

    if total_weight <= 0:
        return tables.default_level_points

    return round(weighted_points / total_weight)


def score_skills_match(
    course: Course,
    scores: Sequence[AssessmentScore],
    tables: ScoringTables = DEFAULT_TABLES
) -> Tuple[int, int]:
    """
    Score the course's developed skills against the assessed categories.

    A category counts as matched when any skill mentions the category or one
    of its keywords. The share of skills carrying a keyword is weighted by
    score/100. Both are averaged over the number of scores.

    Returns:
        (skills_match 0-20, category_match 0-15)
    """
    skills = [s.lower() for s in course.skills_developed]
    if not skills or not scores:
        return DEFAULT_SKILLS_MATCH, DEFAULT_CATEGORY_MATCH

    category_matches = 0
    skill_relevance = 0.0

    for score in scores:
        category = score.category.lower()
        keywords = tables.category_keywords.get(category, ())
        weight = score.score / 100

        relevant = [s for s in skills if _mentions_any(s, keywords)]
        if (category and any(category in s for s in skills)) or relevant:
            category_matches += 1

        skill_relevance += (len(relevant) / len(skills)) * weight

    skills_match = round(MAX_SKILLS_MATCH * (skill_relevance / len(scores)))
    category_match = round(MAX_CATEGORY_MATCH * (category_matches / len(scores)))

    return min(MAX_SKILLS_MATCH, skills_match), min(MAX_CATEGORY_MATCH, category_match)


def score_diversity_bonus(
    course: Course,
    state: SelectionState
) -> int:
    """
    Bonus for what the course adds beyond the courses scored before it.

    Order dependent: the same course scores differently against a different
    SelectionState.
    """
    new_pathways = {p.lower() for p in course.career_pathways} - state.pathways
    new_skills = {s.lower() for s in course.skills_developed} - state.skills

    bonus = min(DIVERSITY_PATHWAY_CAP, len(new_pathways) * DIVERSITY_POINTS_PER_PATHWAY)
    if course.level and course.level not in state.levels:
        bonus += DIVERSITY_POINTS_NEW_LEVEL
    bonus += min(DIVERSITY_SKILL_CAP, len(new_skills) * DIVERSITY_POINTS_PER_SKILL)

    return bonus


# =============================================================================
# WEIGHTED FACTORS (Mode B)
# =============================================================================

def score_career_pathway_match(
    course: Course,
    prior_results: Iterable[PriorAssessmentResult]
) -> float:
    """Jaccard overlap of previously derived pathways and the course's pathways."""
    interests = {
        pathway.lower()
        for result in prior_results
        for pathway in result.career_pathways
    }
    return jaccard_similarity(interests, _lowered(course.career_pathways))


def score_skill_gap_match(course: Course, profile: UserProfile) -> float:
    """Share of the course's skills the learner does not have yet."""
    course_skills = _lowered(course.skills_developed)
    if not course_skills:
        return 0.0
    new_skills = course_skills - _lowered(profile.skills)
    return len(new_skills) / len(course_skills)


def score_level_fit(course: Course, profile: UserProfile) -> float:
    """
    Compare course level with experience level.

    Courses more than one step above the learner score 0; an exact match
    scores 1.0; anything else scores 0.8.
    """
    user_index = level_index(profile.experience_level)
    course_index = level_index(course.level)

    if course_index > user_index + 1:
        return LEVEL_TOO_ADVANCED
    if course_index == user_index:
        return LEVEL_EXACT_MATCH
    return LEVEL_NEAR_MATCH


def score_prerequisite_match(course: Course, profile: UserProfile) -> float:
    """Share of the course requirements already among the learner's skills."""
    if not course.requirements:
        return 1.0
    user_skills = _lowered(profile.skills)
    met = sum(1 for req in course.requirements if req.lower() in user_skills)
    return met / len(course.requirements)


def score_user_history_match(course: Course, profile: UserProfile) -> float:
    """Average pathway similarity to each previously enrolled course."""
    if not profile.enrolled_courses:
        return DEFAULT_HISTORY_MATCH

    course_pathways = _lowered(course.career_pathways)
    similarities = [
        jaccard_similarity(_lowered(enrolled.career_pathways), course_pathways)
        for enrolled in profile.enrolled_courses
    ]
    return sum(similarities) / len(similarities)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def jaccard_similarity(a: Iterable[str], b: Iterable[str]) -> float:
    """|A ∩ B| / |A ∪ B|, defined as 0.0 when both sets are empty."""
    set_a = set(a)
    set_b = set(b)
    union = set_a | set_b
    if not union:
        return 0.0
    return len(set_a & set_b) / len(union)


def average_score(scores: Sequence[AssessmentScore]) -> float:
    """Mean of the assessment scores, 0.0 for no scores."""
    if not scores:
        return 0.0
    return sum(s.score for s in scores) / len(scores)


def level_index(level: str) -> int:
    """Ordinal position of a level; unknown levels read as beginner."""
    try:
        return LEVEL_ORDER.index((level or "").lower())
    except ValueError:
        return 0


def _lowered(values: Iterable[str]) -> Set[str]:
    return {v.lower() for v in values}


def _mentions_any(text: str, keywords: Iterable[str]) -> bool:
    """Simple substring matching against a keyword list."""
    return any(k in text for k in keywords)
