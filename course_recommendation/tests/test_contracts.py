import pytest

from course_recommendation.logic.contracts import (
    AssessmentScore,
    Course,
    PriorAssessmentResult,
    UserProfile,
)
from course_recommendation.logic.dimension_scorers import level_index


@pytest.mark.parametrize("value,expected", [
    ("Data Science", ["Data Science"]),
    (5, []),
    (None, []),
    ({"Data Science": 1}, []),
    (["Data Science", "", "  ", 3, None, "Nursing"], ["Data Science", "Nursing"]),
    (("Cybersecurity",), ["Cybersecurity"]),
])
def test_course_list_fields_are_coerced(value, expected):
    course = Course(id="x", career_pathways=value, requirements=value, skills_developed=value)

    assert course.career_pathways == expected
    assert course.requirements == expected
    assert course.skills_developed == expected


def test_profile_and_prior_result_lists_are_coerced():
    profile = UserProfile(skills="python", enrolled_courses=7)
    prior = PriorAssessmentResult(career_pathways="Data Science")

    assert profile.skills == ["python"]
    assert profile.enrolled_courses == []
    assert prior.career_pathways == ["Data Science"]


@pytest.mark.parametrize("value,expected", [
    ("Advanced ", "advanced"),
    ("  INTERMEDIATE", "intermediate"),
    ("   ", "beginner"),
    (None, "beginner"),
])
def test_levels_are_trimmed_and_lowered(value, expected):
    assert Course(id="x", level=value).level == expected
    assert UserProfile(experience_level=value).experience_level == expected


def test_padded_level_keeps_its_rank():
    assert level_index(Course(id="x", level="Advanced ").level) == 2


@pytest.mark.parametrize("value,expected", [
    (None, 0.0),
    ("abc", 0.0),
    (float("nan"), 0.0),
    (-5, 0.0),
    (140, 100.0),
    ("72.5", 72.5),
])
def test_assessment_score_is_clamped(value, expected):
    assert AssessmentScore(category="career", score=value).score == expected


def test_non_string_category_becomes_blank():
    assert AssessmentScore(category=3, score=50).category == ""
