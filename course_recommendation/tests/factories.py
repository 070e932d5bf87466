"""Builders for test courses and scored courses."""

from course_recommendation.logic.contracts import Course, ScoredCourse


def make_course(course_id, pathways=(), level="beginner", skills=(), requirements=(), **kwargs):
    return Course(
        id=course_id,
        title=kwargs.pop("title", f"Course {course_id}"),
        code=kwargs.pop("code", course_id.upper()),
        level=level,
        career_pathways=list(pathways),
        skills_developed=list(skills),
        requirements=list(requirements),
        **kwargs
    )


def make_scored(course_id, score, pathways=(), level="beginner"):
    return ScoredCourse(
        course=make_course(course_id, pathways=pathways, level=level),
        relevance_score=score,
    )
