"""
Data Adapter for Recommendation Engine

Reads courses and earlier assessment results from the database and transforms
them into engine contracts.

This is a pure READ + TRANSFORM layer:
- NO scoring logic
- NO ranking/selection
- NO DB writes
"""

import logging
from typing import List, Optional

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import CourseRecord, AssessmentResultRecord
from .contracts import Course, PriorAssessmentResult

logger = logging.getLogger(__name__)


def course_from_record(record: CourseRecord) -> Course:
    """Build a Course contract from a CourseRecord row."""
    return Course(
        id=record.id,
        title=record.title or "",
        code=record.code or "",
        description=record.description or "",
        level=record.level or "beginner",
        duration=record.duration or "",
        career_pathways=record.career_pathways or [],
        requirements=record.requirements or [],
        skills_developed=record.skills_developed or [],
        is_active=bool(record.is_active),
    )


def fetch_active_courses(
    db: Session,
    limit: Optional[int] = None
) -> List[Course]:
    """
    Fetch active catalog courses.

    Rows that cannot be converted are skipped.

    Args:
        db: Database session
        limit: Optional maximum number of rows

    Returns:
        Active courses in primary-key order
    """
    query = select(CourseRecord).where(CourseRecord.is_active.is_(True)).order_by(CourseRecord.id)
    if limit:
        query = query.limit(limit)

    courses: List[Course] = []
    for record in db.execute(query).scalars():
        try:
            courses.append(course_from_record(record))
        except ValidationError as e:
            logger.debug("Failed to convert course %s: %s", record.id, e)
            continue

    logger.info("Fetched %d active courses", len(courses))
    return courses


def fetch_prior_results(
    db: Session,
    user_id: str,
    exclude_assessment_id: Optional[str] = None
) -> List[PriorAssessmentResult]:
    """
    Fetch pathways recorded for the user's earlier assessments.

    Args:
        db: Database session
        user_id: User whose results to load
        exclude_assessment_id: Usually the assessment being scored right now
    """
    query = select(AssessmentResultRecord).where(AssessmentResultRecord.user_id == user_id)
    if exclude_assessment_id is not None:
        query = query.where(AssessmentResultRecord.assessment_id != exclude_assessment_id)
    query = query.order_by(AssessmentResultRecord.id)

    return [
        PriorAssessmentResult(
            assessment_id=record.assessment_id,
            career_pathways=record.career_pathways or [],
        )
        for record in db.execute(query).scalars()
    ]


def generate_mock_courses(count: int = 10) -> List[Course]:
    """
    Generate a fixed demo catalog for development without a database.

    Args:
        count: Number of mock courses to return

    Returns:
        List of mock Course objects
    """
    mock_data = [
        ("CS101", "Introduction to Programming", "beginner",
         ["Software Development"], [], ["Programming", "Problem-solving", "Teamwork"]),
        ("CS201", "Data Structures and Algorithms", "intermediate",
         ["Software Development", "Software Architecture"], ["programming"], ["Analytical thinking", "Technical design"]),
        ("DS110", "Foundations of Data Science", "beginner",
         ["Data Science", "Business Analysis"], [], ["Statistics", "Data analysis", "Communication"]),
        ("ML300", "Applied Machine Learning", "advanced",
         ["Machine Learning", "Data Science"], ["python", "statistics"], ["Research", "Model development"]),
        ("UX150", "User Experience Design", "beginner",
         ["UX/UI Design"], [], ["Creative design", "Collaboration", "User research"]),
        ("SEC210", "Network Security Essentials", "intermediate",
         ["Cybersecurity"], ["networking"], ["Security analysis", "Technical troubleshooting"]),
        ("CLD320", "Cloud Architecture on Modern Platforms", "advanced",
         ["Cloud Solutions Architecture", "Software Architecture"], ["linux", "networking"], ["Architecture design", "Strategy"]),
        ("OPS220", "DevOps Pipelines", "intermediate",
         ["DevOps Engineering"], ["linux"], ["Automation", "Technical development"]),
        ("PM130", "Agile Project Management", "beginner",
         ["Project Management"], [], ["Leadership", "Planning", "Communication"]),
        ("BA240", "Business Analysis Methods", "intermediate",
         ["Business Analysis", "Product Management"], [], ["Analytical modelling", "Stakeholder management"]),
    ]

    courses = []
    for code, title, level, pathways, requirements, skills in mock_data[:count]:
        courses.append(Course(
            id=code.lower(),
            title=title,
            code=code,
            description=f"{title} ({level})",
            level=level,
            duration="8 weeks",
            career_pathways=pathways,
            requirements=requirements,
            skills_developed=skills,
        ))

    return courses
