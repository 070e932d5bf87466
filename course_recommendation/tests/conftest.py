"""Shared fixtures for the recommendation engine tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from course_recommendation.models import Base, CourseRecord
from factories import make_course


@pytest.fixture
def catalog():
    """Small catalog spanning several pathways and all three levels."""
    return [
        make_course("arch", ["Software Architecture"], "advanced",
                    ["Architecture design", "Technical leadership"], ["programming"]),
        make_course("nurse", ["Nursing"], "beginner", ["Patient care"]),
        make_course("ds", ["Data Science", "Machine Learning"], "intermediate",
                    ["Statistics", "Research", "Analytical thinking"], ["python"]),
        make_course("sec", ["Cybersecurity"], "intermediate",
                    ["Security analysis", "Problem-solving"]),
        make_course("pm", ["Project Management"], "beginner",
                    ["Leadership", "Communication", "Planning"]),
        make_course("ux", ["UX/UI Design"], "beginner", ["Creative design", "Collaboration"]),
    ]


@pytest.fixture
def db_session():
    """In-memory SQLite session with the engine's tables created."""
    engine = create_engine(
        "sqlite://",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine, autoflush=False, future=True)
    session = Session()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def seeded_db(db_session):
    """Session holding a handful of active and inactive courses."""
    db_session.add_all([
        CourseRecord(id="c1", title="Software Architecture Patterns", code="SA400", level="advanced",
                     career_pathways=["Software Architecture"], requirements=["programming"],
                     skills_developed=["Architecture design"], is_active=True),
        CourseRecord(id="c2", title="Intro to Nursing", code="NU100", level="beginner",
                     career_pathways=["Nursing"], requirements=[], skills_developed=["Patient care"],
                     is_active=True),
        CourseRecord(id="c3", title="Network Security", code="SEC210", level="intermediate",
                     career_pathways=["Cybersecurity"], requirements=None, skills_developed=None,
                     is_active=True),
        CourseRecord(id="c4", title="Retired Course", code="OLD001", level="beginner",
                     career_pathways=["Software Architecture"], requirements=[], skills_developed=[],
                     is_active=False),
    ])
    db_session.commit()
    return db_session
