from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, JSON, UniqueConstraint

from .base import Base


class AssessmentResultRecord(Base):
    __tablename__ = "assessment_results"
    __table_args__ = (
        UniqueConstraint("user_id", "assessment_id", name="uq_assessment_results_user_assessment"),
    )

    id = Column(Integer, primary_key=True)
    user_id = Column(String, nullable=False, index=True)
    assessment_id = Column(String, nullable=False)

    # Written by the result recorder after each recommendation run
    recommended_course_ids = Column(JSON)
    career_pathways = Column(JSON)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
