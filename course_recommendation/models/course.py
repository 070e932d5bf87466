from sqlalchemy import Column, String, Text, Boolean, JSON

from .base import Base


class CourseRecord(Base):
    __tablename__ = "courses"

    id = Column(String, primary_key=True)
    title = Column(String)
    code = Column(String, unique=True)
    department = Column(String)
    description = Column(Text)
    level = Column(String, default="beginner")
    duration = Column(String)
    career_pathways = Column(JSON)
    requirements = Column(JSON)
    skills_developed = Column(JSON)
    is_active = Column(Boolean, default=True)
