# Export all recommendation models for easy imports
from .base import Base
from .course import CourseRecord
from .assessment_result import AssessmentResultRecord

__all__ = [
    "Base",
    "CourseRecord",
    "AssessmentResultRecord",
]
