"""
Result Recorder

Persists the chosen course ids and derived pathways onto the user's
assessment result, keyed by (user_id, assessment_id) with upsert semantics.
The engine never calls this; the runner does, after recommendations exist.
"""

import logging
from datetime import datetime
from typing import Dict, List, Protocol, Sequence, Tuple

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import AssessmentResultRecord

logger = logging.getLogger(__name__)


class ResultRecordingError(Exception):
    """Raised when a recommendation result could not be persisted."""


class ResultRecorder(Protocol):
    """
    Persists one recommendation result.

    Implementations should wrap storage failures in ResultRecordingError. The
    runner turns any exception raised here into a warning on the output.
    """

    def record(
        self,
        user_id: str,
        assessment_id: str,
        recommended_course_ids: Sequence[str],
        career_pathways: Sequence[str]
    ) -> None:
        ...


class SqlAlchemyResultRecorder:
    """Upserts into the assessment_results table."""

    def __init__(self, db: Session):
        self.db = db

    def record(
        self,
        user_id: str,
        assessment_id: str,
        recommended_course_ids: Sequence[str],
        career_pathways: Sequence[str]
    ) -> None:
        try:
            existing = self.db.execute(
                select(AssessmentResultRecord).where(
                    AssessmentResultRecord.user_id == user_id,
                    AssessmentResultRecord.assessment_id == assessment_id,
                )
            ).scalar_one_or_none()

            if existing is None:
                self.db.add(AssessmentResultRecord(
                    user_id=user_id,
                    assessment_id=assessment_id,
                    recommended_course_ids=list(recommended_course_ids),
                    career_pathways=list(career_pathways),
                ))
            else:
                existing.recommended_course_ids = list(recommended_course_ids)
                existing.career_pathways = list(career_pathways)
                existing.updated_at = datetime.utcnow()

            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Failed to record result for user=%s assessment=%s: %s", user_id, assessment_id, e)
            raise ResultRecordingError(str(e)) from e

        logger.info("Recorded %d course(s) for user=%s assessment=%s",
                    len(recommended_course_ids), user_id, assessment_id)


class InMemoryResultRecorder:
    """Keeps results in a dict; for development and tests."""

    def __init__(self):
        self.results: Dict[Tuple[str, str], Dict[str, List[str]]] = {}

    def record(
        self,
        user_id: str,
        assessment_id: str,
        recommended_course_ids: Sequence[str],
        career_pathways: Sequence[str]
    ) -> None:
        self.results[(user_id, assessment_id)] = {
            "recommended_course_ids": list(recommended_course_ids),
            "career_pathways": list(career_pathways),
        }
