from unittest.mock import MagicMock

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from course_recommendation.logic.recorder import (
    InMemoryResultRecorder,
    ResultRecordingError,
    SqlAlchemyResultRecorder,
)
from course_recommendation.models import AssessmentResultRecord


def _rows(db):
    return db.execute(select(AssessmentResultRecord)).scalars().all()


def test_record_inserts_row(db_session):
    SqlAlchemyResultRecorder(db_session).record("u1", "a1", ["c1", "c2"], ["Data Science"])

    rows = _rows(db_session)
    assert len(rows) == 1
    assert rows[0].recommended_course_ids == ["c1", "c2"]
    assert rows[0].career_pathways == ["Data Science"]


def test_record_twice_keeps_one_row(db_session):
    recorder = SqlAlchemyResultRecorder(db_session)

    recorder.record("u1", "a1", ["c1"], ["Data Science"])
    recorder.record("u1", "a1", ["c3", "c2"], ["Cybersecurity"])

    rows = _rows(db_session)
    assert len(rows) == 1
    assert rows[0].recommended_course_ids == ["c3", "c2"]
    assert rows[0].career_pathways == ["Cybersecurity"]


def test_different_assessments_get_separate_rows(db_session):
    recorder = SqlAlchemyResultRecorder(db_session)

    recorder.record("u1", "a1", ["c1"], [])
    recorder.record("u1", "a2", ["c2"], [])
    recorder.record("u2", "a1", ["c3"], [])

    assert len(_rows(db_session)) == 3


def test_database_failure_rolls_back_and_raises():
    db = MagicMock()
    db.execute.side_effect = OperationalError("SELECT 1", {}, Exception("database is locked"))

    with pytest.raises(ResultRecordingError):
        SqlAlchemyResultRecorder(db).record("u1", "a1", ["c1"], [])

    db.rollback.assert_called_once()
    db.commit.assert_not_called()


def test_in_memory_recorder_overwrites():
    recorder = InMemoryResultRecorder()

    recorder.record("u1", "a1", ("c1",), ("Data Science",))
    recorder.record("u1", "a1", ("c2",), ("Nursing",))

    assert recorder.results == {
        ("u1", "a1"): {"recommended_course_ids": ["c2"], "career_pathways": ["Nursing"]},
    }
