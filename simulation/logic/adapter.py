"""
Data Adapter for the Admission Simulator

Reads from the externally owned record tables (grades, activities,
volunteers, attendances, schools, admissions, target_schools) and transforms
rows into the engine's contracts.

This is a pure READ + TRANSFORM layer:
- NO scoring logic
- NO classification
- NO DB writes
- Only APPROVED records and PUBLISHED admissions are read
"""

import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from .contracts import GradeEntry, SchoolAdmissionInfo, TargetSchoolEntry
from .constants import APPROVED_STATUS, PUBLISHED_STATUS
from ..models import Student, Grade, Activity, Volunteer, Attendance, School, Admission, TargetSchool

logger = logging.getLogger(__name__)


class SqlRecordReader:
    """
    SQLAlchemy-backed student record, school and target list reader.

    Queries run synchronously on the caller's session, so the coroutines
    complete without yielding. Drive them from a worker thread (the sync
    route handlers do), never from the server's event loop.
    """

    def __init__(self, db: Session):
        self.db = db

    # -------------------------------------------------------------------------
    # Student records
    # -------------------------------------------------------------------------

    async def student_exists(self, student_id: str) -> bool:
        return self.db.get(Student, student_id) is not None

    async def fetch_grades(self, student_id: str) -> List[GradeEntry]:
        rows = (
            self.db.query(Grade)
            .filter(Grade.student_id == student_id, Grade.status == APPROVED_STATUS)
            .order_by(Grade.year.desc(), Grade.semester.desc())
            .all()
        )
        logger.debug(f"Loaded {len(rows)} approved grades for {student_id}")

        return [
            GradeEntry(
                subject=row.subject,
                rank=row.rank,
                year=row.year or 0,
                term=row.semester or 0,
            )
            for row in rows
        ]

    async def fetch_activity_count(self, student_id: str) -> int:
        return (
            self.db.query(func.count(Activity.id))
            .filter(Activity.student_id == student_id, Activity.status == APPROVED_STATUS)
            .scalar()
        ) or 0

    async def fetch_volunteer_hours(self, student_id: str) -> float:
        total = (
            self.db.query(func.coalesce(func.sum(Volunteer.hours), 0.0))
            .filter(Volunteer.student_id == student_id, Volunteer.status == APPROVED_STATUS)
            .scalar()
        )
        return float(total or 0.0)

    async def fetch_attendance_penalty_count(self, student_id: str) -> int:
        total = (
            self.db.query(
                func.coalesce(
                    func.sum(
                        func.coalesce(Attendance.absence_unexcused, 0)
                        + func.coalesce(Attendance.lateness_count, 0)
                    ),
                    0,
                )
            )
            .filter(Attendance.student_id == student_id, Attendance.status == APPROVED_STATUS)
            .scalar()
        )
        return int(total or 0)

    # -------------------------------------------------------------------------
    # Schools
    # -------------------------------------------------------------------------

    async def fetch_school(self, school_id: str) -> Optional[SchoolAdmissionInfo]:
        school = self.db.get(School, school_id)
        if school is None:
            return None

        latest = (
            self.db.query(Admission)
            .filter(Admission.school_id == school_id, Admission.publish_status == PUBLISHED_STATUS)
            .order_by(Admission.year.desc())
            .first()
        )

        return SchoolAdmissionInfo(
            school_id=school.id,
            name=school.name or "",
            school_type=school.type,
            region=school.region,
            cutoff_grade=latest.cutoff_grade if latest else None,
            admission_year=latest.year if latest else None,
        )

    # -------------------------------------------------------------------------
    # Target list
    # -------------------------------------------------------------------------

    async def fetch_targets(self, student_id: str) -> List[TargetSchoolEntry]:
        rows = (
            self.db.query(TargetSchool)
            .filter(TargetSchool.student_id == student_id)
            .order_by(TargetSchool.priority.asc())
            .all()
        )
        return [
            TargetSchoolEntry(school_id=row.school_id, priority=row.priority or 1)
            for row in rows
        ]
