"""
Record Readers

Read interfaces the simulator depends on. The engine never owns student or
school data; it only queries these, one method per entity type.

InMemoryRecordStore implements all three for development and tests.
"""

from typing import Dict, List, Optional, Protocol

from .contracts import GradeEntry, SchoolAdmissionInfo, StudentRecords, TargetSchoolEntry


class StudentRecordReader(Protocol):
    """Approved records for a student."""

    async def student_exists(self, student_id: str) -> bool: ...

    async def fetch_grades(self, student_id: str) -> List[GradeEntry]: ...

    async def fetch_activity_count(self, student_id: str) -> int: ...

    async def fetch_volunteer_hours(self, student_id: str) -> float: ...

    async def fetch_attendance_penalty_count(self, student_id: str) -> int: ...


class SchoolReader(Protocol):
    """School lookup with the latest published cutoff."""

    async def fetch_school(self, school_id: str) -> Optional[SchoolAdmissionInfo]: ...


class TargetListReader(Protocol):
    """A student's target schools."""

    async def fetch_targets(self, student_id: str) -> List[TargetSchoolEntry]: ...


class InMemoryRecordStore:
    """
    Dictionary-backed reader for all record types.

    Args:
        students: student_id -> StudentRecords
        schools: school_id -> SchoolAdmissionInfo
        targets: student_id -> target list
    """

    def __init__(
        self,
        students: Optional[Dict[str, StudentRecords]] = None,
        schools: Optional[Dict[str, SchoolAdmissionInfo]] = None,
        targets: Optional[Dict[str, List[TargetSchoolEntry]]] = None,
    ):
        self.students = students or {}
        self.schools = schools or {}
        self.targets = targets or {}

    def _records(self, student_id: str) -> StudentRecords:
        return self.students.get(student_id) or StudentRecords(student_id=student_id)

    async def student_exists(self, student_id: str) -> bool:
        return student_id in self.students

    async def fetch_grades(self, student_id: str) -> List[GradeEntry]:
        return list(self._records(student_id).grades)

    async def fetch_activity_count(self, student_id: str) -> int:
        return self._records(student_id).activity_count

    async def fetch_volunteer_hours(self, student_id: str) -> float:
        return self._records(student_id).volunteer_hours

    async def fetch_attendance_penalty_count(self, student_id: str) -> int:
        return self._records(student_id).unexcused_absence_and_lateness_count

    async def fetch_school(self, school_id: str) -> Optional[SchoolAdmissionInfo]:
        return self.schools.get(school_id)

    async def fetch_targets(self, student_id: str) -> List[TargetSchoolEntry]:
        return list(self.targets.get(student_id, []))
