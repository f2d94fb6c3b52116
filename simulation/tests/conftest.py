"""
Shared fixtures for the simulator tests.
"""

import os

# db.py refuses to import without a database URL
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest

from simulation.logic.contracts import (
    GradeEntry,
    StudentRecords,
    SchoolAdmissionInfo,
    TargetSchoolEntry,
)
from simulation.logic.readers import InMemoryRecordStore


@pytest.fixture
def baseline_records():
    """
    Average rank 5, 2 activities, 8 volunteer hours, 1 lateness.
    Sub-scores 25 / 10 / 2 / 8 -> composite 45.
    """
    return StudentRecords(
        student_id="student-1",
        grades=[
            GradeEntry(subject="Math", rank=3, year=2023, term=2),
            GradeEntry(subject="Math", rank=5, year=2024, term=1),
            GradeEntry(subject="Math", rank=None, year=2024, term=2),
            GradeEntry(subject="English", rank=5, year=2024, term=1),
        ],
        activity_count=2,
        volunteer_hours=8,
        unexcused_absence_and_lateness_count=1,
    )


@pytest.fixture
def open_school():
    """School with no published cutoff (threshold 60)."""
    return SchoolAdmissionInfo(school_id="school-open", name="Hanbit High School", school_type="general")


@pytest.fixture
def selective_school():
    """Cutoff grade 3 -> threshold 62.5."""
    return SchoolAdmissionInfo(
        school_id="school-sci",
        name="Seoul Science High School",
        school_type="science",
        cutoff_grade=3,
        admission_year=2025,
    )


@pytest.fixture
def store(baseline_records, open_school, selective_school):
    return InMemoryRecordStore(
        students={"student-1": baseline_records},
        schools={
            open_school.school_id: open_school,
            selective_school.school_id: selective_school,
        },
        targets={
            "student-1": [
                TargetSchoolEntry(school_id="school-sci", priority=2),
                TargetSchoolEntry(school_id="school-open", priority=1),
            ],
        },
    )
