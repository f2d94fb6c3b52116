# Export all simulator models for easy imports
from .base import Base
from .student import Student
from .grade import Grade
from .activity import Activity
from .volunteer import Volunteer
from .attendance import Attendance
from .school import School, Admission, TargetSchool

__all__ = [
    "Base",
    "Student",
    "Grade",
    "Activity",
    "Volunteer",
    "Attendance",
    "School",
    "Admission",
    "TargetSchool",
]
