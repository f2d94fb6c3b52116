"""
Simulator errors.

Lookup failures from the external readers are the only errors the engine
raises; everything else degrades to a complete result.
"""


class SimulatorError(Exception):
    """Base class for admission simulator errors."""


class SchoolNotFoundError(SimulatorError, LookupError):
    def __init__(self, school_id: str):
        self.school_id = school_id
        super().__init__(f"School not found: {school_id}")


class StudentNotFoundError(SimulatorError, LookupError):
    def __init__(self, student_id: str):
        self.student_id = student_id
        super().__init__(f"Student not found: {student_id}")
