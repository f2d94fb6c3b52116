from sqlalchemy import Column, Integer, String

from .base import Base


class Attendance(Base):
    __tablename__ = "attendances"

    id = Column(Integer, primary_key=True)
    student_id = Column(String, index=True)
    year = Column(Integer)
    absence_unexcused = Column(Integer, default=0)
    lateness_count = Column(Integer, default=0)
    status = Column(String)
