from sqlalchemy import Column, Integer, String, DateTime

from .base import Base


class Grade(Base):
    __tablename__ = "grades"

    id = Column(Integer, primary_key=True)
    student_id = Column(String, index=True)
    subject = Column(String)
    rank = Column(Integer, nullable=True)  # 1 (best) - 9 (worst)
    year = Column(Integer)
    semester = Column(Integer)
    status = Column(String)  # PENDING / APPROVED / REJECTED
    created_at = Column(DateTime)
