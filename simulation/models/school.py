from sqlalchemy import Column, Integer, String, Float, ForeignKey

from .base import Base


class School(Base):
    __tablename__ = "schools"

    id = Column(String, primary_key=True)
    name = Column(String)
    type = Column(String)  # science / foreign_language / autonomous / ...
    region = Column(String)


class Admission(Base):
    __tablename__ = "admissions"

    id = Column(Integer, primary_key=True)
    school_id = Column(String, ForeignKey("schools.id"), index=True)
    year = Column(Integer)
    cutoff_grade = Column(Float, nullable=True)  # 1 (best) - 9 (worst)
    competition_rate = Column(Float)
    publish_status = Column(String)  # DRAFT / PUBLISHED


class TargetSchool(Base):
    __tablename__ = "target_schools"

    id = Column(Integer, primary_key=True)
    student_id = Column(String, index=True)
    school_id = Column(String, ForeignKey("schools.id"))
    priority = Column(Integer, default=1)
