from sqlalchemy import Column, Integer, String, Float, Date

from .base import Base


class Volunteer(Base):
    __tablename__ = "volunteers"

    id = Column(Integer, primary_key=True)
    student_id = Column(String, index=True)
    organization = Column(String)
    hours = Column(Float, default=0.0)
    date = Column(Date)
    status = Column(String)
