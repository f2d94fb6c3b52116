from sqlalchemy import Column, Integer, String, Text, Date

from .base import Base


class Activity(Base):
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True)
    student_id = Column(String, index=True)
    title = Column(String)
    category = Column(String)
    description = Column(Text)
    start_date = Column(Date)
    end_date = Column(Date)
    status = Column(String)
