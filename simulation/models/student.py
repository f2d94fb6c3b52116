from sqlalchemy import Column, String, DateTime

from .base import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(String, primary_key=True)
    name = Column(String)
    school_name = Column(String)
    created_at = Column(DateTime)
