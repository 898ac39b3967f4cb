# app/models/course.py
import uuid

from sqlalchemy import Column, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.db.base import Base


def generate_id() -> str:
    return str(uuid.uuid4())


class Course(Base):
    __tablename__ = "courses"

    id = Column(String(36), primary_key=True, default=generate_id)
    slug = Column(String, unique=True, index=True, nullable=True)

    # Названия на трех языках академии
    title_az = Column(String, nullable=False, server_default="")
    title_ru = Column(String, nullable=False, server_default="")
    title_en = Column(String, nullable=False, server_default="")


class StudentCourse(Base):
    """Запись студента на курс."""
    __tablename__ = "student_courses"
    __table_args__ = (UniqueConstraint("student_id", "course_id"),)

    id = Column(String(36), primary_key=True, default=generate_id)
    student_id = Column(String(36), nullable=False, index=True)
    course_id = Column(String(36), ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)
    # ACTIVE, COMPLETED, DROPPED
    status = Column(String(16), nullable=False, server_default="ACTIVE")

    course = relationship("Course")


class TeacherCourse(Base):
    """Назначение преподавателя на курс."""
    __tablename__ = "teacher_courses"
    __table_args__ = (UniqueConstraint("teacher_id", "course_id"),)

    id = Column(String(36), primary_key=True, default=generate_id)
    teacher_id = Column(String(36), nullable=False, index=True)
    course_id = Column(String(36), ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)

    course = relationship("Course")
