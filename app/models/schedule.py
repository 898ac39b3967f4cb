# app/models/schedule.py
from sqlalchemy import Column, String, SmallInteger, Boolean, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.models.course import generate_id


class Schedule(Base):
    """
    Еженедельный слот расписания курса.
    day_of_week: 0 = воскресенье ... 6 = суббота.
    """
    __tablename__ = "schedules"
    __table_args__ = (
        CheckConstraint("day_of_week BETWEEN 0 AND 6", name="ck_schedules_day_of_week"),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    course_id = Column(String(36), ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)
    teacher_id = Column(String(36), nullable=True, index=True)

    day_of_week = Column(SmallInteger, nullable=False)
    start_time = Column(String(5), nullable=False)  # "HH:MM"
    end_time = Column(String(5), nullable=False)
    room = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, server_default="true", default=True)

    course = relationship("Course")
