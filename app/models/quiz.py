# app/models/quiz.py
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.models.course import generate_id


class Quiz(Base):
    __tablename__ = "quizzes"

    id = Column(String(36), primary_key=True, default=generate_id)
    course_id = Column(String(36), ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False)

    is_active = Column(Boolean, nullable=False, server_default="true", default=True)
    is_published = Column(Boolean, nullable=False, server_default="false", default=False)
    # Дата создания используется календарем как дата события
    created_at = Column(DateTime(timezone=False), server_default=func.now(), nullable=False, index=True)

    course = relationship("Course")
