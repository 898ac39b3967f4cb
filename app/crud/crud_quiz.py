# app/crud/crud_quiz.py
from datetime import datetime
from typing import Sequence
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.models.quiz import Quiz


async def get_quizzes_created_between(
    db: AsyncSession,
    *,
    course_ids: Sequence[str],
    start_at: datetime,
    end_at: datetime,
    active_only: bool = True,
    published_only: bool = True,
) -> list[Quiz]:
    """Тесты курсов, созданные в интервале [start_at, end_at]."""
    if not course_ids:
        return []
    stmt = select(Quiz).where(
        Quiz.course_id.in_(course_ids),
        Quiz.created_at >= start_at,
        Quiz.created_at <= end_at,
    )
    if active_only:
        stmt = stmt.where(Quiz.is_active.is_(True))
    if published_only:
        stmt = stmt.where(Quiz.is_published.is_(True))
    stmt = stmt.order_by(Quiz.created_at, Quiz.id)
    result = await db.execute(stmt)
    return list(result.scalars().all())
