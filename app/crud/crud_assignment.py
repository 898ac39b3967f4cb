# app/crud/crud_assignment.py
from datetime import datetime
from typing import Sequence
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.models.assignment import Assignment


async def get_assignments_due_between(
    db: AsyncSession,
    *,
    course_ids: Sequence[str],
    start_at: datetime,
    end_at: datetime,
    active_only: bool = True,
) -> list[Assignment]:
    """Задания курсов, срок сдачи которых попадает в [start_at, end_at]."""
    if not course_ids:
        return []
    stmt = select(Assignment).where(
        Assignment.course_id.in_(course_ids),
        Assignment.due_date.is_not(None),
        Assignment.due_date >= start_at,
        Assignment.due_date <= end_at,
    )
    if active_only:
        stmt = stmt.where(Assignment.is_active.is_(True))
    stmt = stmt.order_by(Assignment.due_date, Assignment.id)
    result = await db.execute(stmt)
    return list(result.scalars().all())
