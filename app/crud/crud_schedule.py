# app/crud/crud_schedule.py
from typing import Optional, Sequence
from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from app.models.schedule import Schedule


async def get_schedules_for_courses(
    db: AsyncSession, *, course_ids: Sequence[str], active_only: bool = True
) -> list[Schedule]:
    """
    Получает еженедельные слоты для набора курсов.
    Порядок фиксирован, чтобы календарь был воспроизводимым.
    """
    if not course_ids:
        return []
    stmt = select(Schedule).where(Schedule.course_id.in_(course_ids))
    if active_only:
        stmt = stmt.where(Schedule.is_active.is_(True))
    stmt = stmt.order_by(Schedule.day_of_week, Schedule.start_time, Schedule.id)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_timetable(
    db: AsyncSession,
    *,
    course_ids: Optional[Sequence[str]] = None,
    teacher_id: Optional[str] = None,
    course_id: Optional[str] = None,
) -> list[Schedule]:
    """
    Активное недельное расписание с подгруженными курсами.

    course_ids=None означает "без ограничения по курсам" (админ, аноним).
    Если передан teacher_id, дополнительно берутся слоты, где он указан преподавателем.
    """
    stmt = (
        select(Schedule)
        .where(Schedule.is_active.is_(True))
        .options(selectinload(Schedule.course))
    )

    if course_ids is not None:
        conditions = [Schedule.course_id.in_(course_ids)]
        if teacher_id:
            conditions.append(Schedule.teacher_id == teacher_id)
        stmt = stmt.where(or_(*conditions))

    if course_id:
        stmt = stmt.where(Schedule.course_id == course_id)

    stmt = stmt.order_by(Schedule.day_of_week, Schedule.start_time, Schedule.id)
    result = await db.execute(stmt)
    return list(result.scalars().all())
