# app/crud/crud_course.py
from typing import Sequence
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.models.course import Course, StudentCourse, TeacherCourse

ACTIVE_ENROLLMENT_STATUS = "ACTIVE"


async def get_active_course_ids_for_student(db: AsyncSession, *, student_id: str) -> list[str]:
    """Возвращает ID курсов, на которые студент записан со статусом ACTIVE."""
    stmt = (
        select(StudentCourse.course_id)
        .where(
            StudentCourse.student_id == student_id,
            StudentCourse.status == ACTIVE_ENROLLMENT_STATUS,
        )
        .order_by(StudentCourse.course_id)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_course_ids_for_teacher(db: AsyncSession, *, teacher_id: str) -> list[str]:
    """Возвращает ID курсов, которые ведет преподаватель."""
    stmt = (
        select(TeacherCourse.course_id)
        .where(TeacherCourse.teacher_id == teacher_id)
        .order_by(TeacherCourse.course_id)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_all_course_ids(db: AsyncSession) -> list[str]:
    """ID всех курсов каталога."""
    result = await db.execute(select(Course.id).order_by(Course.id))
    return list(result.scalars().all())


async def get_courses_by_ids(db: AsyncSession, *, course_ids: Sequence[str]) -> list[Course]:
    """Получает курсы по списку ID (нужны только для названий)."""
    if not course_ids:
        return []
    stmt = select(Course).where(Course.id.in_(course_ids))
    result = await db.execute(stmt)
    return list(result.scalars().all())
