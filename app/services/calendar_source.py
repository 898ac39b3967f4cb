# app/services/calendar_source.py

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.crud import crud_assignment, crud_course, crud_quiz, crud_schedule
from app.models.assignment import Assignment
from app.models.course import Course
from app.models.quiz import Quiz
from app.models.schedule import Schedule
from app.services.calendar_events import DateWindow


class SqlCalendarSource:
    """
    Источник данных календаря поверх crud-функций.
    Каждый вызов открывает собственную сессию: AsyncSession нельзя
    использовать из нескольких параллельных задач.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def get_student_course_ids(self, student_id: str) -> list[str]:
        async with self.session_factory() as db:
            return await crud_course.get_active_course_ids_for_student(db, student_id=student_id)

    async def get_teacher_course_ids(self, teacher_id: str) -> list[str]:
        async with self.session_factory() as db:
            return await crud_course.get_course_ids_for_teacher(db, teacher_id=teacher_id)

    async def get_all_course_ids(self) -> list[str]:
        async with self.session_factory() as db:
            return await crud_course.get_all_course_ids(db)

    async def get_courses(self, course_ids: Sequence[str]) -> list[Course]:
        async with self.session_factory() as db:
            return await crud_course.get_courses_by_ids(db, course_ids=course_ids)

    async def get_schedules(self, course_ids: Sequence[str]) -> list[Schedule]:
        async with self.session_factory() as db:
            return await crud_schedule.get_schedules_for_courses(db, course_ids=course_ids, active_only=True)

    async def get_assignments(self, course_ids: Sequence[str], window: DateWindow) -> list[Assignment]:
        async with self.session_factory() as db:
            return await crud_assignment.get_assignments_due_between(
                db, course_ids=course_ids, start_at=window.start_at, end_at=window.end_at, active_only=True
            )

    async def get_quizzes(self, course_ids: Sequence[str], window: DateWindow) -> list[Quiz]:
        async with self.session_factory() as db:
            return await crud_quiz.get_quizzes_created_between(
                db,
                course_ids=course_ids,
                start_at=window.start_at,
                end_at=window.end_at,
                active_only=True,
                published_only=True,
            )
