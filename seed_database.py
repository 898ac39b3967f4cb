# seed_database.py

import asyncio
import logging
from datetime import datetime, timedelta

from app.db.base import Base
from app.db.session import AsyncSessionLocal, engine
from app.core.security import create_access_token
# Импорт моделей регистрирует таблицы в Base.metadata
from app.models.course import Course, StudentCourse, TeacherCourse
from app.models.schedule import Schedule
from app.models.assignment import Assignment
from app.models.quiz import Quiz

# Настраиваем логирование
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger("DatabaseSeeder")

DEMO_STUDENT_ID = "demo-student"
DEMO_TEACHER_ID = "demo-teacher"
DEMO_ADMIN_ID = "demo-admin"


async def create_schema():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed_data():
    """
    Создает схему и наполняет базу демо-курсами, расписанием, заданиями и тестами.
    """
    logger.info("--- Starting Database Seeding Process ---")

    logger.info("Step 1: Creating tables...")
    try:
        await create_schema()
    except Exception as e:
        logger.error(f"Step 1 FAILED: Could not create schema. Error: {e}", exc_info=True)
        return

    logger.info("Step 2: Inserting demo data...")
    today = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)
    async with AsyncSessionLocal() as session:
        python_course = Course(slug="python-basics", title_az="Python əsasları", title_ru="Основы Python", title_en="Python Basics")
        design = Course(slug="ui-design", title_az="UI dizayn", title_ru="", title_en="")
        session.add_all([python_course, design])
        await session.flush()

        session.add_all([
            StudentCourse(student_id=DEMO_STUDENT_ID, course_id=python_course.id, status="ACTIVE"),
            StudentCourse(student_id=DEMO_STUDENT_ID, course_id=design.id, status="ACTIVE"),
            TeacherCourse(teacher_id=DEMO_TEACHER_ID, course_id=python_course.id),
            Schedule(course_id=python_course.id, teacher_id=DEMO_TEACHER_ID, day_of_week=1,
                     start_time="10:00", end_time="11:30", room="A-101", is_active=True),
            Schedule(course_id=python_course.id, teacher_id=DEMO_TEACHER_ID, day_of_week=3,
                     start_time="10:00", end_time="11:30", room="A-101", is_active=True),
            Schedule(course_id=design.id, day_of_week=6, start_time="14:00", end_time="16:00", is_active=True),
            Assignment(course_id=python_course.id, title="Homework 1: variables",
                       due_date=today + timedelta(days=3), is_active=True),
            Assignment(course_id=python_course.id, title="Homework 2: loops",
                       due_date=today + timedelta(days=10, hours=18), is_active=True),
            Quiz(course_id=python_course.id, title="Quiz: basics", is_active=True, is_published=True,
                 created_at=today + timedelta(hours=9, minutes=30)),
        ])
        try:
            await session.commit()
        except Exception as e:
            logger.error(f"Step 2 FAILED: Could not insert demo data. Error: {e}", exc_info=True)
            await session.rollback()
            return

    logger.info("Step 3: Demo access tokens:")
    for user_id, role in ((DEMO_STUDENT_ID, "student"), (DEMO_TEACHER_ID, "teacher"), (DEMO_ADMIN_ID, "admin")):
        token = create_access_token({"sub": user_id, "type": role}, expires_delta=timedelta(days=30))
        logger.info(f"  {role}: {token}")

    await engine.dispose()
    logger.info("--- Database Seeding Process Finished Successfully! ---")


if __name__ == "__main__":
    asyncio.run(seed_data())
