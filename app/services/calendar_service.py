# app/services/calendar_service.py

import asyncio
import logging
from typing import Optional

from app.core.exceptions import CalendarSourceError
from app.schemas.calendar import CalendarEvent
from app.schemas.principal import Principal
from app.services.access_scope import resolve_course_scope
from app.services.calendar_events import (
    build_assignment_event,
    build_lesson_events,
    build_quiz_event,
    parse_window,
    resolve_course_title,
    sort_events,
)

logger = logging.getLogger(__name__)


class CalendarService:
    """
    Собирает календарь пользователя из трех источников:
    еженедельного расписания, дедлайнов заданий и публикаций тестов.
    Ничего не пишет и не кэширует, каждый вызов считается заново.
    """

    def __init__(self, source):
        self.source = source

    async def get_events(
        self, principal: Principal, raw_from: Optional[str], raw_to: Optional[str]
    ) -> list[CalendarEvent]:
        window = parse_window(raw_from, raw_to)

        try:
            course_ids = await resolve_course_scope(self.source, principal)
        except Exception as e:
            logger.error(f"Course scope lookup failed for {principal.role}: {e}", exc_info=True)
            raise CalendarSourceError("Failed to load calendar events") from e
        if not course_ids:
            logger.debug(f"Empty course scope for {principal.role}, returning no events")
            return []

        # Четыре независимых чтения идут параллельно. Если одно падает,
        # TaskGroup отменяет остальные и частичный результат не возвращается.
        try:
            async with asyncio.TaskGroup() as tg:
                courses_task = tg.create_task(self.source.get_courses(course_ids))
                schedules_task = tg.create_task(self.source.get_schedules(course_ids))
                assignments_task = tg.create_task(self.source.get_assignments(course_ids, window))
                quizzes_task = tg.create_task(self.source.get_quizzes(course_ids, window))
        except ExceptionGroup as eg:
            logger.error(
                f"Calendar fetch failed for {principal.role} ({len(eg.exceptions)} error(s))",
                exc_info=eg,
            )
            raise CalendarSourceError("Failed to load calendar events") from eg

        course_map = {course.id: course for course in courses_task.result()}

        def title_for(course_id: str) -> str:
            return resolve_course_title(course_map.get(course_id))

        events: list[CalendarEvent] = []

        # a) занятия из расписания
        for slot in schedules_task.result():
            events.extend(build_lesson_events(slot, window, title_for(slot.course_id)))

        # b) задания со сроком сдачи
        for assignment in assignments_task.result():
            event = build_assignment_event(assignment, title_for(assignment.course_id))
            if event is not None:
                events.append(event)

        # c) опубликованные тесты
        for quiz in quizzes_task.result():
            events.append(build_quiz_event(quiz, title_for(quiz.course_id)))

        logger.info(
            f"Calendar {window.start}..{window.end} for {principal.role}: "
            f"{len(course_ids)} courses, {len(events)} events"
        )
        return sort_events(events)
