# app/services/calendar_events.py

from datetime import date, datetime, time, timedelta
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict

from app.core.exceptions import CalendarValidationError
from app.models.assignment import Assignment
from app.models.course import Course
from app.models.quiz import Quiz
from app.models.schedule import Schedule
from app.schemas.calendar import CalendarEvent

LESSON_COLOR = "#22c55e"
ASSIGNMENT_COLOR = "#ef4444"
QUIZ_COLOR = "#3b82f6"

UNKNOWN_COURSE_TITLE = "Unknown Course"

# События без времени идут в конце своего дня
ALL_DAY_SORT_TIME = "23:59"

MISSING_WINDOW_MESSAGE = "Query params 'from' and 'to' (ISO date) are required"
INVALID_WINDOW_MESSAGE = "Invalid date format. Use ISO date strings (e.g. 2025-01-01)"


class DateWindow(BaseModel):
    """Окно запроса [start, end] в календарных датах, обе границы включительно."""
    start: date
    end: date

    model_config = ConfigDict(frozen=True)

    @property
    def start_at(self) -> datetime:
        return datetime.combine(self.start, time.min)

    @property
    def end_at(self) -> datetime:
        return datetime.combine(self.end, time.max)


def _parse_iso_date(raw: str) -> date:
    # Принимает и "2025-01-01", и "2025-01-01T10:00:00Z"; берется только дата
    return datetime.fromisoformat(raw.strip()).date()


def parse_window(raw_from: Optional[str], raw_to: Optional[str]) -> DateWindow:
    if not raw_from or not raw_to:
        raise CalendarValidationError(MISSING_WINDOW_MESSAGE)
    try:
        return DateWindow(start=_parse_iso_date(raw_from), end=_parse_iso_date(raw_to))
    except ValueError:
        raise CalendarValidationError(INVALID_WINDOW_MESSAGE)


def sunday_first_weekday(day: date) -> int:
    """День недели в формате 0 = воскресенье ... 6 = суббота."""
    return day.isoweekday() % 7


def expand_weekly_occurrences(day_of_week: int, start: date, end: date) -> list[date]:
    """
    Все даты в [start, end], выпадающие на day_of_week (0 = воскресенье).
    При start > end возвращает пустой список.
    """
    diff = (day_of_week - sunday_first_weekday(start) + 7) % 7
    # Сдвиг и шаг проверяются до сложения: у date.max нет следующей недели
    if start > end or (end - start).days < diff:
        return []
    cursor = start + timedelta(days=diff)

    occurrences = [cursor]
    while (end - cursor).days >= 7:
        cursor += timedelta(days=7)
        occurrences.append(cursor)
    return occurrences


def resolve_course_title(course: Optional[Course]) -> str:
    """Название курса: английское, затем азербайджанское, затем русское."""
    if course is None:
        return UNKNOWN_COURSE_TITLE
    return course.title_en or course.title_az or course.title_ru


def split_timestamp(moment: datetime) -> tuple[str, Optional[str]]:
    """
    Делит timestamp на ("YYYY-MM-DD", "HH:MM").
    Ровно полночь считается событием без времени, время будет None.
    """
    day = moment.date().isoformat()
    if moment.hour == 0 and moment.minute == 0:
        return day, None
    return day, f"{moment.hour:02d}:{moment.minute:02d}"


def build_lesson_events(slot: Schedule, window: DateWindow, course_title: str) -> list[CalendarEvent]:
    events = []
    for occurrence in expand_weekly_occurrences(slot.day_of_week, window.start, window.end):
        day = occurrence.isoformat()
        fields = dict(
            id=f"schedule-{slot.id}-{day}",
            # У слота нет своего названия, показываем название курса
            title=course_title,
            date=day,
            time=slot.start_time,
            end_time=slot.end_time,
            type="lesson",
            course_id=slot.course_id,
            course_title=course_title,
            color=LESSON_COLOR,
        )
        if slot.room:
            fields["room"] = slot.room
        events.append(CalendarEvent(**fields))
    return events


def build_assignment_event(assignment: Assignment, course_title: str) -> Optional[CalendarEvent]:
    if assignment.due_date is None:
        return None
    day, at = split_timestamp(assignment.due_date)
    return CalendarEvent(
        id=f"assignment-{assignment.id}",
        title=assignment.title,
        date=day,
        time=at,
        end_time=None,
        type="assignment",
        course_id=assignment.course_id,
        course_title=course_title,
        color=ASSIGNMENT_COLOR,
    )


def build_quiz_event(quiz: Quiz, course_title: str) -> CalendarEvent:
    day, at = split_timestamp(quiz.created_at)
    return CalendarEvent(
        id=f"quiz-{quiz.id}",
        title=quiz.title,
        date=day,
        time=at,
        end_time=None,
        type="quiz",
        course_id=quiz.course_id,
        course_title=course_title,
        color=QUIZ_COLOR,
    )


def sort_events(events: Iterable[CalendarEvent]) -> list[CalendarEvent]:
    """
    Сортировка по дате, затем по времени; события без времени в конце дня.
    sorted() стабилен, поэтому равные события сохраняют исходный порядок.
    """
    return sorted(
        events,
        key=lambda e: (e.date, e.time if e.time is not None else ALL_DAY_SORT_TIME),
    )
