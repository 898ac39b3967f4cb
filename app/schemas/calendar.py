# app/schemas/calendar.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Literal, Optional

EventType = Literal["lesson", "assignment", "quiz"]


class CalendarEvent(BaseModel):
    """
    Событие календаря в едином формате для занятий, дедлайнов и тестов.
    Создается заново на каждый запрос и нигде не хранится.
    """
    id: str
    title: str
    date: str  # "YYYY-MM-DD", никогда не timestamp
    time: Optional[str]  # "HH:MM" или None для событий на весь день
    end_time: Optional[str]
    type: EventType
    course_id: str
    course_title: str
    color: str
    # Заполняется только для занятий с аудиторией, иначе поле не попадает в ответ
    room: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
