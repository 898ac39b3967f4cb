# app/schemas/schedule.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional


class TimetableSlot(BaseModel):
    """Один еженедельный слот расписания с названием курса."""
    id: str
    course_id: str
    course_title: str
    teacher_id: Optional[str] = None
    day_of_week: int
    start_time: str
    end_time: str
    room: Optional[str] = None
    is_active: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
