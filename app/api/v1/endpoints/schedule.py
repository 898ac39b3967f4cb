# app/api/v1/endpoints/schedule.py
from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.crud import crud_course, crud_schedule
from app.db.session import get_db
from app.models.schedule import Schedule
from app.schemas.principal import Principal, StudentPrincipal, TeacherPrincipal
from app.schemas.schedule import TimetableSlot
from app.schemas.utils import SuccessResponse
from app.services.calendar_events import resolve_course_title

router = APIRouter()


def to_timetable_slot(slot: Schedule) -> TimetableSlot:
    return TimetableSlot(
        id=slot.id,
        course_id=slot.course_id,
        course_title=resolve_course_title(slot.course),
        teacher_id=slot.teacher_id,
        day_of_week=slot.day_of_week,
        start_time=slot.start_time,
        end_time=slot.end_time,
        room=slot.room,
        is_active=slot.is_active,
    )


@router.get(
    "",
    response_model=SuccessResponse[List[TimetableSlot]],
    summary="Get weekly timetable",
)
async def get_timetable(
    course_id: Annotated[Optional[str], Query(alias="courseId", description="Фильтр по курсу")] = None,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(deps.get_optional_principal),
):
    """
    Недельное расписание с учетом роли.

    Студент видит курсы с активной записью, преподаватель - свои курсы и слоты,
    где он указан преподавателем. Администратор и аноним видят все активные слоты.
    """
    match principal:
        case StudentPrincipal(id=student_id):
            course_ids = await crud_course.get_active_course_ids_for_student(db, student_id=student_id)
            slots = await crud_schedule.get_timetable(db, course_ids=course_ids, course_id=course_id)
        case TeacherPrincipal(id=teacher_id):
            course_ids = await crud_course.get_course_ids_for_teacher(db, teacher_id=teacher_id)
            slots = await crud_schedule.get_timetable(
                db, course_ids=course_ids, teacher_id=teacher_id, course_id=course_id
            )
        case _:
            slots = await crud_schedule.get_timetable(db, course_id=course_id)

    return SuccessResponse[List[TimetableSlot]](
        success=True, data=[to_timetable_slot(slot) for slot in slots]
    )
