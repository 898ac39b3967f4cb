# app/api/v1/endpoints/calendar.py
from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, Query

from app.api import deps
from app.schemas.calendar import CalendarEvent
from app.schemas.principal import Principal
from app.schemas.utils import SuccessResponse
from app.services.calendar_service import CalendarService

router = APIRouter()


@router.get(
    "/events",
    response_model=SuccessResponse[List[CalendarEvent]],
    # room не попадает в ответ, если у занятия нет аудитории
    response_model_exclude_unset=True,
    summary="Get calendar events for the current user",
)
async def get_calendar_events(
    from_date: Annotated[Optional[str], Query(alias="from", description="Начало периода, ISO дата")] = None,
    to_date: Annotated[Optional[str], Query(alias="to", description="Конец периода, ISO дата")] = None,
    principal: Principal = Depends(deps.get_current_principal),
    service: CalendarService = Depends(deps.get_calendar_service),
):
    """
    Все события пользователя за период [from, to]: занятия по расписанию,
    сроки сдачи заданий и опубликованные тесты, отсортированные по дате и времени.
    """
    events = await service.get_events(principal, from_date, to_date)
    return SuccessResponse[List[CalendarEvent]](success=True, data=events)
