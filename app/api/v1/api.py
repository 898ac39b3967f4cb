# app/api/v1/api.py
from fastapi import APIRouter
from .endpoints import calendar, schedule

api_router = APIRouter()
api_router.include_router(calendar.router, prefix="/calendar", tags=["Calendar"])
api_router.include_router(schedule.router, prefix="/schedule", tags=["Schedule"])
