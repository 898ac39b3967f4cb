# app/main.py

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Роутер, который собирает все API-эндпоинты
from app.api.v1.api import api_router

from app.core.config import settings
from app.core.exceptions import CalendarSourceError, CalendarValidationError
from app.db.session import engine
from app.schemas.utils import ErrorResponse

logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger("APIProcess")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("API process starting up...")

    yield # Приложение готово к работе и принимает запросы

    logger.info("API process shutting down...")
    await engine.dispose()
    logger.info("Database engine has been disposed.")


app = FastAPI(
    title="Academy Calendar API",
    version="1.0.0",
    description="Role-scoped calendar of lessons, assignment deadlines and quizzes.",
    lifespan=lifespan
)

# --- Настройка CORS ---
origins = [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:5173", # для Vite
    settings.WEB_APP_URL
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Ошибки в формате {success: false, message} ---
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(CalendarValidationError)
async def calendar_validation_error_handler(request: Request, exc: CalendarValidationError):
    # Ошибка клиента, в лог как сбой не пишем
    return JSONResponse(status_code=400, content=ErrorResponse(message=exc.message).model_dump())


@app.exception_handler(CalendarSourceError)
async def calendar_source_error_handler(request: Request, exc: CalendarSourceError):
    # Причина уже записана в лог сервисом вместе с трассировкой
    return JSONResponse(status_code=500, content=ErrorResponse(message=str(exc)).model_dump())


# --- Подключение API-роутеров ---
app.include_router(api_router, prefix="/api/v1")

# --- Корневой эндпоинт для проверки работы ---
@app.get("/", include_in_schema=False)
def read_root():
    return {"status": "ok", "message": "API server is running."}
