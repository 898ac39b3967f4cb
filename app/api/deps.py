# app/api/deps.py
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.core import security
from app.db.session import AsyncSessionLocal
from app.schemas.principal import Principal, AnonymousPrincipal, principal_from_claims
from app.services.calendar_service import CalendarService
from app.services.calendar_source import SqlCalendarSource

# auto_error=False: отсутствие заголовка обрабатываем сами, чтобы вернуть 401
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Principal:
    """
    Зависимость для получения пользователя и его роли из JWT токена.
    В токене sub - ID пользователя, type - роль (student, teacher, admin).
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    token_data = security.decode_access_token(credentials.credentials)
    return principal_from_claims(token_data.sub, token_data.type)


async def get_optional_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Principal:
    """
    "Мягкая" зависимость для публичных эндпоинтов.
    Неверный или просроченный токен означает анонимного пользователя.
    """
    if credentials is None:
        return AnonymousPrincipal()
    try:
        token_data = security.decode_access_token(credentials.credentials)
    except HTTPException:
        return AnonymousPrincipal()
    return principal_from_claims(token_data.sub, token_data.type)


def get_calendar_source() -> SqlCalendarSource:
    return SqlCalendarSource(AsyncSessionLocal)


def get_calendar_service(
    source: SqlCalendarSource = Depends(get_calendar_source),
) -> CalendarService:
    return CalendarService(source)
