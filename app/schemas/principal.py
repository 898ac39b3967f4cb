# app/schemas/principal.py
from typing import Literal, Optional, Union
from pydantic import BaseModel, ConfigDict


class StudentPrincipal(BaseModel):
    role: Literal["student"] = "student"
    id: str
    model_config = ConfigDict(frozen=True)


class TeacherPrincipal(BaseModel):
    role: Literal["teacher"] = "teacher"
    id: str
    model_config = ConfigDict(frozen=True)


class AdminPrincipal(BaseModel):
    role: Literal["admin"] = "admin"
    id: str
    model_config = ConfigDict(frozen=True)


class AnonymousPrincipal(BaseModel):
    """Пользователь без токена или с неизвестной ролью."""
    role: Literal["anonymous"] = "anonymous"
    model_config = ConfigDict(frozen=True)


Principal = Union[StudentPrincipal, TeacherPrincipal, AdminPrincipal, AnonymousPrincipal]


def principal_from_claims(user_id: Optional[str], role: Optional[str]) -> Principal:
    """Строит Principal из полей JWT (sub и type)."""
    if not user_id:
        return AnonymousPrincipal()
    if role == "student":
        return StudentPrincipal(id=user_id)
    if role == "teacher":
        return TeacherPrincipal(id=user_id)
    if role == "admin":
        return AdminPrincipal(id=user_id)
    return AnonymousPrincipal()
