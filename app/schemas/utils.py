# app/schemas/utils.py

from pydantic import BaseModel
from typing import Generic, TypeVar

T = TypeVar('T')

class SuccessResponse(BaseModel, Generic[T]):
    """Общий конверт успешного ответа API академии."""
    success: bool = True
    data: T

class ErrorResponse(BaseModel):
    success: bool = False
    message: str
