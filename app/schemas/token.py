# app/schemas/token.py
from pydantic import BaseModel
from typing import Optional

class TokenData(BaseModel):
    """Содержимое JWT: sub - ID пользователя, type - его роль."""
    sub: str
    type: Optional[str] = None
