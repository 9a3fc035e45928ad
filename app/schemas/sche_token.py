from typing import Literal, Optional

from pydantic import BaseModel


class TokenPayload(BaseModel):
    user_id: int
    username: Optional[str] = None


class AdminTokenPayload(BaseModel):
    username: str
    role: Literal['admin']
