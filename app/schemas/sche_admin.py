from typing import List

from pydantic import BaseModel, Field

from app.schemas.sche_user import UserProfileResponse


class AdminLoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AdminLoginResponse(BaseModel):
    message: str
    token: str


class AdminUserListResponse(BaseModel):
    users: List[UserProfileResponse]


class AdminPasswordResetRequest(BaseModel):
    new_password: str = Field(..., min_length=6, max_length=72)
