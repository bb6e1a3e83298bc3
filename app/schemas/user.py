from typing import Optional
from pydantic import BaseModel, EmailStr, Field
from datetime import datetime


class UserCreate(BaseModel):
    login: str = Field(min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(min_length=4, max_length=100)
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class UserRead(BaseModel):
    id: int
    login: str
    email: EmailStr
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    activated: bool
    created_at: Optional[datetime]

    class Config:
        from_attributes = True


class LoginRequest(BaseModel):
    login: str
    password: str


class Token(BaseModel):
    id_token: str
    token_type: str = "bearer"
