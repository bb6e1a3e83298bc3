from typing import Optional
from pydantic import BaseModel


class ActivityBase(BaseModel):
    name: str
    description: Optional[str] = None


class ActivityIn(ActivityBase):
    id: Optional[int] = None


class ActivityRead(ActivityBase):
    id: int

    class Config:
        from_attributes = True
