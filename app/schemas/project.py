from typing import List, Optional
from pydantic import BaseModel
from datetime import date

from app.schemas.activity import ActivityRead
from app.schemas.customer import AddressBase


class ProjectBase(AddressBase):
    title: Optional[str] = None
    description: Optional[str] = None
    date_send: Optional[date] = None
    customer_id: Optional[int] = None


class ProjectIn(ProjectBase):
    id: Optional[int] = None


class ProjectPicBase(BaseModel):
    link: Optional[str] = None
    project_id: Optional[int] = None


class ProjectPicIn(ProjectPicBase):
    id: Optional[int] = None


class ProjectPicRead(ProjectPicBase):
    id: int

    class Config:
        from_attributes = True


class ProjectActivityBase(BaseModel):
    project_id: Optional[int] = None
    activity_id: Optional[int] = None


class ProjectActivityIn(ProjectActivityBase):
    id: Optional[int] = None


class ProjectActivityRead(ProjectActivityBase):
    id: int
    activity: Optional[ActivityRead] = None

    class Config:
        from_attributes = True


class ProjectRead(ProjectBase):
    """A project together with its photos and required activities."""
    id: int
    date_send: date
    project_pics: List[ProjectPicRead] = []
    project_activities: List[ProjectActivityRead] = []

    class Config:
        from_attributes = True
