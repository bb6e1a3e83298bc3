from typing import List, Optional
from pydantic import BaseModel

from app.schemas.activity import ActivityRead
from app.schemas.customer import AddressBase


class ProviderBase(AddressBase):
    user_id: Optional[int] = None
    company_name: Optional[str] = None
    siret: Optional[str] = None
    description: Optional[str] = None
    phone: Optional[str] = None


class ProviderIn(ProviderBase):
    id: Optional[int] = None


class ProviderActivityBase(BaseModel):
    provider_id: Optional[int] = None
    activity_id: Optional[int] = None


class ProviderActivityIn(ProviderActivityBase):
    id: Optional[int] = None


class ProviderActivityRead(ProviderActivityBase):
    id: int
    activity: Optional[ActivityRead] = None

    class Config:
        from_attributes = True


class ProviderRead(ProviderBase):
    id: int
    provider_activities: List[ProviderActivityRead] = []

    class Config:
        from_attributes = True
