from typing import Optional
from pydantic import BaseModel


class ProviderEligibilityBase(BaseModel):
    provider_id: Optional[int] = None
    project_id: Optional[int] = None


class ProviderEligibilityIn(ProviderEligibilityBase):
    id: Optional[int] = None


class ProviderEligibilityRead(ProviderEligibilityBase):
    id: int

    class Config:
        from_attributes = True
