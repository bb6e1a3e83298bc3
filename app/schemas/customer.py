from typing import Optional
from pydantic import BaseModel


class AddressBase(BaseModel):
    street_number: Optional[str] = None
    street: Optional[str] = None
    complement_street: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None


class CustomerBase(AddressBase):
    user_id: Optional[int] = None
    phone: Optional[str] = None


class CustomerIn(CustomerBase):
    id: Optional[int] = None


class CustomerRead(CustomerBase):
    id: int

    class Config:
        from_attributes = True
