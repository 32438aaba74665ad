# pawsroam/schemas/venue.py
from pydantic import BaseModel, Field
from typing import Optional

from pawsroam.constants.statuses import VenueStatus


class VenueBase(BaseModel):
    name: str = Field(..., json_schema_extra={"example": "The Barking Lot Cafe"})
    type: str = Field(..., json_schema_extra={"example": "cafe"})
    address: Optional[str] = Field(None, json_schema_extra={"example": "123 Doggo Street"})
    city: Optional[str] = None
    description: Optional[str] = None


class VenueCreate(VenueBase):
    owner_user_id: Optional[str] = None
    status: str = VenueStatus.PENDING_APPROVAL


class VenueUpdate(BaseModel):
    name: Optional[str] = None
    type: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
