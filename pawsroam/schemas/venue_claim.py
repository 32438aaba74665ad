# pawsroam/schemas/venue_claim.py
from pydantic import BaseModel
from typing import Optional


class VenueClaimCreate(BaseModel):
    venue_id: str
    claim_message: Optional[str] = None


class VenueClaimReview(BaseModel):
    claim_id: str
    new_status: str
    admin_notes: Optional[str] = None
