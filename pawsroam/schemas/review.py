# pawsroam/schemas/review.py
from datetime import date
from pydantic import BaseModel
from typing import Optional


# Rating bounds are checked by the review service so that an out-of-range
# value is reported as BAD_USER_INPUT rather than a pydantic error.
class ReviewCreate(BaseModel):
    venue_id: str
    rating: int
    comment: Optional[str] = None
    visit_date: Optional[date] = None


class ReviewUpdate(BaseModel):
    rating: Optional[int] = None
    comment: Optional[str] = None
    visit_date: Optional[date] = None
