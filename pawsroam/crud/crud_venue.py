# pawsroam/crud/crud_venue.py
from decimal import Decimal
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from .base import CRUDBase
from pawsroam.constants.statuses import VenueStatus
from pawsroam.models.venue import Venue
from pawsroam.schemas.venue import VenueCreate, VenueUpdate


class CRUDVenue(CRUDBase[Venue, VenueCreate, VenueUpdate]):
    def create_with_owner(
        self, db: Session, *, obj_in: VenueCreate, owner_user_id: str
    ) -> Venue:
        db_obj = Venue(**obj_in.model_dump(exclude={"owner_user_id"}), owner_user_id=owner_user_id)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def get_multi_by_owner(self, db: Session, *, owner_user_id: str) -> List[Venue]:
        return (
            db.query(Venue)
            .filter(Venue.owner_user_id == owner_user_id)
            .order_by(Venue.created_at.desc())
            .all()
        )

    def search(
        self,
        db: Session,
        *,
        name: Optional[str] = None,
        venue_type: Optional[str] = None,
        status: Optional[str] = VenueStatus.ACTIVE,
        limit: int = 100,
    ) -> List[Venue]:
        query = db.query(Venue)
        if status is not None:
            query = query.filter(Venue.status == status)
        if name:
            query = query.filter(Venue.name.ilike(f"%{name}%"))
        if venue_type:
            query = query.filter(func.lower(Venue.type) == venue_type.lower())
        return query.order_by(Venue.name.asc()).limit(limit).all()

    def set_rating_summary(
        self, db: Session, *, venue_id: str, average_rating: Decimal, review_count: int
    ) -> int:
        """Write the cached rating fields. Returns the number of rows touched."""
        updated = (
            db.query(Venue)
            .filter(Venue.id == venue_id)
            .update(
                {
                    Venue.average_rating: average_rating,
                    Venue.review_count: review_count,
                },
                synchronize_session="fetch",
            )
        )
        db.commit()
        return updated


venue = CRUDVenue(Venue)
