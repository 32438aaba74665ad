# pawsroam/crud/crud_review.py
from typing import Any, List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from .base import CRUDBase
from pawsroam.models.review import Review
from pawsroam.schemas.review import ReviewCreate, ReviewUpdate


class CRUDReview(CRUDBase[Review, ReviewCreate, ReviewUpdate]):
    def create_with_user(
        self, db: Session, *, obj_in: ReviewCreate, user_id: str
    ) -> Review:
        db_obj = Review(**obj_in.model_dump(), user_id=user_id)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def get_by_user_and_venue(
        self, db: Session, *, user_id: str, venue_id: str
    ) -> Optional[Review]:
        return (
            db.query(Review)
            .filter(Review.user_id == user_id, Review.venue_id == venue_id)
            .first()
        )

    def get_multi_by_venue(self, db: Session, *, venue_id: str) -> List[Review]:
        return (
            db.query(Review)
            .options(joinedload(Review.user))
            .filter(Review.venue_id == venue_id)
            .order_by(Review.created_at.desc())
            .all()
        )

    def get_rating_stats(self, db: Session, *, venue_id: str) -> Tuple[Any, int]:
        """Return (AVG(rating) or 0, COUNT(*)) over the venue's reviews."""
        avg_rating, count = (
            db.query(
                func.coalesce(func.avg(Review.rating), 0),
                func.count(Review.id),
            )
            .filter(Review.venue_id == venue_id)
            .one()
        )
        return avg_rating, count


review = CRUDReview(Review)
