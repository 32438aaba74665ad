# pawsroam/crud/crud_venue_claim.py
"""
Data access for venue ownership claims.

Methods that take part in the claim review transaction (``get_for_update``,
``reject_other_pending``) never commit; the caller owns the transaction.
"""
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload

from .base import CRUDBase
from pawsroam.constants.statuses import ClaimStatus
from pawsroam.models.venue_claim import VenueClaim
from pawsroam.schemas.venue_claim import VenueClaimCreate, VenueClaimReview


class CRUDVenueClaim(CRUDBase[VenueClaim, VenueClaimCreate, VenueClaimReview]):
    def create_pending(
        self, db: Session, *, obj_in: VenueClaimCreate, user_id: str
    ) -> VenueClaim:
        db_obj = VenueClaim(
            venue_id=obj_in.venue_id,
            user_id=user_id,
            claim_message=obj_in.claim_message,
            status=ClaimStatus.PENDING,
        )
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def get_pending_for_user(
        self, db: Session, *, venue_id: str, user_id: str
    ) -> Optional[VenueClaim]:
        return (
            db.query(VenueClaim)
            .filter(
                VenueClaim.venue_id == venue_id,
                VenueClaim.user_id == user_id,
                VenueClaim.status == ClaimStatus.PENDING,
            )
            .first()
        )

    def get_multi_by_status(
        self, db: Session, *, status: Optional[str] = None
    ) -> List[VenueClaim]:
        query = db.query(VenueClaim).options(
            joinedload(VenueClaim.venue), joinedload(VenueClaim.user)
        )
        if status is not None:
            query = query.filter(VenueClaim.status == status)
        return query.order_by(VenueClaim.created_at.desc()).all()

    def get_multi_by_user(self, db: Session, *, user_id: str) -> List[VenueClaim]:
        return (
            db.query(VenueClaim)
            .options(joinedload(VenueClaim.venue))
            .filter(VenueClaim.user_id == user_id)
            .order_by(VenueClaim.created_at.desc())
            .all()
        )

    def get_multi_by_venue(self, db: Session, *, venue_id: str) -> List[VenueClaim]:
        return (
            db.query(VenueClaim)
            .filter(VenueClaim.venue_id == venue_id)
            .order_by(VenueClaim.created_at.asc())
            .all()
        )

    def reject_other_pending(
        self, db: Session, *, venue_id: str, exclude_claim_id: str, admin_notes: str
    ) -> int:
        """Reject every other open claim on the venue. Does not commit."""
        return (
            db.query(VenueClaim)
            .filter(
                VenueClaim.venue_id == venue_id,
                VenueClaim.id != exclude_claim_id,
                VenueClaim.status == ClaimStatus.PENDING,
            )
            .update(
                {
                    VenueClaim.status: ClaimStatus.REJECTED,
                    VenueClaim.admin_notes: admin_notes,
                },
                synchronize_session="fetch",
            )
        )


venue_claim = CRUDVenueClaim(VenueClaim)
