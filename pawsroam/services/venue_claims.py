# pawsroam/services/venue_claims.py
"""
Venue ownership claims and their arbitration.

Submission takes no locks: two users can both pass the "venue is
unowned" check and both end up with a pending claim. The race is settled
when an admin reviews a claim. Review runs in one transaction holding a row
lock on the venue, so approvals on the same venue are serialised and only the
first one can assign ownership. Any later approval on that venue is
downgraded to a rejection instead of overwriting the owner.
"""
import logging
from typing import List, Optional

from graphql import GraphQLError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from pawsroam.constants.statuses import ClaimStatus
from pawsroam.core.errors import (
    BadRequestError,
    BadUserInputError,
    ForbiddenError,
    InternalServerError,
    NotFoundError,
)
from pawsroam.crud.crud_venue import venue as crud_venue
from pawsroam.crud.crud_venue_claim import venue_claim as crud_venue_claim
from pawsroam.models.venue_claim import VenueClaim
from pawsroam.schemas.venue_claim import VenueClaimCreate, VenueClaimReview

logger = logging.getLogger(__name__)

ALREADY_OWNED_MESSAGE = "This venue is already claimed or owned."
DUPLICATE_CLAIM_MESSAGE = "You already have a pending claim for this venue."
SUPERSEDED_NOTE = "Automatically rejected: another claim for this venue was approved."
OWNED_ELSEWHERE_NOTE = (
    "Automatically rejected: venue is already owned by another user."
)
ALREADY_OWNER_NOTE = (
    "Automatically rejected: redundant claim, the claimant already owns this venue."
)


def _with_note(admin_notes: Optional[str], note: str) -> str:
    if admin_notes:
        return f"{admin_notes}\n{note}"
    return note


class VenueClaimService:
    def __init__(self, db: Session):
        self.db = db

    def submit_claim(self, *, obj_in: VenueClaimCreate, user_id: str) -> VenueClaim:
        """
        Create a pending claim for ``user_id``.

        Checks, in order: the venue exists, it has no owner, and the caller has
        no open claim on it. None of this is locked.
        """
        db = self.db
        venue = crud_venue.get(db, id=obj_in.venue_id)
        if not venue:
            raise NotFoundError("Venue not found")
        if venue.owner_user_id is not None:
            raise BadRequestError(ALREADY_OWNED_MESSAGE)
        if crud_venue_claim.get_pending_for_user(
            db, venue_id=obj_in.venue_id, user_id=user_id
        ):
            raise BadRequestError(DUPLICATE_CLAIM_MESSAGE)

        try:
            claim = crud_venue_claim.create_pending(db, obj_in=obj_in, user_id=user_id)
        except IntegrityError:
            # A concurrent duplicate slipped past the pre-read; the partial
            # unique index caught it.
            db.rollback()
            raise BadRequestError(DUPLICATE_CLAIM_MESSAGE)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to create claim on venue {obj_in.venue_id}: {e}")
            raise InternalServerError("Failed to submit venue claim.", original_error=str(e))

        logger.info(f"User {user_id} submitted claim {claim.id} for venue {claim.venue_id}")
        return claim

    def review_claim(self, *, obj_in: VenueClaimReview) -> VenueClaim:
        """
        Apply an admin decision to a claim.

        Everything below happens in one transaction. Locks are taken venue
        first, then claim, so two approvals that each auto-reject the other's
        claim cannot deadlock.
        """
        if obj_in.new_status not in ClaimStatus.REVIEW_OUTCOMES:
            raise BadUserInputError(
                f"Invalid status '{obj_in.new_status}'. Must be 'approved' or 'rejected'."
            )

        db = self.db
        try:
            claim = crud_venue_claim.get(db, id=obj_in.claim_id)
            if not claim:
                raise NotFoundError("Venue claim not found")

            venue = crud_venue.get_for_update(db, id=claim.venue_id)
            if not venue:
                raise NotFoundError("Venue not found")
            claim = crud_venue_claim.get_for_update(db, id=obj_in.claim_id)
            if not claim:
                raise NotFoundError("Venue claim not found")

            if claim.status in (ClaimStatus.APPROVED, ClaimStatus.CANCELLED):
                raise BadRequestError(
                    f"Claim is already {claim.status} and cannot be reviewed again."
                )

            claim.status = obj_in.new_status
            if obj_in.admin_notes is not None:
                claim.admin_notes = obj_in.admin_notes

            if obj_in.new_status == ClaimStatus.APPROVED:
                self._resolve_approval(db, claim=claim, venue=venue)

            db.commit()
        except GraphQLError:
            db.rollback()
            raise
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(
                f"Failed to review claim {obj_in.claim_id}: {str(e)}",
                exc_info=True,
                extra={"claim_id": obj_in.claim_id, "new_status": obj_in.new_status},
            )
            raise InternalServerError("Failed to review venue claim.", original_error=str(e))

        db.refresh(claim)
        logger.info(f"Claim {claim.id} on venue {claim.venue_id} is now {claim.status}")
        return claim

    def _resolve_approval(self, db: Session, *, claim: VenueClaim, venue) -> None:
        """Ownership assignment for an approval. Runs under the venue lock."""
        if venue.owner_user_id is not None:
            # Ownership is already settled; at most one claim per venue ends approved.
            if venue.owner_user_id == claim.user_id:
                note = ALREADY_OWNER_NOTE
            else:
                note = OWNED_ELSEWHERE_NOTE
            claim.status = ClaimStatus.REJECTED
            claim.admin_notes = _with_note(claim.admin_notes, note)
            logger.info(
                f"Approval of claim {claim.id} downgraded: venue {venue.id} "
                f"already owned by {venue.owner_user_id}"
            )
            return

        venue.owner_user_id = claim.user_id
        db.add(venue)
        db.flush()
        rejected = crud_venue_claim.reject_other_pending(
            db,
            venue_id=venue.id,
            exclude_claim_id=claim.id,
            admin_notes=SUPERSEDED_NOTE,
        )
        if rejected:
            logger.info(f"Auto-rejected {rejected} competing claims on venue {venue.id}")

    def cancel_claim(self, *, claim_id: str, user_id: str) -> VenueClaim:
        """Let the requester withdraw a claim that is still pending."""
        db = self.db
        claim = crud_venue_claim.get(db, id=claim_id)
        if not claim:
            raise NotFoundError("Venue claim not found")
        if claim.user_id != user_id:
            raise ForbiddenError("You can only cancel your own claims.")
        if claim.status != ClaimStatus.PENDING:
            raise BadRequestError(f"Only pending claims can be cancelled (claim is {claim.status}).")
        claim = crud_venue_claim.update(
            db, db_obj=claim, obj_in={"status": ClaimStatus.CANCELLED}
        )
        logger.info(f"User {user_id} cancelled claim {claim_id}")
        return claim

    def list_claims(self, *, status: Optional[str] = None) -> List[VenueClaim]:
        if status is not None and not ClaimStatus.is_valid(status):
            raise BadUserInputError(f"Invalid claim status filter '{status}'.")
        return crud_venue_claim.get_multi_by_status(self.db, status=status)

    def list_claims_for_user(self, *, user_id: str) -> List[VenueClaim]:
        return crud_venue_claim.get_multi_by_user(self.db, user_id=user_id)
