# pawsroam/services/venues.py
"""
Venue lifecycle: admin and shop-owner creation, detail edits, admin
moderation of ``status`` and deletion.

Ownership is never edited here. ``owner_user_id`` can only be given when a
venue is created; afterwards it changes solely through claim approval.
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pawsroam.constants.statuses import VenueStatus
from pawsroam.core.errors import (
    BadUserInputError,
    ForbiddenError,
    InternalServerError,
    NotFoundError,
)
from pawsroam.crud.crud_user import user as crud_user
from pawsroam.crud.crud_venue import venue as crud_venue
from pawsroam.models.venue import Venue
from pawsroam.schemas.venue import VenueCreate, VenueUpdate

logger = logging.getLogger(__name__)


def _validate_details(name: Optional[str], venue_type: Optional[str]) -> None:
    if name is not None and not name.strip():
        raise BadUserInputError("Venue name cannot be empty.")
    if venue_type is not None and not venue_type.strip():
        raise BadUserInputError("Venue type cannot be empty.")


def _validate_status(status: Optional[str]) -> None:
    if status is not None and not VenueStatus.is_valid(status):
        raise BadUserInputError(
            f"Invalid venue status '{status}'. Must be one of: "
            f"{', '.join(VenueStatus.all_values())}."
        )


class VenueService:
    def __init__(self, db: Session):
        self.db = db

    def create_venue(self, *, obj_in: VenueCreate) -> Venue:
        """Admin creation. Status and an initial owner may be set directly."""
        _validate_details(obj_in.name, obj_in.type)
        _validate_status(obj_in.status)
        if obj_in.owner_user_id is not None and not crud_user.get(self.db, id=obj_in.owner_user_id):
            raise NotFoundError("Owner user not found")

        venue = self._write(lambda: crud_venue.create(self.db, obj_in=obj_in), "create venue")
        logger.info(f"Admin created venue {venue.id} ({venue.status})")
        return venue

    def create_owned_venue(self, *, obj_in: VenueCreate, owner_user_id: str) -> Venue:
        """Shop-owner submission: always owned by the caller and pending approval."""
        _validate_details(obj_in.name, obj_in.type)
        obj_in = obj_in.model_copy(update={"status": VenueStatus.PENDING_APPROVAL})

        venue = self._write(
            lambda: crud_venue.create_with_owner(self.db, obj_in=obj_in, owner_user_id=owner_user_id),
            "create venue",
        )
        logger.info(f"User {owner_user_id} created venue {venue.id} pending approval")
        return venue

    def update_venue(self, *, venue_id: str, obj_in: VenueUpdate) -> Venue:
        """Admin edit, including moderation of ``status``."""
        _validate_details(obj_in.name, obj_in.type)
        _validate_status(obj_in.status)
        venue = self._get(venue_id)
        previous_status = venue.status

        venue = self._write(
            lambda: crud_venue.update(self.db, db_obj=venue, obj_in=obj_in), "update venue"
        )
        if venue.status != previous_status:
            logger.info(f"Venue {venue_id} status {previous_status} -> {venue.status}")
        return venue

    def update_owned_venue(
        self, *, venue_id: str, obj_in: VenueUpdate, user_id: str, is_admin: bool = False
    ) -> Venue:
        """Detail edits by the venue's owner. Status stays under admin control."""
        if obj_in.status is not None:
            raise ForbiddenError("Venue status is managed by administrators.")
        _validate_details(obj_in.name, obj_in.type)
        venue = self._get(venue_id)
        if venue.owner_user_id != user_id and not is_admin:
            raise ForbiddenError("You can only update venues you own.")

        return self._write(
            lambda: crud_venue.update(self.db, db_obj=venue, obj_in=obj_in), "update venue"
        )

    def delete_venue(self, *, venue_id: str) -> bool:
        """Delete a venue together with its claims and reviews."""
        self._get(venue_id)
        self._write(lambda: crud_venue.remove(self.db, id=venue_id), "delete venue")
        logger.info(f"Venue {venue_id} deleted")
        return True

    def search(
        self,
        *,
        name: Optional[str] = None,
        venue_type: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Venue]:
        """Admin search across every status unless one is given."""
        _validate_status(status)
        return crud_venue.search(self.db, name=name, venue_type=venue_type, status=status)

    def _get(self, venue_id: str) -> Venue:
        venue = crud_venue.get(self.db, id=venue_id)
        if not venue:
            raise NotFoundError("Venue not found")
        return venue

    def _write(self, operation, action: str):
        try:
            return operation()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to {action}: {e}")
            raise InternalServerError(f"Failed to {action}.", original_error=str(e))
