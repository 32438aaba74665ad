from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from pawsroam.constants.statuses import ClaimStatus, UserRole, VenueStatus
from pawsroam.core.errors import (
    BadUserInputError,
    ForbiddenError,
    InternalServerError,
    NotFoundError,
)
from pawsroam.crud.crud_review import review as crud_review
from pawsroam.crud.crud_venue import venue as crud_venue
from pawsroam.crud.crud_venue_claim import venue_claim as crud_venue_claim
from pawsroam.schemas.review import ReviewCreate
from pawsroam.schemas.venue import VenueCreate, VenueUpdate
from pawsroam.schemas.venue_claim import VenueClaimCreate
from pawsroam.services.venues import VenueService
from tests.utils.user import create_random_user
from tests.utils.venue import create_random_venue


@pytest.fixture
def service(db_session):
    return VenueService(db_session)


def test_admin_create_venue_with_status_and_owner(service, db_session):
    owner = create_random_user(db_session, role=UserRole.BUSINESS_OWNER)

    venue = service.create_venue(
        obj_in=VenueCreate(
            name="Bone Appetit", type="restaurant", status=VenueStatus.ACTIVE, owner_user_id=owner.id
        )
    )

    assert venue.status == VenueStatus.ACTIVE
    assert venue.owner_user_id == owner.id


def test_admin_create_venue_defaults_to_pending_approval(service):
    venue = service.create_venue(obj_in=VenueCreate(name="Mutt Hut", type="store"))

    assert venue.status == VenueStatus.PENDING_APPROVAL
    assert venue.owner_user_id is None


def test_admin_create_venue_rejects_unknown_status(service, db_session):
    with pytest.raises(BadUserInputError):
        service.create_venue(obj_in=VenueCreate(name="Mutt Hut", type="store", status="open"))

    assert crud_venue.search(db_session, status=None) == []


def test_admin_create_venue_with_unknown_owner_is_not_found(service):
    with pytest.raises(NotFoundError):
        service.create_venue(
            obj_in=VenueCreate(name="Mutt Hut", type="store", owner_user_id="usr_missing")
        )


def test_blank_name_is_bad_user_input(service, db_session):
    with pytest.raises(BadUserInputError):
        service.create_venue(obj_in=VenueCreate(name="   ", type="store"))
    owner = create_random_user(db_session, role=UserRole.BUSINESS_OWNER)
    with pytest.raises(BadUserInputError):
        service.create_owned_venue(obj_in=VenueCreate(name="", type="cafe"), owner_user_id=owner.id)


def test_shop_owner_venue_is_always_pending(service, db_session):
    owner = create_random_user(db_session, role=UserRole.BUSINESS_OWNER)

    venue = service.create_owned_venue(
        obj_in=VenueCreate(name="Tail Waggers", type="cafe", status=VenueStatus.ACTIVE),
        owner_user_id=owner.id,
    )

    assert venue.status == VenueStatus.PENDING_APPROVAL
    assert venue.owner_user_id == owner.id


def test_admin_approval_makes_venue_searchable(service, db_session):
    owner = create_random_user(db_session, role=UserRole.BUSINESS_OWNER)
    venue = service.create_owned_venue(
        obj_in=VenueCreate(name="Tail Waggers", type="cafe"), owner_user_id=owner.id
    )
    assert crud_venue.search(db_session, name="tail") == []

    service.update_venue(venue_id=venue.id, obj_in=VenueUpdate(status=VenueStatus.ACTIVE))

    assert [v.id for v in crud_venue.search(db_session, name="tail")] == [venue.id]


def test_admin_update_only_touches_given_fields(service, db_session):
    venue = create_random_venue(db_session)
    venue.city = "Bristol"
    db_session.commit()

    updated = service.update_venue(venue_id=venue.id, obj_in=VenueUpdate(name="The Barking Lot"))

    assert updated.name == "The Barking Lot"
    assert updated.city == "Bristol"
    assert updated.status == VenueStatus.ACTIVE


def test_admin_update_rejects_unknown_status(service, db_session):
    venue = create_random_venue(db_session)

    with pytest.raises(BadUserInputError):
        service.update_venue(venue_id=venue.id, obj_in=VenueUpdate(status="archived"))

    db_session.refresh(venue)
    assert venue.status == VenueStatus.ACTIVE


def test_update_missing_venue_is_not_found(service):
    with pytest.raises(NotFoundError):
        service.update_venue(venue_id="ven_missing", obj_in=VenueUpdate(name="x"))


def test_owner_updates_own_venue_details(service, db_session):
    owner = create_random_user(db_session, role=UserRole.BUSINESS_OWNER)
    venue = create_random_venue(db_session, owner_user_id=owner.id)

    updated = service.update_owned_venue(
        venue_id=venue.id,
        obj_in=VenueUpdate(description="Now with a dog wash"),
        user_id=owner.id,
    )

    assert updated.description == "Now with a dog wash"
    assert updated.owner_user_id == owner.id


def test_non_owner_cannot_update_venue_details(service, db_session):
    owner = create_random_user(db_session, role=UserRole.BUSINESS_OWNER)
    other = create_random_user(db_session, role=UserRole.BUSINESS_OWNER)
    venue = create_random_venue(db_session, owner_user_id=owner.id)

    with pytest.raises(ForbiddenError):
        service.update_owned_venue(venue_id=venue.id, obj_in=VenueUpdate(name="Mine now"), user_id=other.id)

    updated = service.update_owned_venue(
        venue_id=venue.id, obj_in=VenueUpdate(name="Admin fix"), user_id=other.id, is_admin=True
    )
    assert updated.name == "Admin fix"


def test_owner_cannot_change_status(service, db_session):
    owner = create_random_user(db_session, role=UserRole.BUSINESS_OWNER)
    venue = create_random_venue(db_session, owner_user_id=owner.id, status=VenueStatus.PENDING_APPROVAL)

    with pytest.raises(ForbiddenError):
        service.update_owned_venue(
            venue_id=venue.id, obj_in=VenueUpdate(status=VenueStatus.ACTIVE), user_id=owner.id
        )

    db_session.refresh(venue)
    assert venue.status == VenueStatus.PENDING_APPROVAL


def test_delete_venue_removes_claims_and_reviews(service, db_session):
    venue = create_random_venue(db_session)
    claimant = create_random_user(db_session, role=UserRole.BUSINESS_OWNER)
    reviewer = create_random_user(db_session)
    crud_venue_claim.create_pending(db_session, obj_in=VenueClaimCreate(venue_id=venue.id), user_id=claimant.id)
    crud_review.create_with_user(db_session, obj_in=ReviewCreate(venue_id=venue.id, rating=4), user_id=reviewer.id)
    venue_id = venue.id

    assert service.delete_venue(venue_id=venue_id) is True

    assert crud_venue.get(db_session, id=venue_id) is None
    assert crud_venue_claim.get_multi_by_status(db_session, status=ClaimStatus.PENDING) == []
    assert crud_review.get_multi_by_venue(db_session, venue_id=venue_id) == []


def test_delete_missing_venue_is_not_found(service):
    with pytest.raises(NotFoundError):
        service.delete_venue(venue_id="ven_missing")


def test_database_failure_on_update_is_internal_error(service, db_session):
    venue = create_random_venue(db_session)

    with patch.object(
        crud_venue, "update", side_effect=OperationalError("UPDATE venues", {}, Exception("disk full"))
    ):
        with pytest.raises(InternalServerError) as exc_info:
            service.update_venue(venue_id=venue.id, obj_in=VenueUpdate(name="x"))

    assert "disk full" in exc_info.value.extensions["originalError"]


def test_admin_search_covers_every_status(service, db_session):
    create_random_venue(db_session, name="Open Paws")
    create_random_venue(db_session, name="Queued Paws", status=VenueStatus.PENDING_APPROVAL)

    assert [v.name for v in service.search(name="paws")] == ["Open Paws", "Queued Paws"]
    assert [v.name for v in service.search(status=VenueStatus.PENDING_APPROVAL)] == ["Queued Paws"]
    with pytest.raises(BadUserInputError):
        service.search(status="archived")
