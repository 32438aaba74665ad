"""
GraphQL mutations for the venue lifecycle.

Admins create, edit, moderate and delete any venue. Shop owners submit
venues (always ``pending_approval``) and edit the details of venues they
own.
"""
import strawberry
from strawberry.types import Info

from ..constants.statuses import UserRole, VenueStatus
from ..schemas.venue import VenueCreate, VenueUpdate
from ..services.venues import VenueService
from .permissions import ensure_admin, ensure_shop_owner_or_admin
from .types import (
    AdminCreateVenueInput,
    AdminUpdateVenueInput,
    ShopOwnerCreateVenueInput,
    ShopOwnerUpdateVenueInput,
    VenueType,
    venue_model_to_gql,
)

_DETAIL_FIELDS = ("name", "type", "address", "city", "description")


def _provided(input, fields) -> dict:
    """Only the fields the caller actually sent; None means leave unchanged."""
    return {
        field: getattr(input, field)
        for field in fields
        if getattr(input, field) is not None
    }


def shop_owner_create_venue_mutation(input: ShopOwnerCreateVenueInput, info: Info) -> VenueType:
    """Shop owners list their own venue; it waits for admin approval."""
    current = ensure_shop_owner_or_admin(info)
    venue = VenueService(info.context.db).create_owned_venue(
        obj_in=VenueCreate(**_provided(input, _DETAIL_FIELDS)),
        owner_user_id=current.user_id,
    )
    return venue_model_to_gql(venue)


def shop_owner_update_venue_details_mutation(
    venueId: strawberry.ID, input: ShopOwnerUpdateVenueInput, info: Info
) -> VenueType:
    current = ensure_shop_owner_or_admin(info)
    venue = VenueService(info.context.db).update_owned_venue(
        venue_id=str(venueId),
        obj_in=VenueUpdate(**_provided(input, _DETAIL_FIELDS)),
        user_id=current.user_id,
        is_admin=current.role == UserRole.ADMIN,
    )
    return venue_model_to_gql(venue)


def admin_create_venue_mutation(input: AdminCreateVenueInput, info: Info) -> VenueType:
    ensure_admin(info)
    venue_in = VenueCreate(
        **_provided(input, _DETAIL_FIELDS),
        status=input.status or VenueStatus.PENDING_APPROVAL,
        owner_user_id=str(input.owner_user_id) if input.owner_user_id else None,
    )
    venue = VenueService(info.context.db).create_venue(obj_in=venue_in)
    return venue_model_to_gql(venue)


def admin_update_venue_mutation(
    id: strawberry.ID, input: AdminUpdateVenueInput, info: Info
) -> VenueType:
    ensure_admin(info)
    venue = VenueService(info.context.db).update_venue(
        venue_id=str(id),
        obj_in=VenueUpdate(**_provided(input, _DETAIL_FIELDS + ("status",))),
    )
    return venue_model_to_gql(venue)


def admin_delete_venue_mutation(id: strawberry.ID, info: Info) -> bool:
    ensure_admin(info)
    return VenueService(info.context.db).delete_venue(venue_id=str(id))
