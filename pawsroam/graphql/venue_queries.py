# pawsroam/graphql/venue_queries.py
"""GraphQL venue discovery queries."""
from typing import List, Optional
import strawberry
from strawberry.types import Info

from ..core.errors import NotFoundError
from ..crud.crud_review import review as crud_review
from ..crud.crud_user import user as crud_user
from ..crud.crud_venue import venue as crud_venue
from ..services.venues import VenueService
from .permissions import ensure_admin, ensure_authenticated, ensure_shop_owner_or_admin
from .types import (
    ReviewType,
    UserType,
    VenueType,
    review_model_to_gql,
    user_model_to_gql,
    venue_model_to_gql,
)


def get_venue_by_id_query(id: strawberry.ID, info: Info) -> VenueType:
    venue = crud_venue.get(info.context.db, id=str(id))
    if not venue:
        raise NotFoundError("Venue not found")
    return venue_model_to_gql(venue)


def search_venues_query(
    info: Info,
    filterByName: Optional[str] = None,
    filterByType: Optional[str] = None,
) -> List[VenueType]:
    venues = crud_venue.search(
        info.context.db, name=filterByName, venue_type=filterByType
    )
    return [venue_model_to_gql(v) for v in venues]


def admin_search_venues_query(
    info: Info,
    filterByName: Optional[str] = None,
    filterByType: Optional[str] = None,
    status: Optional[str] = None,
) -> List[VenueType]:
    """Like searchVenues, but across every status (e.g. the approval queue)."""
    ensure_admin(info)
    venues = VenueService(info.context.db).search(
        name=filterByName, venue_type=filterByType, status=status
    )
    return [venue_model_to_gql(v) for v in venues]


def get_reviews_for_venue_query(venueId: strawberry.ID, info: Info) -> List[ReviewType]:
    db = info.context.db
    venueId = str(venueId)
    if not crud_venue.get(db, id=venueId):
        raise NotFoundError("Venue not found")
    return [review_model_to_gql(r) for r in crud_review.get_multi_by_venue(db, venue_id=venueId)]


def my_owned_venues_query(info: Info) -> List[VenueType]:
    current = ensure_shop_owner_or_admin(info)
    venues = crud_venue.get_multi_by_owner(info.context.db, owner_user_id=current.user_id)
    return [venue_model_to_gql(v) for v in venues]


def me_query(info: Info) -> UserType:
    current = ensure_authenticated(info)
    return user_model_to_gql(crud_user.get(info.context.db, id=current.user_id))
