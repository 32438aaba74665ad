# pawsroam/graphql/queries.py
import strawberry
from typing import List

from .claim_queries import admin_get_venue_claims_query, my_venue_claims_query
from .types import ReviewType, UserType, VenueClaimType, VenueType
from .venue_queries import (
    admin_search_venues_query,
    get_reviews_for_venue_query,
    get_venue_by_id_query,
    me_query,
    my_owned_venues_query,
    search_venues_query,
)


@strawberry.type
class Query:
    me: UserType = strawberry.field(resolver=me_query)

    # --- Venues & reviews ---
    getVenueById: VenueType = strawberry.field(resolver=get_venue_by_id_query)
    searchVenues: List[VenueType] = strawberry.field(resolver=search_venues_query)
    getReviewsForVenue: List[ReviewType] = strawberry.field(
        resolver=get_reviews_for_venue_query
    )
    myOwnedVenues: List[VenueType] = strawberry.field(resolver=my_owned_venues_query)
    adminSearchVenues: List[VenueType] = strawberry.field(resolver=admin_search_venues_query)

    # --- Claims ---
    myVenueClaims: List[VenueClaimType] = strawberry.field(resolver=my_venue_claims_query)
    adminGetVenueClaims: List[VenueClaimType] = strawberry.field(
        resolver=admin_get_venue_claims_query
    )
