# pawsroam/graphql/mutations.py
import strawberry

from .claim_mutations import (
    admin_review_venue_claim_mutation,
    cancel_venue_claim_mutation,
    request_venue_claim_mutation,
)
from .review_mutations import (
    add_review_mutation,
    delete_review_mutation,
    update_review_mutation,
)
from .types import ReviewType, VenueClaimType, VenueType
from .venue_mutations import (
    admin_create_venue_mutation,
    admin_delete_venue_mutation,
    admin_update_venue_mutation,
    shop_owner_create_venue_mutation,
    shop_owner_update_venue_details_mutation,
)


@strawberry.type
class Mutation:
    # --- Claims ---
    requestVenueClaim: VenueClaimType = strawberry.mutation(
        resolver=request_venue_claim_mutation
    )
    adminReviewVenueClaim: VenueClaimType = strawberry.mutation(
        resolver=admin_review_venue_claim_mutation
    )
    cancelVenueClaim: VenueClaimType = strawberry.mutation(
        resolver=cancel_venue_claim_mutation
    )

    # --- Reviews ---
    addReview: ReviewType = strawberry.mutation(resolver=add_review_mutation)
    updateReview: ReviewType = strawberry.mutation(resolver=update_review_mutation)
    deleteReview: bool = strawberry.mutation(resolver=delete_review_mutation)

    # --- Venues ---
    shopOwnerCreateVenue: VenueType = strawberry.mutation(
        resolver=shop_owner_create_venue_mutation
    )
    shopOwnerUpdateVenueDetails: VenueType = strawberry.mutation(
        resolver=shop_owner_update_venue_details_mutation
    )
    adminCreateVenue: VenueType = strawberry.mutation(resolver=admin_create_venue_mutation)
    adminUpdateVenue: VenueType = strawberry.mutation(resolver=admin_update_venue_mutation)
    adminDeleteVenue: bool = strawberry.mutation(resolver=admin_delete_venue_mutation)
