# pawsroam/graphql/claim_mutations.py
"""GraphQL mutations for venue ownership claims."""
import strawberry
from strawberry.types import Info

from ..schemas.venue_claim import VenueClaimCreate, VenueClaimReview
from ..services.venue_claims import VenueClaimService
from .permissions import ensure_admin, ensure_authenticated, ensure_shop_owner_or_admin
from .types import (
    AdminReviewVenueClaimInput,
    RequestVenueClaimInput,
    VenueClaimType,
    claim_model_to_gql,
)


def request_venue_claim_mutation(input: RequestVenueClaimInput, info: Info) -> VenueClaimType:
    current = ensure_shop_owner_or_admin(info)
    claim = VenueClaimService(info.context.db).submit_claim(
        obj_in=VenueClaimCreate(
            venue_id=str(input.venueId),
            claim_message=input.claimMessage,
        ),
        user_id=current.user_id,
    )
    return claim_model_to_gql(claim)


def admin_review_venue_claim_mutation(
    input: AdminReviewVenueClaimInput, info: Info
) -> VenueClaimType:
    ensure_admin(info)
    claim = VenueClaimService(info.context.db).review_claim(
        obj_in=VenueClaimReview(
            claim_id=str(input.claimId),
            new_status=input.newStatus,
            admin_notes=input.adminNotes,
        )
    )
    return claim_model_to_gql(claim)


def cancel_venue_claim_mutation(claimId: strawberry.ID, info: Info) -> VenueClaimType:
    current = ensure_authenticated(info)
    claim = VenueClaimService(info.context.db).cancel_claim(
        claim_id=str(claimId), user_id=current.user_id
    )
    return claim_model_to_gql(claim)
