# pawsroam/graphql/claim_queries.py
from typing import List, Optional
from strawberry.types import Info

from ..services.venue_claims import VenueClaimService
from .permissions import ensure_admin, ensure_shop_owner_or_admin
from .types import VenueClaimType, claim_model_to_gql


def admin_get_venue_claims_query(
    info: Info, status: Optional[str] = None
) -> List[VenueClaimType]:
    ensure_admin(info)
    claims = VenueClaimService(info.context.db).list_claims(status=status)
    return [claim_model_to_gql(c) for c in claims]


def my_venue_claims_query(info: Info) -> List[VenueClaimType]:
    current = ensure_shop_owner_or_admin(info)
    claims = VenueClaimService(info.context.db).list_claims_for_user(user_id=current.user_id)
    return [claim_model_to_gql(c) for c in claims]
