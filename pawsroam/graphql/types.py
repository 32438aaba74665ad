# pawsroam/graphql/types.py
import strawberry
from typing import Optional, List
from datetime import date, datetime
from strawberry.types import Info

from ..crud.crud_review import review as crud_review


# --- Output Types ---

@strawberry.type
class UserType:
    id: strawberry.ID
    email: str
    name: Optional[str] = None
    role: str
    avatar_url: Optional[str] = None


@strawberry.type
class ReviewType:
    id: strawberry.ID
    user_id: str
    venue_id: str
    rating: int
    comment: Optional[str] = None
    visit_date: Optional[date] = None
    created_at: datetime
    updated_at: datetime
    user: Optional[UserType] = None


@strawberry.type
class VenueType:
    id: strawberry.ID
    name: str
    type: str
    address: Optional[str] = None
    city: Optional[str] = None
    description: Optional[str] = None
    status: str
    owner_user_id: Optional[str] = None
    average_rating: float
    review_count: int
    created_at: datetime
    updated_at: datetime

    @strawberry.field
    def reviews(self, info: Info) -> List[ReviewType]:
        """Reviews for this venue, newest first."""
        rows = crud_review.get_multi_by_venue(info.context.db, venue_id=str(self.id))
        return [review_model_to_gql(r) for r in rows]


@strawberry.type
class VenueClaimType:
    id: strawberry.ID
    venue_id: str
    user_id: str
    status: str
    claim_message: Optional[str] = None
    admin_notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    venue: Optional[VenueType] = None
    user: Optional[UserType] = None


# --- Input Types ---

@strawberry.input
class RequestVenueClaimInput:
    venueId: strawberry.ID
    claimMessage: Optional[str] = None


@strawberry.input
class AdminReviewVenueClaimInput:
    claimId: strawberry.ID
    newStatus: str
    adminNotes: Optional[str] = None


@strawberry.input
class CreateReviewInput:
    venueId: strawberry.ID
    rating: int
    comment: Optional[str] = None
    visit_date: Optional[date] = None


@strawberry.input
class UpdateReviewInput:
    rating: Optional[int] = None
    comment: Optional[str] = None
    visit_date: Optional[date] = None


@strawberry.input
class ShopOwnerCreateVenueInput:
    name: str
    type: str
    address: Optional[str] = None
    city: Optional[str] = None
    description: Optional[str] = None


@strawberry.input
class ShopOwnerUpdateVenueInput:
    name: Optional[str] = None
    type: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    description: Optional[str] = None


@strawberry.input
class AdminCreateVenueInput:
    name: str
    type: str
    address: Optional[str] = None
    city: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    owner_user_id: Optional[strawberry.ID] = None


@strawberry.input
class AdminUpdateVenueInput:
    name: Optional[str] = None
    type: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


# --- ORM -> GraphQL converters ---

def user_model_to_gql(user) -> UserType:
    return UserType(
        id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
        avatar_url=user.avatar_url,
    )


def review_model_to_gql(review) -> ReviewType:
    return ReviewType(
        id=review.id,
        user_id=review.user_id,
        venue_id=review.venue_id,
        rating=review.rating,
        comment=review.comment,
        visit_date=review.visit_date,
        created_at=review.created_at,
        updated_at=review.updated_at,
        user=user_model_to_gql(review.user) if review.user else None,
    )


def venue_model_to_gql(venue) -> VenueType:
    return VenueType(
        id=venue.id,
        name=venue.name,
        type=venue.type,
        address=venue.address,
        city=venue.city,
        description=venue.description,
        status=venue.status,
        owner_user_id=venue.owner_user_id,
        average_rating=float(venue.average_rating or 0),
        review_count=venue.review_count or 0,
        created_at=venue.created_at,
        updated_at=venue.updated_at,
    )


def claim_model_to_gql(claim) -> VenueClaimType:
    return VenueClaimType(
        id=claim.id,
        venue_id=claim.venue_id,
        user_id=claim.user_id,
        status=claim.status,
        claim_message=claim.claim_message,
        admin_notes=claim.admin_notes,
        created_at=claim.created_at,
        updated_at=claim.updated_at,
        venue=venue_model_to_gql(claim.venue) if claim.venue else None,
        user=user_model_to_gql(claim.user) if claim.user else None,
    )
