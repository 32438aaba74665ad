# pawsroam/graphql/review_mutations.py
"""
GraphQL mutations for venue reviews.

The venue's rating summary is refreshed after each write as a background
task on the request (see RatingAggregator.recompute_in_background).
"""
import strawberry
from strawberry.types import Info

from ..schemas.review import ReviewCreate, ReviewUpdate
from ..services.reviews import ReviewService
from .permissions import ensure_authenticated
from .types import CreateReviewInput, ReviewType, UpdateReviewInput, review_model_to_gql


def _review_service(info: Info) -> ReviewService:
    return ReviewService(
        info.context.db,
        info.context.aggregator,
        background_tasks=info.context.background_tasks,
    )


def add_review_mutation(input: CreateReviewInput, info: Info) -> ReviewType:
    current = ensure_authenticated(info)
    review = _review_service(info).add_review(
        obj_in=ReviewCreate(
            venue_id=str(input.venueId),
            rating=input.rating,
            comment=input.comment,
            visit_date=input.visit_date,
        ),
        user_id=current.user_id,
    )
    return review_model_to_gql(review)


def update_review_mutation(reviewId: strawberry.ID, input: UpdateReviewInput, info: Info) -> ReviewType:
    current = ensure_authenticated(info)
    update_data = {
        k: v
        for k, v in {
            "rating": input.rating,
            "comment": input.comment,
            "visit_date": input.visit_date,
        }.items()
        if v is not None
    }
    review = _review_service(info).update_review(
        review_id=str(reviewId),
        obj_in=ReviewUpdate(**update_data),
        user_id=current.user_id,
    )
    return review_model_to_gql(review)


def delete_review_mutation(reviewId: strawberry.ID, info: Info) -> bool:
    current = ensure_authenticated(info)
    return _review_service(info).delete_review(review_id=str(reviewId), user_id=current.user_id)
