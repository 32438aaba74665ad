# pawsroam/services/reviews.py
import logging
from typing import Optional

from fastapi import BackgroundTasks
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from pawsroam.constants.statuses import MAX_RATING, MIN_RATING
from pawsroam.core.errors import (
    BadRequestError,
    BadUserInputError,
    ForbiddenError,
    InternalServerError,
    NotFoundError,
)
from pawsroam.crud.crud_review import review as crud_review
from pawsroam.crud.crud_venue import venue as crud_venue
from pawsroam.models.review import Review
from pawsroam.schemas.review import ReviewCreate, ReviewUpdate
from pawsroam.services.rating_aggregator import RatingAggregator

logger = logging.getLogger(__name__)

DUPLICATE_REVIEW_MESSAGE = "You have already reviewed this venue."


def validate_rating(rating) -> None:
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise BadUserInputError("Rating must be a whole number.")
    if rating < MIN_RATING or rating > MAX_RATING:
        raise BadUserInputError(f"Rating must be between {MIN_RATING} and {MAX_RATING}.")


class ReviewService:
    """
    Review writes. Every successful create, update or delete hands the venue
    to the rating aggregator once the write has committed.
    """

    def __init__(
        self,
        db: Session,
        aggregator: RatingAggregator,
        background_tasks: Optional[BackgroundTasks] = None,
    ):
        self.db = db
        self.aggregator = aggregator
        self.background_tasks = background_tasks

    def add_review(self, *, obj_in: ReviewCreate, user_id: str) -> Review:
        validate_rating(obj_in.rating)
        db = self.db
        if not crud_venue.get(db, id=obj_in.venue_id):
            raise NotFoundError("Venue not found")
        if crud_review.get_by_user_and_venue(db, user_id=user_id, venue_id=obj_in.venue_id):
            raise BadRequestError(DUPLICATE_REVIEW_MESSAGE)

        try:
            review = crud_review.create_with_user(db, obj_in=obj_in, user_id=user_id)
        except IntegrityError:
            db.rollback()
            raise BadRequestError(DUPLICATE_REVIEW_MESSAGE)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to add review for venue {obj_in.venue_id}: {e}")
            raise InternalServerError("Failed to add review.", original_error=str(e))

        logger.info(f"User {user_id} reviewed venue {review.venue_id} ({review.rating}/5)")
        self._refresh_venue_rating(review.venue_id)
        return review

    def update_review(self, *, review_id: str, obj_in: ReviewUpdate, user_id: str) -> Review:
        if obj_in.rating is not None:
            validate_rating(obj_in.rating)
        db = self.db
        review = self._get_own_review(review_id, user_id)

        try:
            review = crud_review.update(db, db_obj=review, obj_in=obj_in)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to update review {review_id}: {e}")
            raise InternalServerError("Failed to update review.", original_error=str(e))

        self._refresh_venue_rating(review.venue_id)
        return review

    def delete_review(self, *, review_id: str, user_id: str) -> bool:
        db = self.db
        review = self._get_own_review(review_id, user_id)
        venue_id = review.venue_id

        try:
            crud_review.remove(db, id=review_id)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to delete review {review_id}: {e}")
            raise InternalServerError("Failed to delete review.", original_error=str(e))

        logger.info(f"User {user_id} deleted review {review_id}")
        self._refresh_venue_rating(venue_id)
        return True

    def _get_own_review(self, review_id: str, user_id: str) -> Review:
        review = crud_review.get(self.db, id=review_id)
        if not review:
            raise NotFoundError("Review not found")
        if review.user_id != user_id:
            raise ForbiddenError("You can only modify your own reviews.")
        return review

    def _refresh_venue_rating(self, venue_id: str) -> None:
        self.aggregator.recompute_in_background(venue_id, self.background_tasks)
