from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from pawsroam.core.errors import (
    BadRequestError,
    BadUserInputError,
    ForbiddenError,
    NotFoundError,
)
from pawsroam.crud.crud_review import review as crud_review
from pawsroam.schemas.review import ReviewCreate, ReviewUpdate
from pawsroam.services.rating_aggregator import RatingAggregator
from pawsroam.services.reviews import ReviewService
from tests.utils.user import create_random_user
from tests.utils.venue import create_random_venue


@pytest.fixture
def service(db_session, aggregator):
    return ReviewService(db_session, aggregator)


def test_add_review_updates_venue_summary(service, db_session):
    venue = create_random_venue(db_session)
    author = create_random_user(db_session)

    review = service.add_review(
        obj_in=ReviewCreate(
            venue_id=venue.id, rating=4, comment="Water bowls everywhere", visit_date=date(2024, 5, 1)
        ),
        user_id=author.id,
    )

    assert review.rating == 4
    assert review.visit_date == date(2024, 5, 1)
    db_session.refresh(venue)
    assert venue.average_rating == Decimal("4.00")
    assert venue.review_count == 1


@pytest.mark.parametrize("rating", [0, 6, -1, 10])
def test_out_of_range_rating_is_rejected_before_any_write(service, db_session, rating):
    venue = create_random_venue(db_session)
    author = create_random_user(db_session)

    with pytest.raises(BadUserInputError) as exc_info:
        service.add_review(
            obj_in=ReviewCreate(venue_id=venue.id, rating=rating), user_id=author.id
        )

    assert exc_info.value.extensions["code"] == "BAD_USER_INPUT"
    assert crud_review.get_multi_by_venue(db_session, venue_id=venue.id) == []
    db_session.refresh(venue)
    assert venue.review_count == 0


def test_rating_is_validated_before_venue_lookup():
    db = MagicMock()
    service = ReviewService(db, MagicMock())

    with pytest.raises(BadUserInputError):
        service.add_review(obj_in=ReviewCreate(venue_id="ven_1", rating=6), user_id="usr_1")

    db.query.assert_not_called()


def test_add_review_for_missing_venue_is_not_found(service, db_session):
    author = create_random_user(db_session)
    with pytest.raises(NotFoundError):
        service.add_review(
            obj_in=ReviewCreate(venue_id="ven_missing", rating=3), user_id=author.id
        )


def test_second_review_by_same_user_is_a_conflict(service, db_session):
    venue = create_random_venue(db_session)
    author = create_random_user(db_session)
    service.add_review(obj_in=ReviewCreate(venue_id=venue.id, rating=5), user_id=author.id)

    with pytest.raises(BadRequestError, match="already reviewed"):
        service.add_review(obj_in=ReviewCreate(venue_id=venue.id, rating=1), user_id=author.id)

    db_session.refresh(venue)
    assert venue.review_count == 1
    assert venue.average_rating == Decimal("5.00")


def test_unique_constraint_backs_up_the_duplicate_check(service, db_session):
    venue = create_random_venue(db_session)
    author = create_random_user(db_session)
    service.add_review(obj_in=ReviewCreate(venue_id=venue.id, rating=5), user_id=author.id)

    # Simulate a concurrent request that passed the pre-check.
    with patch.object(crud_review, "get_by_user_and_venue", return_value=None):
        with pytest.raises(BadRequestError):
            service.add_review(
                obj_in=ReviewCreate(venue_id=venue.id, rating=2), user_id=author.id
            )


def test_update_review_recomputes_summary(service, db_session):
    venue = create_random_venue(db_session)
    author = create_random_user(db_session)
    review = service.add_review(obj_in=ReviewCreate(venue_id=venue.id, rating=2), user_id=author.id)

    updated = service.update_review(
        review_id=review.id, obj_in=ReviewUpdate(rating=5, comment="Much better now"), user_id=author.id
    )

    assert updated.rating == 5
    assert updated.comment == "Much better now"
    db_session.refresh(venue)
    assert venue.average_rating == Decimal("5.00")


def test_update_review_with_bad_rating_changes_nothing(service, db_session):
    venue = create_random_venue(db_session)
    author = create_random_user(db_session)
    review = service.add_review(obj_in=ReviewCreate(venue_id=venue.id, rating=3), user_id=author.id)

    with pytest.raises(BadUserInputError):
        service.update_review(review_id=review.id, obj_in=ReviewUpdate(rating=9), user_id=author.id)

    db_session.refresh(review)
    assert review.rating == 3


def test_only_the_author_can_update_or_delete(service, db_session):
    venue = create_random_venue(db_session)
    author = create_random_user(db_session)
    stranger = create_random_user(db_session)
    review = service.add_review(obj_in=ReviewCreate(venue_id=venue.id, rating=3), user_id=author.id)

    with pytest.raises(ForbiddenError):
        service.update_review(review_id=review.id, obj_in=ReviewUpdate(rating=1), user_id=stranger.id)
    with pytest.raises(ForbiddenError):
        service.delete_review(review_id=review.id, user_id=stranger.id)


def test_delete_review_recomputes_summary(service, db_session):
    venue = create_random_venue(db_session)
    first_author = create_random_user(db_session)
    second_author = create_random_user(db_session)
    service.add_review(obj_in=ReviewCreate(venue_id=venue.id, rating=5), user_id=first_author.id)
    review = service.add_review(obj_in=ReviewCreate(venue_id=venue.id, rating=1), user_id=second_author.id)

    assert service.delete_review(review_id=review.id, user_id=second_author.id) is True

    db_session.refresh(venue)
    assert venue.average_rating == Decimal("5.00")
    assert venue.review_count == 1


def test_delete_missing_review_is_not_found(service, db_session):
    author = create_random_user(db_session)
    with pytest.raises(NotFoundError):
        service.delete_review(review_id="rev_missing", user_id=author.id)


def test_review_write_survives_aggregator_failure(db_session, session_factory):
    venue = create_random_venue(db_session)
    author = create_random_user(db_session)
    aggregator = RatingAggregator(session_factory)
    service = ReviewService(db_session, aggregator)

    with patch.object(
        aggregator, "recompute", side_effect=OperationalError("UPDATE venues", {}, Exception("lock timeout"))
    ):
        review = service.add_review(
            obj_in=ReviewCreate(venue_id=venue.id, rating=4), user_id=author.id
        )

    assert crud_review.get(db_session, id=review.id) is not None
    # The cached summary is stale until the next successful recompute.
    db_session.refresh(venue)
    assert venue.review_count == 0

    aggregator.recompute(db_session, venue.id)
    db_session.refresh(venue)
    assert venue.review_count == 1
