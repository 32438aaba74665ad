# pawsroam/services/rating_aggregator.py
"""
Keeps ``Venue.average_rating`` and ``Venue.review_count`` in line with the
venue's reviews.

The summary is a cache. It is always rebuilt from the full review set, never
adjusted incrementally, so running it twice, or concurrently for the same
venue, converges on the same stored values.

Review mutations only ever call ``recompute_in_background``. That runs after
the review has been committed, on its own session, and logs instead of
raising: a broken aggregate must not fail a review write. The cost is that a
failed recompute leaves the summary stale until the next review mutation on
that venue.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Optional, Tuple

from fastapi import BackgroundTasks
from sqlalchemy.orm import Session

from pawsroam.crud.crud_review import review as crud_review
from pawsroam.crud.crud_venue import venue as crud_venue

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")


def round_rating(value) -> Decimal:
    """Fixed-point rounding to two decimals, half up (4.666... -> 4.67)."""
    if value is None:
        return Decimal("0.00")
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


class RatingAggregator:
    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def recompute(self, db: Session, venue_id: str) -> Tuple[Decimal, int]:
        """Rebuild and persist the venue's rating summary. Raises on failure."""
        avg_rating, count = crud_review.get_rating_stats(db, venue_id=venue_id)
        average_rating = round_rating(avg_rating)
        review_count = int(count)
        updated = crud_venue.set_rating_summary(
            db,
            venue_id=venue_id,
            average_rating=average_rating,
            review_count=review_count,
        )
        if not updated:
            logger.warning(f"Rating recompute found no venue {venue_id}")
        else:
            logger.info(
                f"Venue {venue_id} rating summary: {average_rating} over {review_count} reviews"
            )
        return average_rating, review_count

    def recompute_best_effort(self, venue_id: str) -> None:
        """Recompute on a fresh session, logging and swallowing any failure."""
        db = self.session_factory()
        try:
            self.recompute(db, venue_id)
        except Exception as e:
            db.rollback()
            logger.error(
                f"Failed to recompute rating summary for venue {venue_id}: {str(e)}",
                exc_info=True,
                extra={"venue_id": venue_id},
            )
        finally:
            db.close()

    def recompute_in_background(
        self, venue_id: str, background_tasks: Optional[BackgroundTasks] = None
    ) -> None:
        """
        Fire-and-forget entry point used after a review write has committed.

        With a request's ``BackgroundTasks`` the work runs after the response
        is sent; without one (scripts, tests) it runs inline. Either way the
        caller never sees an exception from it.
        """
        if background_tasks is not None:
            background_tasks.add_task(self.recompute_best_effort, venue_id)
        else:
            self.recompute_best_effort(venue_id)


def get_rating_aggregator() -> RatingAggregator:
    # Imported lazily so that importing this module does not build an engine.
    from pawsroam.db.session import SessionLocal

    return RatingAggregator(SessionLocal)
