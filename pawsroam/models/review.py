# pawsroam/models/review.py
import uuid
from sqlalchemy import (
    Column,
    String,
    Text,
    Integer,
    Date,
    DateTime,
    ForeignKey,
    UniqueConstraint,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from pawsroam.db.base_class import Base


class Review(Base):
    __tablename__ = "reviews"

    id = Column(
        String, primary_key=True, default=lambda: f"rev_{uuid.uuid4().hex[:12]}"
    )
    user_id = Column(
        String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    venue_id = Column(
        String, ForeignKey("venues.id", ondelete="CASCADE"), nullable=False, index=True
    )
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    visit_date = Column(Date, nullable=True)

    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    venue = relationship("Venue", back_populates="reviews")
    user = relationship("User")

    __table_args__ = (
        UniqueConstraint("user_id", "venue_id", name="unique_review_user_venue"),
        CheckConstraint("rating BETWEEN 1 AND 5", name="check_review_rating_range"),
    )
