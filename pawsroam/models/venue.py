# pawsroam/models/venue.py
import uuid
from sqlalchemy import Column, String, Text, Integer, Numeric, DateTime, ForeignKey, text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from pawsroam.db.base_class import Base


class Venue(Base):
    __tablename__ = "venues"

    id = Column(
        String, primary_key=True, default=lambda: f"ven_{uuid.uuid4().hex[:12]}"
    )
    # Null while unclaimed. Set once, never cleared.
    owner_user_id = Column(
        String, ForeignKey("users.id", ondelete="RESTRICT"), nullable=True, index=True
    )
    name = Column(String, nullable=False)
    type = Column(String, nullable=False)  # cafe|park|store|...
    address = Column(String, nullable=True)
    city = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    status = Column(
        String(32), nullable=False, server_default=text("'pending_approval'")
    )  # pending_approval|active|rejected|closed

    # Denormalised from reviews; maintained by the rating aggregator only.
    average_rating = Column(Numeric(3, 2), nullable=False, server_default=text("0"))
    review_count = Column(Integer, nullable=False, server_default=text("0"))

    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    owner = relationship("User", foreign_keys=[owner_user_id])
    claims = relationship(
        "VenueClaim", back_populates="venue", cascade="all, delete-orphan"
    )
    reviews = relationship(
        "Review", back_populates="venue", cascade="all, delete-orphan"
    )
