# pawsroam/models/venue_claim.py
"""
Ownership claims on venues.

A claim starts ``pending`` and ends ``approved``, ``rejected`` or
``cancelled``. The partial unique index allows any number of historical
claims per (venue, user) but only one open one.
"""
import uuid
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Index, text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from pawsroam.db.base_class import Base


class VenueClaim(Base):
    __tablename__ = "venue_claims"

    id = Column(
        String, primary_key=True, default=lambda: f"vcl_{uuid.uuid4().hex[:12]}"
    )
    venue_id = Column(
        String, ForeignKey("venues.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(
        String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    status = Column(String(20), nullable=False, server_default=text("'pending'"))  # pending|approved|rejected|cancelled
    claim_message = Column(Text, nullable=True)
    admin_notes = Column(Text, nullable=True)

    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    venue = relationship("Venue", back_populates="claims")
    user = relationship("User")

    __table_args__ = (
        Index(
            "uq_venue_claims_pending_per_user",
            "venue_id",
            "user_id",
            unique=True,
            postgresql_where=text("status = 'pending'"),
            sqlite_where=text("status = 'pending'"),
        ),
        Index("idx_venue_claims_venue_status", "venue_id", "status"),
    )
