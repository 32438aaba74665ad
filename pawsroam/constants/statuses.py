# pawsroam/constants/statuses.py
"""
String constants for roles and lifecycle states.

The database stores plain strings; these classes keep the literals in one
place and give callers a cheap validity check.
"""


class _StringChoices:
    @classmethod
    def all_values(cls) -> list[str]:
        """Return all valid values, in declaration order."""
        return [
            value
            for name, value in vars(cls).items()
            if name.isupper() and isinstance(value, str)
        ]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return value in cls.all_values()


class UserRole(_StringChoices):
    USER = "user"
    BUSINESS_OWNER = "business_owner"
    ADMIN = "admin"
    PAWS_SAFER = "paws_safer"


class UserStatus(_StringChoices):
    ACTIVE = "active"
    SUSPENDED = "suspended"


class VenueStatus(_StringChoices):
    PENDING_APPROVAL = "pending_approval"
    ACTIVE = "active"
    REJECTED = "rejected"
    CLOSED = "closed"


class ClaimStatus(_StringChoices):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"

    # An admin decision can only move a claim to one of these.
    REVIEW_OUTCOMES = ("approved", "rejected")


MIN_RATING = 1
MAX_RATING = 5
