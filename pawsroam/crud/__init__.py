# pawsroam/crud/__init__.py

from .crud_review import review
from .crud_user import user
from .crud_venue import venue
from .crud_venue_claim import venue_claim
