# pawsroam/models/__init__.py
# Importing every model here registers it on Base.metadata.
from .user import User
from .venue import Venue
from .venue_claim import VenueClaim
from .review import Review
