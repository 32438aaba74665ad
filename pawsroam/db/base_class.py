# pawsroam/db/base_class.py

from sqlalchemy.orm import declarative_base

# Every model in the service inherits from this base so that Alembic and the
# test fixtures see a single metadata object.
Base = declarative_base()
