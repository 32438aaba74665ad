from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from pawsroam.core.config import settings

# The engine owns the connection pool; one per process.
engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        # Always hand the connection back to the pool, even on errors.
        db.close()
