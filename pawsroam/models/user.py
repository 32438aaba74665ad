# pawsroam/models/user.py
import uuid
from sqlalchemy import Column, String, DateTime, text
from sqlalchemy.sql import func
from pawsroam.db.base_class import Base


class User(Base):
    __tablename__ = "users"

    id = Column(
        String, primary_key=True, default=lambda: f"usr_{uuid.uuid4().hex[:12]}"
    )
    email = Column(String, nullable=False, unique=True, index=True)
    name = Column(String, nullable=True)
    role = Column(String(32), nullable=False, server_default=text("'user'"))  # user|business_owner|admin|paws_safer
    status = Column(String(32), nullable=False, server_default=text("'active'"))  # active|suspended
    avatar_url = Column(String, nullable=True)

    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
