# pawsroam/schemas/token.py
from pydantic import BaseModel, Field
from typing import Optional


class TokenPayload(BaseModel):
    # Tokens are issued by the auth service as {"userId": ..., "email": ...}
    user_id: str = Field(alias="userId")
    email: Optional[str] = None
    exp: Optional[int] = None

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }
