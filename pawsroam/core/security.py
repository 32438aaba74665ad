# pawsroam/core/security.py
import logging
from typing import Optional

import jwt
from pydantic import ValidationError

from pawsroam.core.config import settings
from pawsroam.schemas.token import TokenPayload

logger = logging.getLogger(__name__)


def decode_access_token(token: str) -> Optional[TokenPayload]:
    """
    Verify a bearer token issued by the auth service.

    Returns None for anything that is not a valid, unexpired token; the
    caller then treats the request as anonymous.
    """
    try:
        payload = jwt.decode(
            token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM]
        )
        return TokenPayload(**payload)
    except (jwt.PyJWTError, ValidationError) as e:
        logger.debug(f"Rejected bearer token: {e}")
        return None


def get_token_from_header(auth_header: Optional[str]) -> Optional[str]:
    # Expected format: "Bearer <token>"
    if not auth_header:
        return None
    parts = auth_header.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        return None
    return parts[1]
