# pawsroam/core/errors.py
"""
Caller-facing errors.

Every error raised out of a resolver or service is a GraphQLError carrying a
stable, machine-readable ``extensions.code``. Clients switch on the code; the
message is for humans and may change.
"""
from typing import Any, Optional

from graphql import GraphQLError


class PawsRoamError(GraphQLError):
    """Base class; subclasses only pin the extension code."""

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str, **extensions: Any):
        super().__init__(message, extensions={"code": self.code, **extensions})


class UnauthenticatedError(PawsRoamError):
    code = "UNAUTHENTICATED"


class ForbiddenError(PawsRoamError):
    code = "FORBIDDEN"


class NotFoundError(PawsRoamError):
    code = "NOT_FOUND"


class BadRequestError(PawsRoamError):
    """Domain rule violation (already owned, duplicate claim or review)."""

    code = "BAD_REQUEST"


class BadUserInputError(PawsRoamError):
    code = "BAD_USER_INPUT"


class InternalServerError(PawsRoamError):
    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str, original_error: Optional[str] = None):
        if original_error is None:
            super().__init__(message)
        else:
            super().__init__(message, originalError=original_error)
