# pawsroam/graphql/permissions.py
"""
Authorization gate for resolvers.

Each check runs before the resolver touches any domain data. The token only
carries the user id; role and account status are read from the users table
so that role changes and suspensions apply immediately.
"""
from dataclasses import dataclass

from strawberry.types import Info

from pawsroam.constants.statuses import UserRole, UserStatus
from pawsroam.core.errors import ForbiddenError, UnauthenticatedError
from pawsroam.crud.crud_user import user as crud_user


@dataclass(frozen=True)
class AuthenticatedUser:
    user_id: str
    role: str


def ensure_authenticated(info: Info) -> AuthenticatedUser:
    token = info.context.user
    if token is None:
        raise UnauthenticatedError("Authentication required")

    db_user = crud_user.get(info.context.db, id=token.user_id)
    if not db_user:
        raise UnauthenticatedError("User not found")
    if db_user.status != UserStatus.ACTIVE:
        raise ForbiddenError("Account is not active")

    return AuthenticatedUser(user_id=db_user.id, role=db_user.role)


def ensure_admin(info: Info) -> AuthenticatedUser:
    current = ensure_authenticated(info)
    if current.role != UserRole.ADMIN:
        raise ForbiddenError("Admin access required")
    return current


def ensure_shop_owner_or_admin(info: Info) -> AuthenticatedUser:
    current = ensure_authenticated(info)
    if current.role not in (UserRole.BUSINESS_OWNER, UserRole.ADMIN):
        raise ForbiddenError("Shop owner or admin access required")
    return current
