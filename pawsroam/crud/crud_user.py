# pawsroam/crud/crud_user.py
from .base import CRUDBase
from pawsroam.models.user import User
from pawsroam.schemas.user import UserCreate, UserUpdate


class CRUDUser(CRUDBase[User, UserCreate, UserUpdate]):
    pass


user = CRUDUser(User)
