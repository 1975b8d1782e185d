import logging
from typing import List, Optional

from ..core.exceptions import ResourceNotFoundError
from ..models import User
from ..schemas.user import UserCreate, UserUpdate
from ..utils.security import get_password_hash, verify_password
from .base import BaseService

logger = logging.getLogger(__name__)


class UserService(BaseService):

    def list(self) -> List[User]:
        return self.db.query(User).order_by(User.id).all()

    def get(self, user_id: int) -> User:
        user = self.db.get(User, user_id)
        if user is None:
            raise ResourceNotFoundError(f"User with id {user_id} not found")
        return user

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def create(self, data: UserCreate) -> User:
        user = User(
            email=data.email,
            first_name=data.first_name,
            last_name=data.last_name,
            password_digest=get_password_hash(data.password),
        )
        with self.transaction():
            self.db.add(user)
        self.db.refresh(user)
        logger.info(f"Created user id={user.id}")
        return user

    def update(self, user_id: int, data: UserUpdate) -> User:
        user = self.get(user_id)
        email = data.field("email").require("email")
        password = data.field("password").require("password")
        with self.transaction():
            email.if_present(lambda value: setattr(user, "email", value))
            data.field("first_name").if_present(lambda value: setattr(user, "first_name", value))
            data.field("last_name").if_present(lambda value: setattr(user, "last_name", value))
            password.if_present(
                lambda value: setattr(user, "password_digest", get_password_hash(value))
            )
        self.db.refresh(user)
        return user

    def delete(self, user_id: int) -> None:
        user = self.get(user_id)
        with self.transaction():
            self.db.delete(user)
        logger.info(f"Deleted user id={user_id}")

    def authenticate(self, email: str, password: str) -> Optional[User]:
        user = self.get_by_email(email)
        if not user or not verify_password(password, user.password_digest):
            return None
        return user
