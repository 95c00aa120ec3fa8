"""
User Service - registration and login
"""

from typing import Any, Dict
import logging

from localrot.exceptions import ConflictError, InvalidCredentialsError
from localrot.models import User
from localrot.repositories import UserRepository
from localrot.utils.identifiers import hash_password, verify_password

logger = logging.getLogger(__name__)


class UserService:
    """Business logic for user accounts"""

    def __init__(self, user_repo=None):
        self.user_repo = user_repo or UserRepository()

    def register(self, username: str, password: str) -> User:
        """Create an account; raises ConflictError if the username is taken"""
        user = User(username=username, password=hash_password(password))
        created = self.user_repo.create_if_absent(user)
        if created is None:
            logger.info(f"Registration rejected, username {username} already exists")
            raise ConflictError("User already exists")

        logger.info(f"Registered user {created.id} ({username})")
        return created

    def authenticate(self, username: str, password: str) -> Dict[str, Any]:
        """Return the public view of the user, or raise InvalidCredentialsError"""
        if not username or not password:
            raise InvalidCredentialsError()

        user = self.user_repo.get_by_username(username)
        if not user or not verify_password(password, user.password):
            logger.info(f"Failed login for {username}")
            raise InvalidCredentialsError()

        logger.info(f"User {user.id} logged in")
        return user.to_public_dict()
