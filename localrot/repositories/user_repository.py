"""
User Repository Implementation
"""

from typing import Optional

from localrot.models import User
from localrot.store import get_store, USERS
from .base import UserRepositoryInterface


class UserRepository(UserRepositoryInterface):
    """Users stored in users.json"""

    def __init__(self, store=None):
        self.store = store or get_store()

    def create(self, user: User) -> User:
        """Append a user to the collection"""
        with self.store.update(USERS) as users:
            users.append(user.to_dict())
        return user

    def create_if_absent(self, user: User) -> Optional[User]:
        """Append the user unless the username is taken; None on conflict"""
        with self.store.update(USERS) as users:
            if any(u['username'] == user.username for u in users):
                return None
            users.append(user.to_dict())
        return user

    def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        for data in self.store.read(USERS):
            if data['username'] == username:
                return User.from_dict(data)
        return None

    def count(self) -> int:
        return self.store.count(USERS)
