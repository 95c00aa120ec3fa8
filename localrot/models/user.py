"""
User Model
"""

from typing import Any, Dict, Optional

from localrot.utils.identifiers import generate_id, now_ms, USER_PREFIX


class User:
    """Registered account; immutable after creation"""
    collection = 'users'

    def __init__(self, username: str, password: str, id: Optional[str] = None,
                 created_at: Optional[int] = None):
        self.id = id or generate_id(USER_PREFIX)
        self.username = username
        # SHA-256 hex digest, never the raw password
        self.password = password
        self.created_at = created_at if created_at is not None else now_ms()

    def __repr__(self):
        return f'<User {self.username}>'

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'User':
        return cls(
            id=data['id'],
            username=data['username'],
            password=data['password'],
            created_at=data.get('createdAt'),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Stored representation, password hash included"""
        return {
            'id': self.id,
            'username': self.username,
            'password': self.password,
            'createdAt': self.created_at,
        }

    def to_public_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'username': self.username}
