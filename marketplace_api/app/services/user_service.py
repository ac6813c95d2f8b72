"""
Business logic for users.

Registration enforces unique e‑mail addresses and usernames; the
check and the insert run in one store transaction so two concurrent
registrations cannot both pass the check.  Authentication is a plain
password comparison against the stored value (mock auth).
"""

import logging
from typing import Optional

from ..core.storage import EntityStore
from ..schemas.user import UserCreate, UserPublic, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Сервис для управления пользователями."""

    @classmethod
    async def register(cls, store: EntityStore, data: UserCreate) -> UserPublic:
        """Create a user, honouring the optional profile fields.

        Raises ``ValueError`` if the e‑mail or username is taken.
        """
        with store.transaction():
            if store.get_user_by_email(data.email) or store.get_user_by_username(data.username):
                raise ValueError("User already exists")
            user = store.create_user(data)
        logger.info("Registered user %s (%s)", user.id, user.username)
        return user.public()

    @classmethod
    async def authenticate(cls, store: EntityStore, email: str, password: str) -> Optional[UserPublic]:
        user = store.get_user_by_email(email)
        if user is None or user.password != password:
            logger.info("Failed login for %s", email)
            return None
        return user.public()

    @classmethod
    async def get_user(cls, store: EntityStore, user_id: int) -> Optional[UserPublic]:
        user = store.get_user(user_id)
        return user.public() if user else None

    @classmethod
    async def update_user(cls, store: EntityStore, user_id: int, updates: UserUpdate) -> Optional[UserPublic]:
        user = store.update_user(user_id, updates)
        return user.public() if user else None
