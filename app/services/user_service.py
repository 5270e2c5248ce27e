# File: app/services/user_service.py

"""
User business logic.

Passwords are hashed here, before anything reaches the store, so a persisted
``password`` is always a bcrypt digest. Nothing is cached between calls:
every operation goes back to the repository.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from pydantic import BaseModel

from app.core.security import hash_password, verify_password
from app.repositories.base import UserRepository
from app.schemas.user import UserInDB, normalize_email

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass(frozen=True)
class CredentialCheck:
    """
    Outcome of ``UserService.check_user_credentials``.

    Exactly one of ``user`` / ``error`` is set. The error text is the same
    whichever check failed.
    """

    user: Optional[UserInDB] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.user is not None

    @classmethod
    def success(cls, user: UserInDB) -> "CredentialCheck":
        return cls(user=user)

    @classmethod
    def failure(cls) -> "CredentialCheck":
        return cls(error=INVALID_CREDENTIALS)


class UserService:
    def __init__(self, user_repository: UserRepository, salt_rounds: int = 10):
        self.user_repository = user_repository
        self.salt_rounds = salt_rounds

    def get_all_users(self) -> Sequence[UserInDB]:
        return self.user_repository.find_all()

    def get_user_by_id(self, user_id: int) -> Optional[UserInDB]:
        return self.user_repository.find_by_id(user_id)

    def get_user_by_email(self, email: str) -> Optional[UserInDB]:
        return self.user_repository.find_by_email(normalize_email(email))

    def create_user(self, user: BaseModel) -> UserInDB:
        created = self.user_repository.create(self._prepare(user))
        logger.info("Created user %s", created.id)
        return created

    def check_user_credentials(self, email: str, password: str) -> CredentialCheck:
        user = self.get_user_by_email(email)
        if user is not None and user.password:
            if verify_password(password, user.password):
                return CredentialCheck.success(user)
        logger.info("Rejected credentials for %s", email)
        return CredentialCheck.failure()

    def update_user(self, user: BaseModel, user_id: int) -> Optional[UserInDB]:
        return self.user_repository.update(self._prepare(user), user_id)

    def delete_user(self, user_id: int) -> bool:
        deleted = self.user_repository.delete(user_id)
        if deleted:
            logger.info("Deleted user %s", user_id)
        return deleted

    def _prepare(self, user: BaseModel) -> dict[str, Any]:
        """Fields the caller actually set, with the password swapped for its hash."""
        values = user.model_dump(exclude_unset=True, exclude_none=True)
        if values.get("password"):
            values["password"] = hash_password(values["password"], self.salt_rounds)
        else:
            values.pop("password", None)
        return values
