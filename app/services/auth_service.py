# File: app/services/auth_service.py

"""
Authentication service.

Turns a successful credential check into a signed bearer token. Failures
are handed back untouched so the route decides on the HTTP status.
"""

from typing import Union

from app.core.config import Settings
from app.core.security import create_access_token
from app.schemas.token import Token
from app.services.user_service import CredentialCheck, UserService


class AuthService:
    def __init__(self, user_service: UserService, settings: Settings):
        self.user_service = user_service
        self.settings = settings

    def login(self, email: str, password: str) -> Union[Token, CredentialCheck]:
        check = self.user_service.check_user_credentials(email, password)
        if not check.ok:
            return check
        token = create_access_token(
            str(check.user.id),
            extra_claims={"email": check.user.email},
            settings=self.settings,
        )
        return Token(access_token=token)
