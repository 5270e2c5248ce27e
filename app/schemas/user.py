# File: app/schemas/user.py

from datetime import datetime
from typing import Annotated, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field

# bcrypt only looks at the first 72 bytes of a password.
PASSWORD_MAX_BYTES = 72


def normalize_email(email: str) -> str:
    """
    Same normalization ``EmailStr`` applies before a user is stored.

    Anything that is not a valid address is returned untouched; it simply
    won't match a stored user.
    """
    try:
        return validate_email(email, check_deliverability=False).normalized
    except EmailNotValidError:
        return email


def check_password_length(password: Optional[str]) -> Optional[str]:
    if password is not None and len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes when UTF-8 encoded")
    return password


Password = Annotated[str, Field(min_length=1), AfterValidator(check_password_length)]


class UserBase(BaseModel):
    email: EmailStr


class UserCreate(UserBase):
    password: Password


class UserUpdate(BaseModel):
    email: Optional[EmailStr] = None
    password: Optional[Password] = None


class UserRead(UserBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None


class UserInDB(UserRead):
    """Stored user, including the password hash. Never returned over HTTP."""

    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: str
    password: str
