# File: app/repositories/base.py

"""
Store interfaces consumed by the service layer.

Services only see these protocols and the pydantic records they return, so
the SQLAlchemy implementations can be swapped for any other backend.
Absence is reported as ``None`` (lookups, update) or ``False`` (delete),
never as an exception.
"""

from typing import Any, Mapping, Optional, Protocol, Sequence

from app.schemas.product import ProductRead
from app.schemas.user import UserInDB


class UserRepository(Protocol):
    def find_all(self) -> Sequence[UserInDB]: ...

    def find_by_id(self, user_id: int) -> Optional[UserInDB]: ...

    def find_by_email(self, email: str) -> Optional[UserInDB]: ...

    def create(self, values: Mapping[str, Any]) -> UserInDB: ...

    def update(self, values: Mapping[str, Any], user_id: int) -> Optional[UserInDB]: ...

    def delete(self, user_id: int) -> bool: ...


class ProductRepository(Protocol):
    def find_all(self) -> Sequence[ProductRead]: ...

    def find_by_id(self, product_id: int) -> Optional[ProductRead]: ...

    def create(self, values: Mapping[str, Any]) -> ProductRead: ...

    def update(self, values: Mapping[str, Any], product_id: int) -> Optional[ProductRead]: ...

    def delete(self, product_id: int) -> bool: ...
