# File: app/repositories/sql.py

"""
SQLAlchemy-backed repositories.

Each write commits immediately; callers get detached pydantic records
rather than live ORM rows.
"""

from typing import Any, Generic, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.base import Base
from app.models.product import Product
from app.models.user import User
from app.schemas.product import ProductRead
from app.schemas.user import UserInDB

ModelT = TypeVar("ModelT", bound=Base)
RecordT = TypeVar("RecordT", bound=BaseModel)


class SqlRepository(Generic[ModelT, RecordT]):
    model: Type[ModelT]
    record: Type[RecordT]

    def __init__(self, db: Session):
        self.db = db

    def _to_record(self, row: ModelT) -> RecordT:
        return self.record.model_validate(row)

    def find_all(self) -> list[RecordT]:
        rows = self.db.scalars(select(self.model)).all()
        return [self._to_record(row) for row in rows]

    def find_by_id(self, obj_id: int) -> Optional[RecordT]:
        row = self.db.get(self.model, obj_id)
        return self._to_record(row) if row is not None else None

    def create(self, values: Mapping[str, Any]) -> RecordT:
        row = self.model(**values)
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return self._to_record(row)

    def update(self, values: Mapping[str, Any], obj_id: int) -> Optional[RecordT]:
        row = self.db.get(self.model, obj_id)
        if row is None:
            return None
        for field, value in values.items():
            setattr(row, field, value)
        self.db.commit()
        self.db.refresh(row)
        return self._to_record(row)

    def delete(self, obj_id: int) -> bool:
        row = self.db.get(self.model, obj_id)
        if row is None:
            return False
        self.db.delete(row)
        self.db.commit()
        return True


class SqlUserRepository(SqlRepository[User, UserInDB]):
    model = User
    record = UserInDB

    def find_by_email(self, email: str) -> Optional[UserInDB]:
        row = self.db.scalars(select(User).where(User.email == email)).first()
        return self._to_record(row) if row is not None else None


class SqlProductRepository(SqlRepository[Product, ProductRead]):
    model = Product
    record = ProductRead
