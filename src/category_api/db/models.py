"""Category ORM model."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from category_api.entities import Category

from .base import Base


class CategoryRecord(Base):
    """Row in the ``categories`` table."""
    __tablename__ = "categories"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        Text, nullable=False,
    )

    def to_entity(self) -> Category:
        return Category(id=self.id, name=self.name)
