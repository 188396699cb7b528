"""SQLAlchemy model for categories."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pennywise.domain.category import MAX_NAME_LENGTH
from pennywise.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin


class CategoryModel(Base, TimestampMixin):
    """Shared spending category. Table: categories"""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<CategoryModel(id={self.id}, name={self.name})>"
