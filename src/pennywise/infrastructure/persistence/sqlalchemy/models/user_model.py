"""SQLAlchemy model for users."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pennywise.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin


class UserModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting User records.

    - email is unique (authoritative guard against duplicate registrations)
    - password holds the argon2id encoded hash, never plaintext

    Table: users
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
