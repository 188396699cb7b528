"""SQLAlchemy model for expenses."""

from datetime import date as date_type
from decimal import Decimal
from typing import Optional

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from pennywise.domain.shared.time import today_utc
from pennywise.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin

MAX_DESCRIPTION_LENGTH = 255


class ExpenseModel(Base, TimestampMixin):
    """SQLAlchemy model for expenses. Table: expenses"""

    __tablename__ = "expenses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(
        String(MAX_DESCRIPTION_LENGTH),
        nullable=True,
    )
    date: Mapped[date_type] = mapped_column(Date, default=today_utc, nullable=False)
    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<ExpenseModel(id={self.id}, user_id={self.user_id}, amount={self.amount})>"
