"""SQLAlchemy model for budgets."""

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from pennywise.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin


class BudgetModel(Base, TimestampMixin):
    """
    SQLAlchemy model for budgets.

    The (user_id, category_id) unique constraint is the authoritative
    one-budget-per-category rule; deleting the user or the category
    removes the budget.

    Table: budgets
    """

    __tablename__ = "budgets"
    __table_args__ = (
        UniqueConstraint("user_id", "category_id", name="unique_user_category_budget"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    alert: Mapped[int] = mapped_column(Integer, nullable=False)
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
        return (
            f"<BudgetModel(id={self.id}, user_id={self.user_id}, "
            f"category_id={self.category_id}, amount={self.amount})>"
        )
