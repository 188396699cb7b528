"""Budget record and alert threshold rule."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

# Share of the allocated amount at which a budget raises its alert
ALERT_RATIO = Decimal("0.8")


def compute_alert(amount: int) -> int:
    """Return the alert threshold for an allocated amount.

    The threshold is 80% of the amount rounded to the nearest integer,
    halves rounding up.

    Examples
    --------
    >>> compute_alert(500)
    400
    >>> compute_alert(625)
    500
    """
    return int((Decimal(amount) * ALERT_RATIO).to_integral_value(ROUND_HALF_UP))


@dataclass
class Budget:
    """A monthly allocation for one category, owned by one user.

    At most one budget exists per (user_id, category_id) pair, and
    ``alert`` always equals ``compute_alert(amount)``.
    """

    amount: int
    alert: int
    category_id: int
    user_id: int
    id: int | None = None
    category_name: str | None = None

    @classmethod
    def create(cls, amount: int, category_id: int, user_id: int) -> "Budget":
        return cls(
            amount=amount,
            alert=compute_alert(amount),
            category_id=category_id,
            user_id=user_id,
        )
