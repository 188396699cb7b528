"""Budget domain: per-category allocations and alert thresholds."""

from pennywise.domain.budget.budget import ALERT_RATIO, Budget, compute_alert
from pennywise.domain.budget.exceptions import BudgetAlreadyExistsError
from pennywise.domain.budget.repository import BudgetRepository

__all__ = [
    "ALERT_RATIO",
    "Budget",
    "BudgetAlreadyExistsError",
    "BudgetRepository",
    "compute_alert",
]
