from pennywise.presentation.api.routers.auth import router as auth_router
from pennywise.presentation.api.routers.budgets import router as budgets_router
from pennywise.presentation.api.routers.categories import router as categories_router
from pennywise.presentation.api.routers.expenses import router as expenses_router
from pennywise.presentation.api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "budgets_router",
    "categories_router",
    "expenses_router",
    "users_router",
]
