"""Budget router for the authenticated user's budgets."""

from fastapi import APIRouter, status

from pennywise.domain.budget import Budget
from pennywise.presentation.api.dependencies import (
    BudgetServiceDep,
    CurrentUserId,
    DBSession,
    PathId,
)
from pennywise.presentation.api.errors import unwrap
from pennywise.presentation.api.schemas.budgets import (
    BudgetCreateRequest,
    BudgetResponse,
    BudgetUpdateRequest,
)
from pennywise.presentation.api.schemas.common import ErrorResponse, MessageResponse

router = APIRouter()


def _to_response(budget: Budget) -> BudgetResponse:
    return BudgetResponse(
        id=budget.id,
        amount=budget.amount,
        alert=budget.alert,
        category_id=budget.category_id,
        category_name=budget.category_name,
        user_id=budget.user_id,
    )


@router.get("", summary="List my budgets")
async def list_budgets(
    user_id: CurrentUserId,
    budget_service: BudgetServiceDep,
) -> list[BudgetResponse]:
    budgets = unwrap(await budget_service.list_budgets(user_id))
    return [_to_response(budget) for budget in budgets]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a budget",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid data or category already budgeted"},
        404: {"model": ErrorResponse, "description": "Category not found"},
    },
)
async def create_budget(
    request: BudgetCreateRequest,
    user_id: CurrentUserId,
    budget_service: BudgetServiceDep,
    session: DBSession,
) -> BudgetResponse:
    """Create a budget; its alert threshold is set to 80% of the amount."""
    budget = unwrap(
        await budget_service.create_budget(user_id, request.amount, request.category_id),
    )
    await session.commit()
    return _to_response(budget)


@router.patch(
    "/{id}",
    summary="Update a budget",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid data or category already budgeted"},
        404: {"model": ErrorResponse, "description": "Budget or category not found"},
    },
)
async def update_budget(
    budget_id: PathId,
    request: BudgetUpdateRequest,
    user_id: CurrentUserId,
    budget_service: BudgetServiceDep,
    session: DBSession,
) -> BudgetResponse:
    """Update amount and/or category; the alert follows the amount."""
    budget = unwrap(
        await budget_service.update_budget(
            user_id,
            budget_id,
            request.model_dump(exclude_none=True),
        ),
    )
    await session.commit()
    return _to_response(budget)


@router.delete(
    "/{id}",
    summary="Delete a budget",
    responses={404: {"model": ErrorResponse, "description": "Budget not found"}},
)
async def delete_budget(
    budget_id: PathId,
    user_id: CurrentUserId,
    budget_service: BudgetServiceDep,
    session: DBSession,
) -> MessageResponse:
    unwrap(await budget_service.delete_budget(user_id, budget_id))
    await session.commit()
    return MessageResponse(message="Budget deleted successfully.")
