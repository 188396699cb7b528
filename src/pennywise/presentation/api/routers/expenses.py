"""Expense router for the authenticated user's expenses."""

from fastapi import APIRouter, status

from pennywise.domain.expense import Expense
from pennywise.presentation.api.dependencies import (
    CurrentUserId,
    DBSession,
    ExpenseServiceDep,
    PathId,
)
from pennywise.presentation.api.errors import unwrap
from pennywise.presentation.api.schemas.common import ErrorResponse, MessageResponse
from pennywise.presentation.api.schemas.expenses import (
    ExpenseCreateRequest,
    ExpenseResponse,
    ExpenseUpdateRequest,
)

router = APIRouter()


def _to_response(expense: Expense) -> ExpenseResponse:
    return ExpenseResponse(
        id=expense.id,
        amount=expense.amount,
        description=expense.description,
        date=expense.date,
        category_id=expense.category_id,
        category_name=expense.category_name,
        user_id=expense.user_id,
    )


@router.get("", summary="List my expenses")
async def list_expenses(
    user_id: CurrentUserId,
    expense_service: ExpenseServiceDep,
) -> list[ExpenseResponse]:
    """List expenses, most recent first."""
    expenses = unwrap(await expense_service.list_expenses(user_id))
    return [_to_response(expense) for expense in expenses]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Record an expense",
    responses={404: {"model": ErrorResponse, "description": "Category not found"}},
)
async def create_expense(
    request: ExpenseCreateRequest,
    user_id: CurrentUserId,
    expense_service: ExpenseServiceDep,
    session: DBSession,
) -> ExpenseResponse:
    expense = unwrap(
        await expense_service.create_expense(
            user_id,
            amount=request.amount,
            category_id=request.category_id,
            description=request.description,
            expense_date=request.date,
        ),
    )
    await session.commit()
    return _to_response(expense)


@router.patch(
    "/{id}",
    summary="Update an expense",
    responses={404: {"model": ErrorResponse, "description": "Expense or category not found"}},
)
async def update_expense(
    expense_id: PathId,
    request: ExpenseUpdateRequest,
    user_id: CurrentUserId,
    expense_service: ExpenseServiceDep,
    session: DBSession,
) -> ExpenseResponse:
    expense = unwrap(
        await expense_service.update_expense(
            user_id,
            expense_id,
            request.model_dump(exclude_none=True),
        ),
    )
    await session.commit()
    return _to_response(expense)


@router.delete(
    "/{id}",
    summary="Delete an expense",
    responses={404: {"model": ErrorResponse, "description": "Expense not found"}},
)
async def delete_expense(
    expense_id: PathId,
    user_id: CurrentUserId,
    expense_service: ExpenseServiceDep,
    session: DBSession,
) -> MessageResponse:
    unwrap(await expense_service.delete_expense(user_id, expense_id))
    await session.commit()
    return MessageResponse(message="Expense deleted successfully.")
