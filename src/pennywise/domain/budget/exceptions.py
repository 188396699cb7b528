"""Budget store exceptions."""


class BudgetAlreadyExistsError(Exception):
    """A budget already exists for this user and category."""

    def __init__(self, user_id: int, category_id: int) -> None:
        self.user_id = user_id
        self.category_id = category_id
        super().__init__(
            f"Budget already exists for user {user_id} and category {category_id}",
        )
