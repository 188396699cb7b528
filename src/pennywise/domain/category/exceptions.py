"""Category store exceptions."""


class CategoryAlreadyExistsError(Exception):
    """Category name already in use."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Category already exists: {name}")
