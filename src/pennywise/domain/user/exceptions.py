"""User store exceptions.

Raised by repository implementations when the storage layer rejects a
write. Services translate them into ``Err`` results.
"""


class EmailAlreadyExistsError(Exception):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")
