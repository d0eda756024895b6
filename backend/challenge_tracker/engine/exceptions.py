class InvalidInputError(ValueError):
    """A calculation precondition was violated.

    Raised before any computation takes place; the caller is expected to
    turn the message into a user-facing validation error.
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
