"""Domain errors raised by the todo store and mapped to HTTP statuses by the routers."""


class UserNotFoundError(LookupError):
    def __init__(self, user: str):
        super().__init__("User not found")
        self.user = user


class TodoNotFoundError(LookupError):
    def __init__(self, user: str, todo_id: str):
        super().__init__("Todo not found")
        self.user = user
        self.todo_id = todo_id


class TodoValidationError(ValueError):
    """Request body failed a create/update rule. ``str(e)`` is the client-facing message."""
