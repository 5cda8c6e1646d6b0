"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist or a write matched no rows."""

    def __init__(self, entity_type: str, entity_id: int | str, reason: str = "no rows in result set"):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.reason = reason
        super().__init__(f"{entity_type} with id '{entity_id}' not found: {reason}")


class ArticlePersistenceError(Exception):
    """Raised when a write statement succeeded but affected no rows."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"failed to {operation} article")


class DatabaseUnavailableError(Exception):
    """Raised when the database cannot be reached during the liveness check."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"database is unreachable: {cause}")


class EmptyUpdateError(Exception):
    """Raised when a partial update carries none of the updatable fields."""

    def __init__(self, allowed: tuple[str, ...]):
        self.allowed = allowed
        super().__init__(f"request body must set at least one of: {', '.join(allowed)}")


class ClientDisconnectedError(Exception):
    """Raised when the client went away before the request finished."""

    def __init__(self):
        super().__init__("client closed request")
