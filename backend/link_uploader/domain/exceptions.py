"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class ForbiddenError(Exception):
    """Raised when the requester does not own the entity it tries to mutate."""

    def __init__(self, entity_type: str, entity_id: int | str, action: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.action = action
        super().__init__(f"You don't have permission to {action} this {entity_type.lower()}")


class StorageError(Exception):
    """Raised when the persistence layer fails (connectivity, constraints).

    Not retried by the application layer.
    """

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Storage failure during {operation}{detail}")
