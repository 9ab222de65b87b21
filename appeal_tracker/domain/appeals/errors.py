"""
Domain-specific errors for the appeals bounded context.

All errors raised from the domain, application and storage layers
are defined here. These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class AppealDomainError(Exception):
    """Base error for all appeal domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class AppealValidationError(AppealDomainError):
    """Raised when caller input is missing or malformed."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid {field}: {reason}")
        self.field = field
        self.reason = reason


class AppealNotFoundError(AppealDomainError):
    """Raised when no appeal exists for the given id."""

    def __init__(self, appeal_id: str) -> None:
        super().__init__(f"Appeal not found: {appeal_id}")
        self.appeal_id = appeal_id


class InvalidTransitionError(AppealDomainError):
    """Raised when an operation is not legal from the appeal's current status."""

    def __init__(self, current_status: str, operation: str) -> None:
        super().__init__(
            f"Cannot {operation} appeal with status: {current_status}"
        )
        self.current_status = current_status
        self.operation = operation


class AppealConflictError(AppealDomainError):
    """Raised when an appeal changed status between read and write."""

    def __init__(self, appeal_id: str, expected_status: str) -> None:
        super().__init__(
            f"Appeal {appeal_id} is no longer in status {expected_status}"
        )
        self.appeal_id = appeal_id
        self.expected_status = expected_status


class AppealStorageError(AppealDomainError):
    """Raised when the underlying store fails (connection, constraint, IO)."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"Storage failure during {operation}: {reason}")
        self.operation = operation
        self.reason = reason
