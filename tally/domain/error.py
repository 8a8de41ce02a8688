"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class CooldownRejection(BusinessRuleViolationError):
    """Raised when a voter votes again inside the cooldown window.

    Not a failure: the vote is simply not admitted. ``retry_after_ms`` is the
    time left until the same voter identity may vote on the item again.
    """

    def __init__(self, item_id: str, retry_after_ms: int):
        self.item_id = item_id
        self.retry_after_ms = retry_after_ms
        super().__init__(
            f"Voter is in cooldown for item {item_id}, retry after {retry_after_ms}ms"
        )


class StoreUnavailable(DomainError):
    """Raised when the ledger document cannot be loaded or saved.

    A vote whose save raised this error was not recorded.
    """

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Document store {operation} failed: {reason}")
