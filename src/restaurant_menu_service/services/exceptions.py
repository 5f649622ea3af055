"""Domain errors raised by the menu services.

Expected external failures (translation provider down, DynamoDB errors) are
not represented here: adapters and repositories report those through
None/False return values. These exceptions cover caller mistakes that must
reject the action without touching the catalog.
"""


class MenuServiceError(Exception):
    """Base class for menu service errors."""


class NotFoundError(MenuServiceError):
    """An edit referenced a category or item id absent from the catalog."""

    def __init__(self, kind: str, record_id: str) -> None:
        super().__init__(f"{kind} '{record_id}' not found")
        self.kind = kind
        self.record_id = record_id


class MenuValidationError(MenuServiceError):
    """Required input was missing or empty."""


class ConfirmationRequiredError(MenuServiceError):
    """A destructive operation was requested without an explicit confirmation."""


class RecordBusyError(MenuServiceError):
    """A save for the same record is still waiting on translation."""

    def __init__(self, record_key: str) -> None:
        super().__init__(f"A save for '{record_key}' is already in progress")
        self.record_key = record_key
