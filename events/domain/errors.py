"""Domain error codes for the events module."""

from enum import Enum

from eduevent.errors import DomainError


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_EVENT_DATA = "INVALID_EVENT_DATA"
    EVENT_FULL = "EVENT_FULL"
    CAPACITY_RACE_LOST = "CAPACITY_RACE_LOST"
    DUPLICATE_REGISTRATION = "DUPLICATE_REGISTRATION"
    NOT_REGISTERED = "NOT_REGISTERED"
    EMPTY_DOCUMENT = "EMPTY_DOCUMENT"
    INVALID_DOCUMENT_OWNER = "INVALID_DOCUMENT_OWNER"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found.",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format.",
        )


class InvalidEventDataError(DomainError):
    """Raised when event fields break a domain invariant."""

    def __init__(self, detail: str) -> None:
        super().__init__(code=ErrorCode.INVALID_EVENT_DATA, message=detail)


class EventFullError(DomainError):
    """Raised when an event has no seats left."""

    def __init__(self, event_id: str, code: ErrorCode = ErrorCode.EVENT_FULL) -> None:
        super().__init__(code=code, message="Event is full.")
        self.event_id = event_id


class CapacityRaceLostError(EventFullError):
    """Raised when the last seat was taken between the pre-check and the increment."""

    def __init__(self, event_id: str) -> None:
        super().__init__(event_id, code=ErrorCode.CAPACITY_RACE_LOST)


class DuplicateRegistrationError(DomainError):
    """Raised when the user already holds a registration for the event."""

    def __init__(self, event_id: str, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_REGISTRATION,
            message="You are already registered for this event.",
        )
        self.event_id = event_id
        self.user_id = user_id


class NotRegisteredError(DomainError):
    """Raised when an operation requires a registration the user does not hold."""

    def __init__(self, event_id: str, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.NOT_REGISTERED,
            message="You are not registered for this event.",
        )
        self.event_id = event_id
        self.user_id = user_id


class EmptyDocumentError(DomainError):
    """Raised when an uploaded document has no content."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.EMPTY_DOCUMENT, message="Uploaded file is empty.")


class InvalidDocumentOwnerError(DomainError):
    """Raised when a user ID cannot name a document directory."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DOCUMENT_OWNER,
            message="User ID cannot be used to store documents.",
        )
        self.user_id = user_id
