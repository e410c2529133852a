"""Domain error codes for the volunteers module."""

from enum import Enum

from eduevent.errors import DomainError


class ErrorCode(Enum):
    """Domain error codes."""

    VOLUNTEER_NOT_FOUND = "VOLUNTEER_NOT_FOUND"
    INVALID_VOLUNTEER_ID = "INVALID_VOLUNTEER_ID"
    INVALID_VOLUNTEER_DATA = "INVALID_VOLUNTEER_DATA"
    ALREADY_ASSIGNED = "ALREADY_ASSIGNED"
    NOT_ASSIGNED = "NOT_ASSIGNED"


class VolunteerNotFoundError(DomainError):
    def __init__(self, volunteer_id: str) -> None:
        super().__init__(code=ErrorCode.VOLUNTEER_NOT_FOUND, message="Volunteer not found.")
        self.volunteer_id = volunteer_id


class InvalidVolunteerIdError(DomainError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_VOLUNTEER_ID, message="Invalid volunteer ID format.")


class InvalidVolunteerDataError(DomainError):
    def __init__(self, detail: str) -> None:
        super().__init__(code=ErrorCode.INVALID_VOLUNTEER_DATA, message=detail)


class AlreadyAssignedError(DomainError):
    """Raised when a volunteer is already assigned to the event."""

    def __init__(self, volunteer_id: str, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_ASSIGNED,
            message="Volunteer already assigned to this event.",
        )
        self.volunteer_id = volunteer_id
        self.event_id = event_id


class NotAssignedError(DomainError):
    """Raised when an operation needs an assignment the volunteer does not have."""

    def __init__(self, volunteer_id: str, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.NOT_ASSIGNED,
            message="Volunteer not assigned to this event.",
        )
        self.volunteer_id = volunteer_id
        self.event_id = event_id
