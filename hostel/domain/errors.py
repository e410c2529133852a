"""Domain error codes for the hostel module."""

from enum import Enum

from eduevent.errors import DomainError


class ErrorCode(Enum):
    """Domain error codes."""

    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
    REQUEST_NOT_FOUND = "REQUEST_NOT_FOUND"
    COMPLAINT_NOT_FOUND = "COMPLAINT_NOT_FOUND"
    INVALID_ID = "INVALID_ID"
    INVALID_REQUEST = "INVALID_REQUEST"


class RoomNotFoundError(DomainError):
    def __init__(self, room_id: str) -> None:
        super().__init__(code=ErrorCode.ROOM_NOT_FOUND, message="Room not found.")
        self.room_id = room_id


class RequestNotFoundError(DomainError):
    def __init__(self, request_id: str) -> None:
        super().__init__(code=ErrorCode.REQUEST_NOT_FOUND, message="Request not found.")
        self.request_id = request_id


class ComplaintNotFoundError(DomainError):
    def __init__(self, complaint_id: str) -> None:
        super().__init__(code=ErrorCode.COMPLAINT_NOT_FOUND, message="Complaint not found.")
        self.complaint_id = complaint_id


class InvalidIdError(DomainError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_ID, message="Invalid ID format.")


class InvalidRequestError(DomainError):
    """Raised when a request or complaint is missing required details."""

    def __init__(self, detail: str) -> None:
        super().__init__(code=ErrorCode.INVALID_REQUEST, message=detail)
