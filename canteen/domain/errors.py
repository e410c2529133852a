"""Domain error codes for the canteen module."""

from datetime import date
from enum import Enum

from eduevent.errors import DomainError


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_MENU_ITEM = "INVALID_MENU_ITEM"
    UNKNOWN_MENU_ITEM = "UNKNOWN_MENU_ITEM"
    MENU_NOT_FOUND = "MENU_NOT_FOUND"
    ITEM_NOT_ON_MENU = "ITEM_NOT_ON_MENU"
    TOKEN_NOT_FOUND = "TOKEN_NOT_FOUND"
    TOKEN_NOT_VALID_TODAY = "TOKEN_NOT_VALID_TODAY"
    TOKEN_ALREADY_VALIDATED = "TOKEN_ALREADY_VALIDATED"


class InvalidMenuItemError(DomainError):
    def __init__(self, detail: str) -> None:
        super().__init__(code=ErrorCode.INVALID_MENU_ITEM, message=detail)


class UnknownMenuItemError(DomainError):
    """Raised when a menu references item IDs that do not exist."""

    def __init__(self, item_ids: list[str]) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_MENU_ITEM,
            message=f"Unknown menu items: {', '.join(item_ids)}.",
        )
        self.item_ids = item_ids


class MenuNotFoundError(DomainError):
    def __init__(self, menu_date: date) -> None:
        super().__init__(code=ErrorCode.MENU_NOT_FOUND, message=f"No menu found for {menu_date}.")
        self.menu_date = menu_date


class ItemNotOnMenuError(DomainError):
    def __init__(self, meal_type: str, menu_date: date) -> None:
        super().__init__(
            code=ErrorCode.ITEM_NOT_ON_MENU,
            message=f"Item not available for {meal_type} on {menu_date}.",
        )


class FoodTokenNotFoundError(DomainError):
    def __init__(self, token_id: str) -> None:
        super().__init__(code=ErrorCode.TOKEN_NOT_FOUND, message="Token not found.")
        self.token_id = token_id


class TokenNotValidTodayError(DomainError):
    def __init__(self, valid_on: date) -> None:
        super().__init__(
            code=ErrorCode.TOKEN_NOT_VALID_TODAY,
            message=f"Token is only valid for {valid_on}.",
        )
        self.valid_on = valid_on


class TokenAlreadyValidatedError(DomainError):
    def __init__(self, validated_at) -> None:
        super().__init__(
            code=ErrorCode.TOKEN_ALREADY_VALIDATED,
            message=f"Token already validated on {validated_at:%Y-%m-%d %H:%M}.",
        )
        self.validated_at = validated_at
