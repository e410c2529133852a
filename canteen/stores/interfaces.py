"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date, datetime
from uuid import UUID

from canteen.domain import DailyMenu, FoodToken, MenuItem


class CanteenStore(ABC):
    """Interface for canteen persistence operations."""

    @abstractmethod
    def list_menu_items(self) -> list[MenuItem]:
        ...

    @abstractmethod
    def existing_item_ids(self, item_ids: Iterable[UUID]) -> set[UUID]:
        """Return the subset of item_ids that exist."""
        ...

    @abstractmethod
    def add_menu_item(self, item: MenuItem) -> MenuItem:
        ...

    @abstractmethod
    def get_daily_menu(self, menu_date: date) -> DailyMenu | None:
        ...

    @abstractmethod
    def save_daily_menu(self, menu: DailyMenu) -> DailyMenu:
        """Insert the menu, or replace the item lists of the menu for the same date."""
        ...

    @abstractmethod
    def add_token(self, token: FoodToken) -> FoodToken:
        ...

    @abstractmethod
    def get_token(self, token_id: str) -> FoodToken | None:
        ...

    @abstractmethod
    def mark_validated(self, token_id: str, validated_at: datetime) -> bool:
        """Stamp validated_at if the token is not validated yet. Return False otherwise."""
        ...

    @abstractmethod
    def list_tokens(self, user_id: str, valid_on: date | None = None) -> list[FoodToken]:
        ...
