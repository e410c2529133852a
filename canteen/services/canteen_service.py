"""Canteen service - menus and single-use food tokens.

A token is redeemable only on the date it was issued for, and only once.
Redemption is a conditional update, so two counters scanning the same token
cannot both accept it.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from canteen.domain import DailyMenu, FoodToken, MealType, MenuCategory, MenuItem
from canteen.domain.errors import (
    FoodTokenNotFoundError,
    InvalidMenuItemError,
    ItemNotOnMenuError,
    MenuNotFoundError,
    TokenAlreadyValidatedError,
    TokenNotValidTodayError,
    UnknownMenuItemError,
)
from canteen.stores.interfaces import CanteenStore
from events.domain.value_objects import Money
from events.services.tokens import generate_token

logger = logging.getLogger(__name__)

FOOD_TOKEN_BYTES = 9


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CanteenService:
    """Service for canteen menu and food token operations."""

    def __init__(
        self,
        store: CanteenStore,
        clock: Callable[[], datetime] = _utcnow,
        today: Callable[[], date] = date.today,
        token_factory: Callable[[], str] = lambda: generate_token(FOOD_TOKEN_BYTES),
    ) -> None:
        self._store = store
        self._clock = clock
        self._today = today
        self._token_factory = token_factory

    # --- Menu ---

    def list_menu_items(self) -> list[MenuItem]:
        return self._store.list_menu_items()

    def add_menu_item(
        self,
        *,
        name: str,
        price: Decimal,
        category: MenuCategory,
        is_veg: bool,
        description: str | None = None,
    ) -> MenuItem:
        """Add an item to the canteen catalogue.

        Raises:
            InvalidMenuItemError: If the name is blank or the price is negative.
        """
        name = name.strip()
        if not name:
            raise InvalidMenuItemError("Menu item name cannot be empty.")
        try:
            amount = Money(Decimal(price))
        except ValueError as exc:
            raise InvalidMenuItemError("Price cannot be negative.") from exc

        item = self._store.add_menu_item(
            MenuItem(
                id=uuid4(),
                name=name,
                price=amount,
                category=category,
                is_veg=is_veg,
                description=description or None,
            )
        )
        logger.info("Added menu item %s (%s)", item.id, item.name)
        return item

    def get_daily_menu(self, menu_date: date) -> DailyMenu:
        menu = self._store.get_daily_menu(menu_date)
        if menu is None:
            raise MenuNotFoundError(menu_date)
        return menu

    def set_daily_menu(
        self,
        menu_date: date,
        *,
        breakfast_items: Sequence[UUID] = (),
        lunch_items: Sequence[UUID] = (),
        dinner_items: Sequence[UUID] = (),
    ) -> DailyMenu:
        """Create or replace the menu for a date.

        Raises:
            UnknownMenuItemError: If any listed item does not exist.
        """
        self._check_items_exist([*breakfast_items, *lunch_items, *dinner_items])
        menu = self._store.save_daily_menu(
            DailyMenu(
                id=uuid4(),
                date=menu_date,
                breakfast_items=tuple(breakfast_items),
                lunch_items=tuple(lunch_items),
                dinner_items=tuple(dinner_items),
            )
        )
        logger.info("Set daily menu for %s", menu_date)
        return menu

    # --- Food tokens ---

    def generate_token(
        self, user_id: str, menu_item_id: UUID, meal_type: MealType, valid_on: date
    ) -> FoodToken:
        """Issue a token for an item on the menu of the given meal and date.

        Raises:
            MenuNotFoundError: If no menu exists for valid_on.
            ItemNotOnMenuError: If the item is not served at that meal.
        """
        menu = self.get_daily_menu(valid_on)
        if menu_item_id not in menu.items_for(meal_type):
            raise ItemNotOnMenuError(meal_type.value, valid_on)

        token = self._store.add_token(
            FoodToken(
                id=self._token_factory(),
                user_id=user_id,
                menu_item_id=menu_item_id,
                meal_type=meal_type,
                valid_on=valid_on,
                generated_at=self._clock(),
            )
        )
        logger.info("Generated food token %s for %s (%s on %s)", token.id, user_id, meal_type.value, valid_on)
        return token

    def validate_token(self, token_id: str, today: date | None = None) -> FoodToken:
        """Redeem a token at the counter.

        Raises:
            FoodTokenNotFoundError: If the token does not exist.
            TokenNotValidTodayError: If the token is for another date.
            TokenAlreadyValidatedError: If the token was already redeemed.
        """
        token_id = token_id.strip()
        token = self._store.get_token(token_id)
        if token is None:
            raise FoodTokenNotFoundError(token_id)
        if token.valid_on != (today or self._today()):
            raise TokenNotValidTodayError(token.valid_on)
        if token.is_validated or not self._store.mark_validated(token_id, self._clock()):
            current = self._store.get_token(token_id)
            logger.warning("Rejected reuse of food token %s", token_id)
            raise TokenAlreadyValidatedError(current.validated_at)

        logger.info("Validated food token %s", token_id)
        return self._store.get_token(token_id)

    def list_user_tokens(self, user_id: str, valid_on: date | None = None) -> list[FoodToken]:
        return self._store.list_tokens(user_id, valid_on)

    def _check_items_exist(self, item_ids: Iterable[UUID]) -> None:
        wanted = set(item_ids)
        missing = wanted - self._store.existing_item_ids(wanted)
        if missing:
            raise UnknownMenuItemError(sorted(str(i) for i in missing))
