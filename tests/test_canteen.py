"""Tests for canteen menus and food tokens.

Run with: pytest tests/test_canteen.py -v
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from canteen.domain import MealType, MenuCategory
from canteen.domain.errors import (
    FoodTokenNotFoundError,
    InvalidMenuItemError,
    ItemNotOnMenuError,
    MenuNotFoundError,
    TokenAlreadyValidatedError,
    TokenNotValidTodayError,
    UnknownMenuItemError,
)
from canteen.services.canteen_service import CanteenService
from canteen.stores.django_store import DjangoCanteenStore

TODAY = date(2025, 2, 3)
TOMORROW = date(2025, 2, 4)
NOW = datetime(2025, 2, 3, 8, 30, tzinfo=timezone.utc)


@pytest.fixture
def canteen_service(db) -> CanteenService:
    return CanteenService(DjangoCanteenStore(), clock=lambda: NOW, today=lambda: TODAY)


@pytest.fixture
def idli(canteen_service):
    return canteen_service.add_menu_item(
        name="Idli Sambar", price=Decimal("30.00"), category=MenuCategory.BREAKFAST, is_veg=True
    )


@pytest.fixture
def todays_menu(canteen_service, idli):
    return canteen_service.set_daily_menu(TODAY, breakfast_items=[idli.id])


@pytest.mark.django_db
class TestMenu:
    """Tests for menu items and daily menus."""

    def test_add_menu_item(self, canteen_service):
        item = canteen_service.add_menu_item(
            name="  Masala Chai ",
            price=Decimal("12"),
            category=MenuCategory.BEVERAGE,
            is_veg=True,
            description="",
        )
        assert item.name == "Masala Chai"
        assert item.price.amount == Decimal("12")
        assert item.description is None
        assert canteen_service.list_menu_items() == [item]

    def test_blank_name_rejected(self, canteen_service):
        with pytest.raises(InvalidMenuItemError):
            canteen_service.add_menu_item(
                name=" ", price=Decimal("10"), category=MenuCategory.SNACKS, is_veg=True
            )

    def test_negative_price_rejected(self, canteen_service):
        with pytest.raises(InvalidMenuItemError):
            canteen_service.add_menu_item(
                name="Samosa", price=Decimal("-1"), category=MenuCategory.SNACKS, is_veg=True
            )

    def test_set_and_get_daily_menu(self, canteen_service, todays_menu, idli):
        menu = canteen_service.get_daily_menu(TODAY)
        assert menu.breakfast_items == (idli.id,)
        assert menu.lunch_items == ()

    def test_set_daily_menu_replaces_existing(self, canteen_service, todays_menu, idli):
        replaced = canteen_service.set_daily_menu(TODAY, lunch_items=[idli.id])

        assert replaced.id == todays_menu.id
        assert replaced.breakfast_items == ()
        assert replaced.lunch_items == (idli.id,)

    def test_unknown_items_rejected(self, canteen_service):
        missing = uuid4()
        with pytest.raises(UnknownMenuItemError) as exc_info:
            canteen_service.set_daily_menu(TODAY, dinner_items=[missing])
        assert exc_info.value.item_ids == [str(missing)]

    def test_missing_menu(self, canteen_service):
        with pytest.raises(MenuNotFoundError):
            canteen_service.get_daily_menu(TOMORROW)


@pytest.mark.django_db
class TestFoodTokens:
    """Tests for food token issue and redemption."""

    def test_generate_token(self, canteen_service, todays_menu, idli):
        token = canteen_service.generate_token("alice", idli.id, MealType.BREAKFAST, TODAY)

        assert token.user_id == "alice"
        assert token.valid_on == TODAY
        assert token.generated_at == NOW
        assert not token.is_validated

    def test_tokens_are_unique(self, canteen_service, todays_menu, idli):
        ids = {
            canteen_service.generate_token("alice", idli.id, MealType.BREAKFAST, TODAY).id
            for _ in range(20)
        }
        assert len(ids) == 20

    def test_item_must_be_on_that_meal(self, canteen_service, todays_menu, idli):
        with pytest.raises(ItemNotOnMenuError):
            canteen_service.generate_token("alice", idli.id, MealType.DINNER, TODAY)

    def test_menu_must_exist(self, canteen_service, idli):
        with pytest.raises(MenuNotFoundError):
            canteen_service.generate_token("alice", idli.id, MealType.BREAKFAST, TOMORROW)

    def test_validate_once(self, canteen_service, todays_menu, idli):
        token = canteen_service.generate_token("alice", idli.id, MealType.BREAKFAST, TODAY)

        validated = canteen_service.validate_token(f"  {token.id} ")
        assert validated.validated_at == NOW

        with pytest.raises(TokenAlreadyValidatedError):
            canteen_service.validate_token(token.id)

    def test_validate_on_wrong_day(self, canteen_service, todays_menu, idli):
        token = canteen_service.generate_token("alice", idli.id, MealType.BREAKFAST, TODAY)
        with pytest.raises(TokenNotValidTodayError):
            canteen_service.validate_token(token.id, today=TOMORROW)

    def test_validate_unknown_token(self, canteen_service):
        with pytest.raises(FoodTokenNotFoundError):
            canteen_service.validate_token("missing")

    def test_list_user_tokens(self, canteen_service, todays_menu, idli):
        canteen_service.set_daily_menu(TOMORROW, breakfast_items=[idli.id])
        canteen_service.generate_token("alice", idli.id, MealType.BREAKFAST, TODAY)
        canteen_service.generate_token("alice", idli.id, MealType.BREAKFAST, TOMORROW)
        canteen_service.generate_token("bob", idli.id, MealType.BREAKFAST, TODAY)

        assert len(canteen_service.list_user_tokens("alice")) == 2
        assert [t.valid_on for t in canteen_service.list_user_tokens("alice", TOMORROW)] == [TOMORROW]


@pytest.mark.django_db
class TestCanteenEndpoints:
    """Tests for /api/canteen/*"""

    def _add_item(self, api_client: APIClient) -> dict:
        response = api_client.post(
            "/api/canteen/items",
            {"name": "Veg Thali", "price": "80.00", "category": "Lunch", "is_veg": True},
            format="json",
        )
        assert response.status_code == 201
        return response.data

    def test_menu_and_token_flow(self, api_client: APIClient):
        item = self._add_item(api_client)
        today = date.today().isoformat()

        menu = api_client.put(f"/api/canteen/menus/{today}", {"lunch_items": [item["id"]]}, format="json")
        assert menu.status_code == 200
        assert menu.data["lunch_items"] == [item["id"]]

        token = api_client.post(
            "/api/canteen/tokens",
            {"user_id": "alice", "menu_item_id": item["id"], "meal_type": "Lunch", "valid_on": today},
            format="json",
        )
        assert token.status_code == 201

        redeemed = api_client.post(f"/api/canteen/tokens/{token.data['id']}/validate")
        assert redeemed.status_code == 200
        assert redeemed.data["is_validated"] is True

        again = api_client.post(f"/api/canteen/tokens/{token.data['id']}/validate")
        assert again.status_code == 409
        assert again.data["error"]["code"] == "TOKEN_ALREADY_VALIDATED"

        listed = api_client.get("/api/canteen/tokens", {"user_id": "alice", "date": today})
        assert [t["id"] for t in listed.data] == [token.data["id"]]

    def test_menu_not_found(self, api_client: APIClient):
        response = api_client.get("/api/canteen/menus/2030-01-01")
        assert response.status_code == 404
        assert response.data["error"]["code"] == "MENU_NOT_FOUND"

    def test_bad_menu_date(self, api_client: APIClient):
        response = api_client.get("/api/canteen/menus/tomorrow")
        assert response.status_code == 400

    def test_token_for_item_not_served(self, api_client: APIClient):
        item = self._add_item(api_client)
        today = date.today().isoformat()
        api_client.put(f"/api/canteen/menus/{today}", {"lunch_items": [item["id"]]}, format="json")

        response = api_client.post(
            "/api/canteen/tokens",
            {"user_id": "alice", "menu_item_id": item["id"], "meal_type": "Dinner", "valid_on": today},
            format="json",
        )

        assert response.status_code == 409
        assert response.data["error"]["code"] == "ITEM_NOT_ON_MENU"

    def test_unknown_token(self, api_client: APIClient):
        response = api_client.post("/api/canteen/tokens/nope/validate")
        assert response.status_code == 404

    def test_token_list_requires_user(self, api_client: APIClient):
        response = api_client.get("/api/canteen/tokens")
        assert response.status_code == 400
