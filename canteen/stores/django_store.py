"""Django ORM implementation of the CanteenStore."""

from collections.abc import Iterable
from datetime import date, datetime
from uuid import UUID

from canteen import models as orm
from canteen.domain import DailyMenu, FoodToken, MealType, MenuCategory, MenuItem
from canteen.stores.interfaces import CanteenStore
from events.domain.value_objects import Money


def to_domain_item(row: orm.MenuItem) -> MenuItem:
    return MenuItem(
        id=row.id,
        name=row.name,
        price=Money(row.price),
        category=MenuCategory(row.category),
        is_veg=row.is_veg,
        description=row.description,
    )


def to_domain_menu(row: orm.DailyMenu) -> DailyMenu:
    return DailyMenu(
        id=row.id,
        date=row.date,
        breakfast_items=tuple(UUID(i) for i in row.breakfast_items),
        lunch_items=tuple(UUID(i) for i in row.lunch_items),
        dinner_items=tuple(UUID(i) for i in row.dinner_items),
    )


def to_domain_token(row: orm.FoodToken) -> FoodToken:
    return FoodToken(
        id=row.id,
        user_id=row.user_id,
        menu_item_id=row.menu_item_id,
        meal_type=MealType(row.meal_type),
        valid_on=row.valid_on,
        generated_at=row.generated_at,
        validated_at=row.validated_at,
    )


def _ids(item_ids: Iterable[UUID]) -> list[str]:
    return [str(i) for i in item_ids]


class DjangoCanteenStore(CanteenStore):
    """Database-backed canteen store using Django ORM."""

    def list_menu_items(self) -> list[MenuItem]:
        return [to_domain_item(row) for row in orm.MenuItem.objects.all()]

    def existing_item_ids(self, item_ids: Iterable[UUID]) -> set[UUID]:
        return set(orm.MenuItem.objects.filter(pk__in=list(item_ids)).values_list("id", flat=True))

    def add_menu_item(self, item: MenuItem) -> MenuItem:
        row = orm.MenuItem.objects.create(
            id=item.id,
            name=item.name,
            description=item.description,
            price=item.price.amount,
            category=item.category.value,
            is_veg=item.is_veg,
        )
        return to_domain_item(row)

    def get_daily_menu(self, menu_date: date) -> DailyMenu | None:
        row = orm.DailyMenu.objects.filter(date=menu_date).first()
        return to_domain_menu(row) if row is not None else None

    def save_daily_menu(self, menu: DailyMenu) -> DailyMenu:
        row, _ = orm.DailyMenu.objects.update_or_create(
            date=menu.date,
            defaults={
                "breakfast_items": _ids(menu.breakfast_items),
                "lunch_items": _ids(menu.lunch_items),
                "dinner_items": _ids(menu.dinner_items),
            },
            create_defaults={
                "id": menu.id,
                "breakfast_items": _ids(menu.breakfast_items),
                "lunch_items": _ids(menu.lunch_items),
                "dinner_items": _ids(menu.dinner_items),
            },
        )
        return to_domain_menu(row)

    def add_token(self, token: FoodToken) -> FoodToken:
        row = orm.FoodToken.objects.create(
            id=token.id,
            user_id=token.user_id,
            menu_item_id=token.menu_item_id,
            meal_type=token.meal_type.value,
            valid_on=token.valid_on,
            generated_at=token.generated_at,
        )
        return to_domain_token(row)

    def get_token(self, token_id: str) -> FoodToken | None:
        row = orm.FoodToken.objects.filter(pk=token_id).first()
        return to_domain_token(row) if row is not None else None

    def mark_validated(self, token_id: str, validated_at: datetime) -> bool:
        updated = orm.FoodToken.objects.filter(pk=token_id, validated_at__isnull=True).update(
            validated_at=validated_at
        )
        return updated == 1

    def list_tokens(self, user_id: str, valid_on: date | None = None) -> list[FoodToken]:
        rows = orm.FoodToken.objects.filter(user_id=user_id)
        if valid_on is not None:
            rows = rows.filter(valid_on=valid_on)
        return [to_domain_token(row) for row in rows]
