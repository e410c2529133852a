"""Domain models for the canteen: menu items, daily menus and food tokens."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import UUID

from events.domain.value_objects import Money


class MenuCategory(str, Enum):
    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACKS = "Snacks"
    BEVERAGE = "Beverage"


class MealType(str, Enum):
    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"


@dataclass(frozen=True)
class MenuItem:
    id: UUID
    name: str
    price: Money
    category: MenuCategory
    is_veg: bool
    description: str | None = None


@dataclass(frozen=True)
class DailyMenu:
    """Menu item IDs served at each meal on one date."""

    id: UUID
    date: date
    breakfast_items: tuple[UUID, ...] = ()
    lunch_items: tuple[UUID, ...] = ()
    dinner_items: tuple[UUID, ...] = ()

    def items_for(self, meal_type: MealType) -> tuple[UUID, ...]:
        return {
            MealType.BREAKFAST: self.breakfast_items,
            MealType.LUNCH: self.lunch_items,
            MealType.DINNER: self.dinner_items,
        }[meal_type]


@dataclass(frozen=True)
class FoodToken:
    """A single-use coupon for one menu item at one meal on one date."""

    id: str
    user_id: str
    menu_item_id: UUID
    meal_type: MealType
    valid_on: date
    generated_at: datetime
    validated_at: datetime | None = None

    @property
    def is_validated(self) -> bool:
        return self.validated_at is not None
