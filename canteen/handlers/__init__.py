from canteen.handlers.views import (
    DailyMenuView,
    FoodTokenListView,
    FoodTokenValidateView,
    MenuItemListView,
)

__all__ = [
    "DailyMenuView",
    "FoodTokenListView",
    "FoodTokenValidateView",
    "MenuItemListView",
]
