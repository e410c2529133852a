from django.urls import path

from canteen.handlers import (
    DailyMenuView,
    FoodTokenListView,
    FoodTokenValidateView,
    MenuItemListView,
)

urlpatterns = [
    path("items", MenuItemListView.as_view(), name="canteen-item-list"),
    path("menus/<str:menu_date>", DailyMenuView.as_view(), name="canteen-daily-menu"),
    path("tokens", FoodTokenListView.as_view(), name="canteen-token-list"),
    path(
        "tokens/<str:token_id>/validate",
        FoodTokenValidateView.as_view(),
        name="canteen-token-validate",
    ),
]
