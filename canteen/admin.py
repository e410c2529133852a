from django.contrib import admin

from canteen.models import DailyMenu, FoodToken, MenuItem


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    list_display = ["name", "category", "price", "is_veg"]
    list_filter = ["category", "is_veg"]
    search_fields = ["name"]


@admin.register(DailyMenu)
class DailyMenuAdmin(admin.ModelAdmin):
    list_display = ["date"]


@admin.register(FoodToken)
class FoodTokenAdmin(admin.ModelAdmin):
    list_display = ["id", "user_id", "menu_item", "meal_type", "valid_on", "validated_at"]
    list_filter = ["meal_type", "valid_on"]
    search_fields = ["id", "user_id"]
