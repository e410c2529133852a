from canteen.domain.models import DailyMenu, FoodToken, MealType, MenuCategory, MenuItem

__all__ = ["DailyMenu", "FoodToken", "MealType", "MenuCategory", "MenuItem"]
