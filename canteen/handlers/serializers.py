from rest_framework import serializers

from canteen.domain import MealType, MenuCategory

CATEGORY_VALUES = [c.value for c in MenuCategory]
MEAL_TYPE_VALUES = [m.value for m in MealType]


class MenuItemSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    price = serializers.DecimalField(source="price.amount", max_digits=12, decimal_places=2)
    category = serializers.CharField(source="category.value")
    is_veg = serializers.BooleanField()


class DailyMenuSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    date = serializers.DateField()
    breakfast_items = serializers.ListField(child=serializers.UUIDField())
    lunch_items = serializers.ListField(child=serializers.UUIDField())
    dinner_items = serializers.ListField(child=serializers.UUIDField())


class FoodTokenSerializer(serializers.Serializer):
    id = serializers.CharField()
    user_id = serializers.CharField()
    menu_item_id = serializers.UUIDField()
    meal_type = serializers.CharField(source="meal_type.value")
    valid_on = serializers.DateField()
    generated_at = serializers.DateTimeField()
    is_validated = serializers.BooleanField()
    validated_at = serializers.DateTimeField(allow_null=True)


# ---------- Requests ----------


class MenuItemCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    price = serializers.DecimalField(max_digits=8, decimal_places=2, min_value=0)
    category = serializers.ChoiceField(choices=CATEGORY_VALUES)
    is_veg = serializers.BooleanField(default=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class DailyMenuUpdateSerializer(serializers.Serializer):
    breakfast_items = serializers.ListField(child=serializers.UUIDField(), required=False, default=list)
    lunch_items = serializers.ListField(child=serializers.UUIDField(), required=False, default=list)
    dinner_items = serializers.ListField(child=serializers.UUIDField(), required=False, default=list)


class FoodTokenCreateSerializer(serializers.Serializer):
    user_id = serializers.CharField(max_length=255)
    menu_item_id = serializers.UUIDField()
    meal_type = serializers.ChoiceField(choices=MEAL_TYPE_VALUES)
    valid_on = serializers.DateField()


class FoodTokenFilterSerializer(serializers.Serializer):
    user_id = serializers.CharField(max_length=255)
    date = serializers.DateField(required=False)


class MenuDateSerializer(serializers.Serializer):
    date = serializers.DateField()
