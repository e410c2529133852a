"""Django ORM models (persistence layer) for the canteen."""

import uuid

from django.db import models

from canteen.domain import MealType, MenuCategory


class MenuItem(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    price = models.DecimalField(max_digits=8, decimal_places=2)
    category = models.CharField(max_length=20, choices=[(c.value, c.value) for c in MenuCategory])
    is_veg = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["category", "name"]

    def __str__(self) -> str:
        return self.name


class DailyMenu(models.Model):
    """Item IDs per meal for one date. Item lists are stored as JSON arrays of UUID strings."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    date = models.DateField(unique=True)
    breakfast_items = models.JSONField(default=list, blank=True)
    lunch_items = models.JSONField(default=list, blank=True)
    dinner_items = models.JSONField(default=list, blank=True)

    class Meta:
        ordering = ["-date"]

    def __str__(self) -> str:
        return f"Menu for {self.date}"


class FoodToken(models.Model):
    id = models.CharField(primary_key=True, max_length=32, editable=False)
    user_id = models.CharField(max_length=255)
    menu_item = models.ForeignKey(MenuItem, on_delete=models.PROTECT, related_name="tokens")
    meal_type = models.CharField(max_length=20, choices=[(m.value, m.value) for m in MealType])
    valid_on = models.DateField()
    generated_at = models.DateTimeField()
    validated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-generated_at"]
        indexes = [
            models.Index(fields=["user_id", "valid_on"], name="food_token_user_date_idx"),
        ]

    def __str__(self) -> str:
        return self.id
