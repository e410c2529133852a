import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="MenuItem",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, null=True)),
                ("price", models.DecimalField(decimal_places=2, max_digits=8)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("Breakfast", "Breakfast"),
                            ("Lunch", "Lunch"),
                            ("Dinner", "Dinner"),
                            ("Snacks", "Snacks"),
                            ("Beverage", "Beverage"),
                        ],
                        max_length=20,
                    ),
                ),
                ("is_veg", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["category", "name"],
            },
        ),
        migrations.CreateModel(
            name="DailyMenu",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("date", models.DateField(unique=True)),
                ("breakfast_items", models.JSONField(blank=True, default=list)),
                ("lunch_items", models.JSONField(blank=True, default=list)),
                ("dinner_items", models.JSONField(blank=True, default=list)),
            ],
            options={
                "ordering": ["-date"],
            },
        ),
        migrations.CreateModel(
            name="FoodToken",
            fields=[
                ("id", models.CharField(editable=False, max_length=32, primary_key=True, serialize=False)),
                ("user_id", models.CharField(max_length=255)),
                (
                    "meal_type",
                    models.CharField(
                        choices=[("Breakfast", "Breakfast"), ("Lunch", "Lunch"), ("Dinner", "Dinner")],
                        max_length=20,
                    ),
                ),
                ("valid_on", models.DateField()),
                ("generated_at", models.DateTimeField()),
                ("validated_at", models.DateTimeField(blank=True, null=True)),
                (
                    "menu_item",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="tokens",
                        to="canteen.menuitem",
                    ),
                ),
            ],
            options={
                "ordering": ["-generated_at"],
                "indexes": [models.Index(fields=["user_id", "valid_on"], name="food_token_user_date_idx")],
            },
        ),
    ]
