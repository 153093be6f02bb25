import uuid

import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=100)),
                ("description", models.TextField(blank=True, null=True)),
                ("price", models.DecimalField(decimal_places=2, max_digits=17)),
                ("is_active", models.BooleanField(default=False)),
            ],
            options={
                "db_table": "catalog_products",
                "ordering": ["name", "created_at", "id"],
                "indexes": [
                    models.Index(fields=["name"], name="catalog_prod_name_idx"),
                    models.Index(fields=["price"], name="catalog_prod_price_idx"),
                    models.Index(fields=["is_active"], name="catalog_prod_active_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("price__gte", 0)),
                        name="catalog_products_price_non_negative",
                    ),
                ],
            },
        ),
    ]
