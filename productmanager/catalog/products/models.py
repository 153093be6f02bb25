# productmanager/catalog/products/models.py
import uuid
from decimal import Decimal, InvalidOperation

from django.core.exceptions import ValidationError
from django.db import models

from productmanager.core.models import CoreBaseModel

NAME_MAX_LENGTH = 100
PRICE_MIN = Decimal("0")
PRICE_MAX = Decimal("999999999999999.99")
PRICE_MAX_DIGITS = 17
PRICE_DECIMAL_PLACES = 2

NAME_REQUIRED_MESSAGE = "Name is required"
NAME_TOO_LONG_MESSAGE = f"Name cannot exceed {NAME_MAX_LENGTH} characters"
PRICE_REQUIRED_MESSAGE = "Price is required"
PRICE_RANGE_MESSAGE = "Price must be between 0 and 999,999,999,999,999.99"


def validate_product_fields(name, price):
    """
    Check the name and price rules shared by create and update.

    Returns a field -> [messages] mapping, empty when everything is valid.
    """
    errors = {}

    if name is None or not str(name).strip():
        errors["name"] = [NAME_REQUIRED_MESSAGE]
    elif len(name) > NAME_MAX_LENGTH:
        errors["name"] = [NAME_TOO_LONG_MESSAGE]

    if price is None:
        errors["price"] = [PRICE_REQUIRED_MESSAGE]
    else:
        try:
            amount = Decimal(str(price))
        except InvalidOperation:
            errors["price"] = [PRICE_RANGE_MESSAGE]
        else:
            if not amount.is_finite() or amount < PRICE_MIN or amount > PRICE_MAX:
                errors["price"] = [PRICE_RANGE_MESSAGE]

    return errors


class Product(CoreBaseModel):
    """
    Catalog product.

    Build new products with ``Product.create()`` and change them with
    ``update()`` / ``set_status()``; both paths validate name and price
    before any field is touched.
    """

    name = models.CharField(max_length=NAME_MAX_LENGTH)
    description = models.TextField(blank=True, null=True)
    price = models.DecimalField(max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES)
    is_active = models.BooleanField(default=False)

    class Meta:
        db_table = "catalog_products"
        ordering = ["name", "created_at", "id"]
        indexes = [
            models.Index(fields=["name"], name="catalog_prod_name_idx"),
            models.Index(fields=["price"], name="catalog_prod_price_idx"),
            models.Index(fields=["is_active"], name="catalog_prod_active_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="catalog_products_price_non_negative",
            ),
        ]

    def __str__(self):
        return self.name

    # ------------------------------------------------------------------
    # Construction and mutation
    # ------------------------------------------------------------------

    @classmethod
    def create(cls, name, description, price, is_active=False):
        """Validate the fields and return a new, unsaved product with a fresh id."""
        errors = validate_product_fields(name, price)
        if errors:
            raise ValidationError(errors)
        return cls(
            id=uuid.uuid4(),
            name=name,
            description=description,
            price=Decimal(str(price)),
            is_active=bool(is_active),
        )

    def update(self, name, description, price, is_active):
        """Replace name, description, price and status in one step."""
        errors = validate_product_fields(name, price)
        if errors:
            raise ValidationError(errors)
        self.name = name
        self.description = description
        self.price = Decimal(str(price))
        self.is_active = bool(is_active)

    def set_status(self, is_active):
        if not isinstance(is_active, bool):
            raise TypeError("is_active must be a bool")
        self.is_active = is_active
