from django import forms

from .models import (
    NAME_MAX_LENGTH,
    NAME_REQUIRED_MESSAGE,
    NAME_TOO_LONG_MESSAGE,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX,
    PRICE_MAX_DIGITS,
    PRICE_MIN,
    PRICE_RANGE_MESSAGE,
    PRICE_REQUIRED_MESSAGE,
)


class ProductForm(forms.Form):
    """Create/edit form of the admin UI."""

    name = forms.CharField(
        max_length=NAME_MAX_LENGTH,
        strip=False,
        error_messages={
            "required": NAME_REQUIRED_MESSAGE,
            "max_length": NAME_TOO_LONG_MESSAGE,
        },
    )
    description = forms.CharField(required=False, strip=False, widget=forms.Textarea(attrs={"rows": 4}))
    price = forms.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        min_value=PRICE_MIN,
        max_value=PRICE_MAX,
        error_messages={
            "required": PRICE_REQUIRED_MESSAGE,
            "min_value": PRICE_RANGE_MESSAGE,
            "max_value": PRICE_RANGE_MESSAGE,
            "max_digits": PRICE_RANGE_MESSAGE,
            "max_whole_digits": PRICE_RANGE_MESSAGE,
        },
    )
    is_active = forms.BooleanField(required=False, label="Active")

    def clean_name(self):
        name = self.cleaned_data["name"]
        if not name.strip():
            raise forms.ValidationError(NAME_REQUIRED_MESSAGE)
        return name

    @classmethod
    def from_product(cls, product):
        """Unbound form prefilled from a full product shape."""
        return cls(initial={
            "name": product["name"],
            "description": product["description"],
            "price": product["price"],
            "is_active": product["isActive"],
        })

    def apply_errors(self, errors):
        """Attach field errors reported by the service to this form."""
        for field, messages in errors.items():
            for message in messages:
                self.add_error(field if field in self.fields else None, message)
