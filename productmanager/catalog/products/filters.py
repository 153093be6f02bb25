"""
Product listing filter and the in-memory evaluator.

Both repository backends read their predicates, sort column and page window
from ``ProductFilter`` so the two stay in step.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

SORT_FIELDS = ("name", "price")
DEFAULT_SORT_FIELD = "name"

UI_PAGE_SIZE = 10
API_PAGE_SIZE = 20

LIKE_ESCAPE_CHAR = "\\"


@dataclass
class ProductFilter:
    name: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    is_active: Optional[bool] = None
    sort_by: Optional[str] = None
    ascending: bool = True
    page: int = 1
    page_size: int = UI_PAGE_SIZE
    default_page_size: int = UI_PAGE_SIZE

    def __post_init__(self):
        if self.name is not None and not self.name.strip():
            self.name = None
        if self.page is None or self.page < 1:
            self.page = 1
        if self.page_size is None or self.page_size < 1:
            self.page_size = self.default_page_size

    @property
    def sort_field(self) -> str:
        """Column to sort on; only ever ``name`` or ``price``."""
        requested = (self.sort_by or "").strip().lower()
        return requested if requested in SORT_FIELDS else DEFAULT_SORT_FIELD

    @property
    def descending(self) -> bool:
        # Unknown sort keys fall back to name ascending
        return not self.ascending and (self.sort_by or "").strip().lower() in SORT_FIELDS

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def name_pattern(self) -> Optional[str]:
        """LIKE pattern for the name filter with wildcards in the user value escaped."""
        if self.name is None:
            return None
        escaped = (
            self.name.replace(LIKE_ESCAPE_CHAR, LIKE_ESCAPE_CHAR * 2)
            .replace("%", LIKE_ESCAPE_CHAR + "%")
            .replace("_", LIKE_ESCAPE_CHAR + "_")
        )
        return f"%{escaped}%"

    def matches(self, product) -> bool:
        if self.is_active is not None and product.is_active != self.is_active:
            return False
        if self.name is not None and self.name.lower() not in product.name.lower():
            return False
        if self.min_price is not None and product.price < self.min_price:
            return False
        if self.max_price is not None and product.price > self.max_price:
            return False
        return True


def paginate(items: List, product_filter: ProductFilter) -> List:
    start = product_filter.offset
    return items[start:start + product_filter.page_size]


def evaluate(products: Iterable, product_filter: ProductFilter) -> Tuple[List, int]:
    """
    Filter, count, sort and slice a collection of products.

    Returns ``(page_items, total_count)`` where ``total_count`` is the number
    of products matching every predicate, whatever page is requested.
    The sort is stable so products with equal keys keep their input order.
    """
    matching = [product for product in products if product_filter.matches(product)]
    total_count = len(matching)

    field = product_filter.sort_field
    ordered = sorted(
        matching,
        key=lambda product: getattr(product, field),
        reverse=product_filter.descending,
    )
    return paginate(ordered, product_filter), total_count
