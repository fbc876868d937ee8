import json
from dataclasses import dataclass, field
from decimal import Decimal
from typing import FrozenSet, Optional, Tuple

from apps.pricing.exceptions import InvalidPricingInput
from apps.pricing.money import ZERO, discount_percent, non_negative, to_decimal

AFFILIATE = "affiliate"
DROPSHIPPING = "dropshipping"
PRODUCT_TYPES = (AFFILIATE, DROPSHIPPING)
TYPE_FILTERS = ("all",) + PRODUCT_TYPES


class InvalidFilterCriteria(ValueError):
    """Raised when filter criteria or a sort key cannot be applied."""

    def __init__(self, field: str, value, message: str):
        self.field = field
        self.value = value
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class CatalogProduct:
    id: str
    name: str
    price: Decimal
    category: str
    type: str
    in_stock: bool = True
    discount_percent: Decimal = ZERO
    description: str = ""
    image: str = ""
    affiliate_url: Optional[str] = None

    def __post_init__(self):
        if self.type not in PRODUCT_TYPES:
            raise InvalidPricingInput("type", self.type, "type must be affiliate or dropshipping")
        object.__setattr__(self, "id", str(self.id))
        object.__setattr__(self, "price", non_negative(self.price, "price"))
        object.__setattr__(
            self, "discount_percent", discount_percent(self.discount_percent)
        )


@dataclass(frozen=True)
class FilterCriteria:
    """Catalog filters; the defaults disable every criterion."""

    type_filter: str = "all"
    search_text: str = ""
    price_range: Optional[Tuple[Decimal, Optional[Decimal]]] = None
    categories: FrozenSet[str] = field(default_factory=frozenset)
    in_stock_only: bool = False

    def __post_init__(self):
        if self.type_filter not in TYPE_FILTERS:
            raise InvalidFilterCriteria(
                "type",
                self.type_filter,
                "type must be one of: " + ", ".join(TYPE_FILTERS),
            )
        object.__setattr__(self, "search_text", (self.search_text or "").strip())
        object.__setattr__(self, "categories", frozenset(self.categories or ()))
        if self.price_range is not None:
            object.__setattr__(self, "price_range", self._validate_range(self.price_range))

    @staticmethod
    def _validate_range(price_range) -> Tuple[Decimal, Optional[Decimal]]:
        # A missing upper bound leaves the range open above.
        try:
            low, high = price_range
            low = non_negative(ZERO if low is None else low, "minPrice")
            high = None if high is None else non_negative(high, "maxPrice")
        except InvalidPricingInput as exc:
            raise InvalidFilterCriteria(exc.field, exc.value, exc.message)
        except (TypeError, ValueError):
            raise InvalidFilterCriteria(
                "priceRange", price_range, "priceRange must be a [min, max] pair"
            )
        if high is not None and low > high:
            raise InvalidFilterCriteria(
                "priceRange",
                [str(low), str(high)],
                "minPrice must not exceed maxPrice",
            )
        return low, high

    def cache_token(self) -> str:
        """Canonical JSON of the criteria; equal criteria give equal tokens."""
        price = (
            [None if v is None else format(to_decimal(v).normalize(), "f") for v in self.price_range]
            if self.price_range
            else None
        )
        return json.dumps(
            {
                "type": self.type_filter,
                "q": self.search_text.casefold(),
                "price": price,
                "categories": sorted(self.categories),
                "in_stock": self.in_stock_only,
            },
            sort_keys=True,
            separators=(",", ":"),
        )


"""DTO dataclasses only. The filter/sort pipeline lives in filters.py."""
