from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from .dtos import ShippingOption, ShippingQuote
from .exceptions import UnknownShippingOption
from .money import ZERO, Number, non_negative

STANDARD = "standard"
DEFAULT_FREE_THRESHOLD = Decimal("100")

DEFAULT_SHIPPING_OPTIONS: Sequence[ShippingOption] = (
    ShippingOption(
        id=STANDARD,
        name="Standard Shipping",
        flat_price=Decimal("5.99"),
        estimated_days="5-7",
    ),
    ShippingOption(
        id="express",
        name="Express Shipping",
        flat_price=Decimal("12.99"),
        estimated_days="2-3",
    ),
    ShippingOption(
        id="overnight",
        name="Overnight Shipping",
        flat_price=Decimal("24.99"),
        estimated_days="1",
    ),
)

# Destination multipliers applied by the shipping calculator quote.
COUNTRY_MULTIPLIERS: Dict[str, Decimal] = {
    "BR": Decimal("1"),
    "US": Decimal("1.5"),
}
DEFAULT_COUNTRY_MULTIPLIER = Decimal("2")


def get_shipping_option(
    option_id: str, options: Optional[Iterable[ShippingOption]] = None
) -> ShippingOption:
    for option in options if options is not None else DEFAULT_SHIPPING_OPTIONS:
        if option.id == option_id:
            return option
    raise UnknownShippingOption(option_id)


def is_free_shipping_eligible(
    subtotal: Number, free_threshold: Number = DEFAULT_FREE_THRESHOLD
) -> bool:
    return non_negative(subtotal, "subtotal") >= non_negative(
        free_threshold, "free_threshold"
    )


def resolve_shipping(
    subtotal: Number,
    option: ShippingOption,
    free_threshold: Number = DEFAULT_FREE_THRESHOLD,
) -> Decimal:
    """Shipping cost for a cart subtotal.

    Nothing is charged on an empty cart. Standard shipping is free once the
    subtotal reaches ``free_threshold``; every other option keeps its flat price.
    """
    amount = non_negative(subtotal, "subtotal")
    threshold = non_negative(free_threshold, "free_threshold")
    if amount == ZERO:
        return ZERO
    if option.id == STANDARD and amount >= threshold:
        return ZERO
    return option.flat_price


def country_multiplier(country: Optional[str]) -> Decimal:
    code = (country or "").strip().upper()
    return COUNTRY_MULTIPLIERS.get(code, DEFAULT_COUNTRY_MULTIPLIER)


def quote_shipping_options(
    subtotal: Number,
    country: Optional[str] = "BR",
    options: Optional[Iterable[ShippingOption]] = None,
    free_threshold: Number = DEFAULT_FREE_THRESHOLD,
) -> List[ShippingQuote]:
    """Price every option for a destination, as shown by the shipping calculator.

    The quote is informational: a free-shipping-eligible subtotal zeroes the
    standard option, other options are scaled by the country multiplier.
    """
    eligible = is_free_shipping_eligible(subtotal, free_threshold)
    multiplier = country_multiplier(country)
    code = (country or "").strip().upper() or None
    quotes: List[ShippingQuote] = []
    for option in options if options is not None else DEFAULT_SHIPPING_OPTIONS:
        free = eligible and option.id == STANDARD
        price = ZERO if free else option.flat_price * multiplier
        quotes.append(ShippingQuote(option=option, price=price, free=free, country=code))
    return quotes
