from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from apps.api.exceptions import ApplicationError
from apps.common import get_logger
from .commands import QuoteCommand
from .dtos import LineItem, Quote, ShippingOption, ShippingQuote
from .exceptions import InvalidPricingInput, UnknownShippingOption
from .money import non_negative
from .shipping import (
    DEFAULT_FREE_THRESHOLD,
    DEFAULT_SHIPPING_OPTIONS,
    STANDARD,
    get_shipping_option,
    quote_shipping_options,
)
from .totals import DEFAULT_TAX_RATE, compute_totals, item_count

logger = get_logger(__name__).bind(component="pricing", layer="service")


@dataclass(frozen=True)
class PricingConfig:
    tax_rate: Decimal = DEFAULT_TAX_RATE
    free_threshold: Decimal = DEFAULT_FREE_THRESHOLD
    default_shipping_option: str = STANDARD
    shipping_options: Sequence[ShippingOption] = field(
        default_factory=lambda: tuple(DEFAULT_SHIPPING_OPTIONS)
    )

    def __post_init__(self):
        object.__setattr__(self, "tax_rate", non_negative(self.tax_rate, "tax_rate"))
        object.__setattr__(
            self, "free_threshold", non_negative(self.free_threshold, "free_threshold")
        )
        object.__setattr__(self, "shipping_options", tuple(self.shipping_options))
        # Fails fast on a default that is not in the option list.
        get_shipping_option(self.default_shipping_option, self.shipping_options)

    @classmethod
    def from_settings(cls, pricing: Optional[Mapping[str, Any]] = None) -> "PricingConfig":
        pricing = pricing or {}
        return cls(
            tax_rate=pricing.get("TAX_RATE", DEFAULT_TAX_RATE),
            free_threshold=pricing.get("FREE_SHIPPING_THRESHOLD", DEFAULT_FREE_THRESHOLD),
            default_shipping_option=pricing.get("DEFAULT_SHIPPING_OPTION", STANDARD),
        )


class PricingService:
    def __init__(self, config: Optional[PricingConfig] = None):
        self.config = config or PricingConfig()
        self.logger = logger.bind(service="PricingService")

    def shipping_options(self) -> List[ShippingOption]:
        return list(self.config.shipping_options)

    def get_shipping_option(self, option_id: Optional[str] = None) -> ShippingOption:
        resolved = option_id or self.config.default_shipping_option
        try:
            return get_shipping_option(resolved, self.config.shipping_options)
        except UnknownShippingOption:
            self.logger.warning("Unknown shipping option requested", option_id=resolved)
            raise ApplicationError(
                "NOT_FOUND",
                "Shipping option not found",
                details={"shippingOption": resolved},
                hint="Use one of: "
                + ", ".join(o.id for o in self.config.shipping_options),
            )

    def quote(
        self,
        items: Union[Iterable[LineItem], QuoteCommand, Dict[str, Any]],
        shipping_option_id: Optional[str] = None,
    ) -> Quote:
        """Price a cart with the configured tax rate and free-shipping threshold."""
        try:
            if isinstance(items, dict):
                items = QuoteCommand.from_raw(items)
            if isinstance(items, QuoteCommand):
                shipping_option_id = shipping_option_id or items.shipping_option_id
                items = items.items
            line_items = list(items)
            option = self.get_shipping_option(shipping_option_id)
            breakdown = compute_totals(
                line_items,
                option,
                tax_rate=self.config.tax_rate,
                free_threshold=self.config.free_threshold,
            )
        except InvalidPricingInput as exc:
            self.logger.warning(
                "Rejected pricing input", field=exc.field, value=exc.value
            )
            raise ApplicationError.invalid_input(exc.field, exc.value, exc.message)
        self.logger.debug(
            "Computed cart totals",
            items=len(line_items),
            shipping_option=option.id,
            subtotal=breakdown.subtotal,
            total=breakdown.total,
        )
        return Quote(option=option, breakdown=breakdown, item_count=item_count(line_items))

    def shipping_quote(self, subtotal: Any, country: Optional[str] = None) -> List[ShippingQuote]:
        try:
            quotes = quote_shipping_options(
                subtotal,
                country or "BR",
                self.config.shipping_options,
                self.config.free_threshold,
            )
        except InvalidPricingInput as exc:
            self.logger.warning(
                "Rejected shipping quote input", field=exc.field, value=exc.value
            )
            raise ApplicationError.invalid_input(exc.field, exc.value, exc.message)
        self.logger.debug(
            "Quoted shipping options", subtotal=subtotal, country=country, options=len(quotes)
        )
        return quotes
