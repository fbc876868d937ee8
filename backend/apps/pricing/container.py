from __future__ import annotations

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .exceptions import InvalidPricingInput, UnknownShippingOption
from .services import PricingConfig, PricingService


def build_pricing_config(pricing=None) -> PricingConfig:
    """Build the pricing config from ``settings.PRICING`` (or the given mapping)."""
    if pricing is None:
        pricing = getattr(settings, "PRICING", None)
    try:
        return PricingConfig.from_settings(pricing)
    except (UnknownShippingOption, InvalidPricingInput) as exc:
        raise ImproperlyConfigured(f"Invalid PRICING setting: {exc}") from exc


def build_pricing_service() -> PricingService:
    return PricingService(config=build_pricing_config())
