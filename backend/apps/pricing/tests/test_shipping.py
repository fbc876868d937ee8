import unittest
from decimal import Decimal

from apps.pricing.dtos import ShippingOption
from apps.pricing.exceptions import InvalidPricingInput, UnknownShippingOption
from apps.pricing.shipping import (
    DEFAULT_SHIPPING_OPTIONS,
    country_multiplier,
    get_shipping_option,
    is_free_shipping_eligible,
    quote_shipping_options,
    resolve_shipping,
)

STANDARD = get_shipping_option("standard")
EXPRESS = get_shipping_option("express")
OVERNIGHT = get_shipping_option("overnight")


class ResolveShippingTests(unittest.TestCase):
    def test_threshold_is_inclusive(self):
        self.assertEqual(resolve_shipping(Decimal("100"), STANDARD, 100), Decimal("0"))

    def test_just_below_threshold_pays_flat_price(self):
        self.assertEqual(resolve_shipping(Decimal("99.99"), STANDARD, 100), Decimal("5.99"))

    def test_paid_options_ignore_threshold(self):
        self.assertEqual(resolve_shipping(Decimal("500"), EXPRESS), Decimal("12.99"))
        self.assertEqual(resolve_shipping(Decimal("500"), OVERNIGHT), Decimal("24.99"))

    def test_empty_cart_ships_free_on_every_option(self):
        for option in DEFAULT_SHIPPING_OPTIONS:
            self.assertEqual(resolve_shipping(0, option), Decimal("0"))

    def test_custom_threshold(self):
        self.assertEqual(resolve_shipping("50", STANDARD, free_threshold="50"), Decimal("0"))
        self.assertEqual(resolve_shipping("49.99", STANDARD, free_threshold="50"), Decimal("5.99"))

    def test_negative_subtotal_is_rejected(self):
        with self.assertRaises(InvalidPricingInput):
            resolve_shipping("-0.01", STANDARD)

    def test_free_shipping_eligibility(self):
        self.assertTrue(is_free_shipping_eligible("100"))
        self.assertFalse(is_free_shipping_eligible("99.99"))


class ShippingOptionLookupTests(unittest.TestCase):
    def test_unknown_option_raises(self):
        with self.assertRaises(UnknownShippingOption) as ctx:
            get_shipping_option("drone")
        self.assertEqual(ctx.exception.option_id, "drone")

    def test_lookup_in_custom_options(self):
        pickup = ShippingOption(id="pickup", flat_price="0", estimated_days="0")
        self.assertIs(get_shipping_option("pickup", [pickup]), pickup)

    def test_negative_flat_price_is_rejected(self):
        with self.assertRaises(InvalidPricingInput):
            ShippingOption(id="bad", flat_price="-1", estimated_days="1")


class ShippingQuoteTests(unittest.TestCase):
    def test_country_multipliers(self):
        self.assertEqual(country_multiplier("BR"), Decimal("1"))
        self.assertEqual(country_multiplier("us"), Decimal("1.5"))
        self.assertEqual(country_multiplier("DE"), Decimal("2"))
        self.assertEqual(country_multiplier(None), Decimal("2"))

    def test_quote_scales_paid_options_by_destination(self):
        quotes = {q.option.id: q for q in quote_shipping_options("50", "US")}
        self.assertEqual(quotes["standard"].price, Decimal("8.985"))
        self.assertEqual(quotes["express"].price, Decimal("19.485"))
        self.assertFalse(quotes["standard"].free)
        self.assertEqual(quotes["standard"].country, "US")

    def test_eligible_subtotal_makes_standard_free(self):
        quotes = quote_shipping_options("150", "BR")
        self.assertEqual([q.option.id for q in quotes], ["standard", "express", "overnight"])
        self.assertTrue(quotes[0].free)
        self.assertEqual(quotes[0].price, Decimal("0"))
        self.assertEqual(quotes[1].price, Decimal("12.99"))
