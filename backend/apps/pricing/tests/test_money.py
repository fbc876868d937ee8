import unittest
from decimal import Decimal

from apps.pricing.exceptions import InvalidPricingInput
from apps.pricing.money import (
    discount_percent,
    effective_price,
    format_money,
    round_money,
    to_decimal,
)


class EffectivePriceTests(unittest.TestCase):
    def test_zero_discount_returns_price_unchanged(self):
        self.assertEqual(effective_price(Decimal("129.99"), 0), Decimal("129.99"))
        self.assertEqual(effective_price(Decimal("129.99")), Decimal("129.99"))

    def test_percentage_discount_is_applied_without_rounding(self):
        self.assertEqual(effective_price("79.99", 10), Decimal("71.991"))
        self.assertEqual(effective_price("129.99", 15), Decimal("110.4915"))

    def test_full_discount_gives_zero(self):
        self.assertEqual(effective_price("34.99", 100), Decimal("0"))

    def test_float_input_goes_through_str(self):
        self.assertEqual(effective_price(79.99), Decimal("79.99"))

    def test_negative_price_is_rejected(self):
        with self.assertRaises(InvalidPricingInput) as ctx:
            effective_price("-1", 0)
        self.assertEqual(ctx.exception.field, "unit_price")

    def test_out_of_range_discount_is_rejected(self):
        for bad in (-5, 101, "150"):
            with self.assertRaises(InvalidPricingInput):
                effective_price("10", bad)


class ConversionTests(unittest.TestCase):
    def test_booleans_and_none_are_not_numbers(self):
        for bad in (True, None, object()):
            with self.assertRaises(InvalidPricingInput):
                to_decimal(bad, "price")

    def test_non_finite_values_are_rejected(self):
        for bad in ("NaN", "Infinity", float("inf")):
            with self.assertRaises(InvalidPricingInput):
                to_decimal(bad)

    def test_garbage_string_is_rejected(self):
        with self.assertRaises(InvalidPricingInput) as ctx:
            to_decimal("abc", "unit_price")
        self.assertEqual(ctx.exception.value, "abc")

    def test_missing_discount_means_none(self):
        self.assertEqual(discount_percent(None), Decimal("0"))


class RoundingTests(unittest.TestCase):
    def test_rounds_half_up_to_cents(self):
        self.assertEqual(round_money("358.52868"), Decimal("358.53"))
        self.assertEqual(round_money("8.985"), Decimal("8.99"))
        self.assertEqual(round_money("0.004"), Decimal("0.00"))

    def test_format_money_is_plain_notation(self):
        self.assertEqual(format_money(Decimal("1E+2")), "100.00")
        self.assertEqual(format_money("26.55768"), "26.56")


class DiscountMonotonicityTests(unittest.TestCase):
    def test_price_never_increases_as_discount_grows(self):
        for price in ("0", "0.01", "34.99", "129.99", "899.99"):
            previous = effective_price(price, 0)
            for step in range(0, 1001):
                pct = Decimal(step) / 10
                current = effective_price(price, pct)
                self.assertLessEqual(current, previous, (price, pct))
                self.assertGreaterEqual(current, Decimal("0"))
                previous = current
