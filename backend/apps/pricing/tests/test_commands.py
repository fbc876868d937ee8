import unittest
from decimal import Decimal

from apps.pricing.commands import QuoteCommand, line_item_from_raw
from apps.pricing.exceptions import InvalidPricingInput


class QuoteCommandTests(unittest.TestCase):
    def test_from_raw_accepts_camel_case_payload(self):
        cmd = QuoteCommand.from_raw(
            {
                "items": [
                    {"id": 3, "unitPrice": "79.99", "quantity": 1, "discountPercent": 10},
                    {"productId": "1", "price": 129.99, "quantity": "2"},
                ],
                "shippingOption": "express",
            }
        )
        self.assertEqual(cmd.shipping_option_id, "express")
        self.assertEqual([i.id for i in cmd.items], ["3", "1"])
        self.assertEqual(cmd.items[0].discount_percent, Decimal("10"))
        self.assertEqual(cmd.items[1].unit_price, Decimal("129.99"))
        self.assertEqual(cmd.items[1].quantity, 2)

    def test_from_raw_accepts_snake_case_and_defaults_quantity(self):
        cmd = QuoteCommand.from_raw(
            {"items": [{"product_id": "7", "unit_price": "34.99"}], "shipping_option": "standard"}
        )
        self.assertEqual(cmd.items[0].quantity, 1)
        self.assertEqual(cmd.shipping_option_id, "standard")

    def test_missing_items_means_empty_cart(self):
        cmd = QuoteCommand.from_raw({})
        self.assertEqual(cmd.items, [])
        self.assertIsNone(cmd.shipping_option_id)

    def test_missing_price_is_rejected(self):
        with self.assertRaises(InvalidPricingInput) as ctx:
            line_item_from_raw({"id": "1", "quantity": 1})
        self.assertEqual(ctx.exception.field, "unit_price")

    def test_non_object_item_reports_position(self):
        with self.assertRaises(InvalidPricingInput) as ctx:
            QuoteCommand.from_raw({"items": [{"id": "1", "unitPrice": "1"}, "oops"]})
        self.assertEqual(ctx.exception.field, "items[1]")

    def test_negative_quantity_string_is_rejected(self):
        with self.assertRaises(InvalidPricingInput):
            line_item_from_raw({"id": "1", "unitPrice": "1", "quantity": "-2"})
