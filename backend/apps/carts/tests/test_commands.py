import unittest

from apps.carts.commands import CartItemCommand, QuantityUpdateCommand
from apps.pricing.exceptions import InvalidPricingInput


class CartCommandTests(unittest.TestCase):
    def test_item_command_defaults_quantity_to_one(self):
        cmd = CartItemCommand.from_raw({"productId": " 3 "})
        self.assertEqual(cmd.product_id, "3")
        self.assertEqual(cmd.quantity, 1)

    def test_item_command_accepts_nested_product(self):
        cmd = CartItemCommand.from_raw({"product": {"id": 7}, "quantity": "4"})
        self.assertEqual(cmd.product_id, "7")
        self.assertEqual(cmd.quantity, 4)

    def test_item_command_requires_product(self):
        with self.assertRaises(InvalidPricingInput) as ctx:
            CartItemCommand.from_raw({"quantity": 1})
        self.assertEqual(ctx.exception.field, "productId")

    def test_quantity_must_be_a_positive_integer(self):
        for bad in (0, -3, "two", 1.5, True):
            with self.assertRaises(InvalidPricingInput):
                QuantityUpdateCommand.from_raw("1", {"quantity": bad})

    def test_quantity_update_requires_quantity(self):
        with self.assertRaises(InvalidPricingInput):
            QuantityUpdateCommand.from_raw("1", {})
