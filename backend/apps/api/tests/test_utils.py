import unittest
from decimal import Decimal

from rest_framework import status
from apps.api.utils import error_response


class ErrorResponseTests(unittest.TestCase):
    def test_default_status_mapping_and_details(self):
        resp = error_response("NOT_FOUND", "Product not found", {"id": "42"})
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["error"]["code"], "NOT_FOUND")
        self.assertEqual(resp.data["error"]["status"], status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["error"]["details"], {"id": "42"})

    def test_custom_status_override(self):
        resp = error_response("UNKNOWN", "oops", http_status=status.HTTP_202_ACCEPTED)
        self.assertEqual(resp.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(resp.data["error"]["message"], "oops")

    def test_unmapped_code_defaults_to_bad_request(self):
        resp = error_response("odd_code", "Nope")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data["error"]["code"], "ODD_CODE")

    def test_unprocessable_entity_mapping(self):
        resp = error_response("UNPROCESSABLE_ENTITY", "Affiliate product")
        self.assertEqual(resp.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)

    def test_error_response_supports_hint_and_extra(self):
        resp = error_response(
            "VALIDATION_ERROR",
            "Invalid value",
            hint="Use one of: standard, express",
            extra={"affiliateUrl": "https://example.com/x"},
        )
        payload = resp.data["error"]
        self.assertEqual(payload["hint"], "Use one of: standard, express")
        self.assertEqual(payload["extra"], {"affiliateUrl": "https://example.com/x"})

    def test_decimals_and_sets_are_json_friendly(self):
        resp = error_response(
            "VALIDATION_ERROR",
            "Bad range",
            {"value": Decimal("1E+2"), "categories": {"Home", "Electronics"}},
        )
        details = resp.data["error"]["details"]
        self.assertEqual(details["value"], "100")
        self.assertEqual(details["categories"], ["Electronics", "Home"])

    def test_blank_code_is_rejected(self):
        with self.assertRaises(ValueError):
            error_response("  ", "message")
