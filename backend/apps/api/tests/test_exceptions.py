from rest_framework import status
from rest_framework.exceptions import MethodNotAllowed, NotFound, ValidationError
from rest_framework.test import APIRequestFactory

from apps.api.exceptions import ApplicationError, global_exception_handler

factory = APIRequestFactory()


class DummyView:
    pass


def _context(request):
    return {"request": request, "view": DummyView()}


def test_application_error_returns_structured_response():
    request = factory.post("/api/carts/abc123/checkout/")
    exc = ApplicationError(
        "CONFLICT",
        "Cart is empty",
        details={"id": "abc123"},
    )
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_409_CONFLICT
    assert payload["code"] == "CONFLICT"
    assert payload["message"] == "Cart is empty"
    assert payload["details"] == {"id": "abc123"}


def test_invalid_input_carries_field_and_value():
    request = factory.post("/api/pricing/quote/")
    exc = ApplicationError.invalid_input(
        "discount_percent", 150, "discount_percent must be between 0 and 100"
    )
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert payload["code"] == "VALIDATION_ERROR"
    assert payload["details"] == {"field": "discount_percent", "value": 150}


def test_not_found_helper_omits_empty_details():
    exc = ApplicationError.not_found("Cart not found")
    response = exc.to_response()
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert "details" not in response.data["error"]


def test_validation_error_preserves_details():
    request = factory.post("/api/pricing/quote/", data={})
    exc = ValidationError({"items": ["This field is required."]})
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert payload["code"] == "VALIDATION_ERROR"
    assert payload["message"] == "Validation failed"
    assert payload["details"] == {"items": ["This field is required."]}


def test_drf_not_found_is_normalized():
    request = factory.get("/api/products/missing/")
    response = global_exception_handler(NotFound(), _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert payload["code"] == "NOT_FOUND"
    assert "details" not in payload


def test_method_not_allowed_is_normalized():
    request = factory.put("/api/products/")
    response = global_exception_handler(MethodNotAllowed("PUT"), _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
    assert payload["code"] == "METHOD_NOT_ALLOWED"


def test_unhandled_exception_returns_generic_message():
    request = factory.get("/api/products/")
    response = global_exception_handler(RuntimeError("boom"), _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert payload["code"] == "SERVER_ERROR"
    assert payload["message"] == "Something went wrong"
    assert "details" not in payload
