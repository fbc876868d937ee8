from typing import Any, Optional


class InvalidPricingInput(ValueError):
    """Raised when a caller hands the pricing engine a value outside its contract.

    Prices, quantities and discounts are never clamped: a negative price or an
    out-of-range discount points at a bug upstream and fails the computation.
    """

    def __init__(self, field: str, value: Any, message: Optional[str] = None):
        self.field = field
        self.value = value
        self.message = message or f"Invalid value for {field}: {value!r}"
        super().__init__(self.message)


class UnknownShippingOption(LookupError):
    """Raised when a shipping option id is not in the configured catalog."""

    def __init__(self, option_id: str):
        self.option_id = option_id
        super().__init__(f"Unknown shipping option: {option_id!r}")
