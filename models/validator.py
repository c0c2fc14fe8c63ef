import math
from enum import Enum
from typing import Any, Optional


class ValidationError(Enum):
    MISSING_PRODUCT_ID = ("productId", "Invalid productId")
    INVALID_AMOUNT = ("amount", "Invalid amount")

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message


def is_number(value: Any) -> bool:
    # bool is an int subclass but never an amount
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate(candidate: Any) -> Optional[ValidationError]:
    """Check a transaction before it is written; returns the first failing field or None."""
    if not isinstance(candidate, dict):
        return ValidationError.MISSING_PRODUCT_ID
    product_id = candidate.get("productId")
    if not isinstance(product_id, str) or not product_id:
        return ValidationError.MISSING_PRODUCT_ID
    amount = candidate.get("amount")
    if not is_number(amount):
        return ValidationError.INVALID_AMOUNT
    try:
        amount = float(amount)
    except OverflowError:
        return ValidationError.INVALID_AMOUNT
    if not math.isfinite(amount) or amount <= 0:
        return ValidationError.INVALID_AMOUNT
    return None
