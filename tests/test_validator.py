import math

from models.validator import ValidationError, validate

def test_missing_product_id():
    assert validate({"productId": "", "amount": 5}) is ValidationError.MISSING_PRODUCT_ID
    assert validate({"amount": 5}) is ValidationError.MISSING_PRODUCT_ID
    assert validate({"productId": 12, "amount": 5}) is ValidationError.MISSING_PRODUCT_ID

def test_invalid_amount():
    assert validate({"productId": "A", "amount": 0}) is ValidationError.INVALID_AMOUNT
    assert validate({"productId": "A", "amount": -3}) is ValidationError.INVALID_AMOUNT
    assert validate({"productId": "A", "amount": "10"}) is ValidationError.INVALID_AMOUNT
    assert validate({"productId": "A", "amount": True}) is ValidationError.INVALID_AMOUNT
    assert validate({"productId": "A", "amount": math.inf}) is ValidationError.INVALID_AMOUNT
    assert validate({"productId": "A", "amount": math.nan}) is ValidationError.INVALID_AMOUNT
    assert validate({"productId": "A"}) is ValidationError.INVALID_AMOUNT

def test_valid_candidate():
    assert validate({"productId": "A", "amount": 10}) is None
    assert validate({"productId": "A", "amount": 0.01}) is None

def test_product_id_checked_first():
    assert validate({"productId": "", "amount": -1}) is ValidationError.MISSING_PRODUCT_ID

def test_non_object_candidate():
    assert validate(None) is ValidationError.MISSING_PRODUCT_ID
    assert validate(["A", 10]) is ValidationError.MISSING_PRODUCT_ID

def test_error_messages():
    assert ValidationError.MISSING_PRODUCT_ID.message == "Invalid productId"
    assert ValidationError.INVALID_AMOUNT.field == "amount"

def test_amount_too_large_for_float():
    assert validate({"productId": "A", "amount": 10**400}) is ValidationError.INVALID_AMOUNT
    assert validate({"productId": "A", "amount": -(10**400)}) is ValidationError.INVALID_AMOUNT
