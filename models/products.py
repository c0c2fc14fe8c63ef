"""Request handlers shared by the Flask app and the MCP server.

Every handler returns ``(status_code, payload)`` and never raises, so the
calling transport can always produce a response.
"""
import logging
from typing import Any, Dict, Tuple

from models import store
from models.aggregator import amounts_for_product, grand_total, group_by_product, totals_by_product
from models.validator import validate

LOG = logging.getLogger(__name__)

Response = Tuple[int, Dict[str, Any]]


def _fail(status: int, error: str) -> Response:
    return status, {"success": False, "error": error}


def list_totals() -> Response:
    try:
        totals = totals_by_product(store.load())
        data = [{"productId": k, "totalAmount": v} for k, v in totals.items()]
        return 200, {"success": True, "data": data}
    except Exception:
        LOG.exception("Failed to get totals")
        return _fail(500, "Failed to get totals")


def list_products() -> Response:
    try:
        grouped = group_by_product(store.load())
        data = [{"productId": k, "amounts": v} for k, v in grouped.items()]
        return 200, {"success": True, "data": data}
    except Exception:
        LOG.exception("Failed to get products")
        return _fail(500, "Failed to get products")


def product_total(product_id: str) -> Response:
    try:
        totals = totals_by_product(store.load())
        if product_id not in totals:
            return _fail(404, "Product not found")
        return 200, {"success": True, "data": {"productId": product_id, "totalAmount": totals[product_id]}}
    except Exception:
        LOG.exception("Failed to get product total for %s", product_id)
        return _fail(500, "Failed to get product total")


def product_amounts(product_id: str) -> Response:
    try:
        amounts = amounts_for_product(store.load(), product_id)
        if not amounts:
            return _fail(404, "Product not found")
        return 200, {"success": True, "data": {"productId": product_id, "amounts": amounts}}
    except Exception:
        LOG.exception("Failed to get product amounts for %s", product_id)
        return _fail(500, "Failed to get product amounts")


def total_sales() -> Response:
    try:
        return 200, {"success": True, "data": {"totalSales": grand_total(store.load())}}
    except Exception:
        LOG.exception("Failed to get total sales")
        return _fail(500, "Failed to get total sales")


def add_transaction(body: Any) -> Response:
    err = validate(body)
    if err is not None:
        return _fail(400, err.message)
    tx = {"productId": body["productId"], "amount": body["amount"]}
    try:
        store.append(tx)
    except Exception:
        LOG.exception("Failed to add product %s", tx["productId"])
        return _fail(500, "Failed to add product")
    return 201, {"success": True, "message": "Product added", "data": tx}
