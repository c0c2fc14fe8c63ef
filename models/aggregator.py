"""Totals and groupings over an in-memory transaction sequence.

Malformed records (no productId, non-numeric amount) are skipped, not
rejected: the store may hold legacy data. Zero and negative amounts are
aggregated as-is; only the write path refuses them.
"""
import logging
from typing import Dict, Iterator, List, Sequence, Tuple

from models.validator import is_number

LOG = logging.getLogger(__name__)


def _accepted(txs: Sequence[Dict]) -> Iterator[Tuple[str, float]]:
    for idx, t in enumerate(txs):
        if not isinstance(t, dict):
            LOG.warning("skipping item #%d: not an object", idx)
            continue
        product_id = t.get("productId")
        amount = t.get("amount")
        if not isinstance(product_id, str) or not product_id or not is_number(amount):
            LOG.warning("skipping item #%d: missing productId or amount", idx)
            continue
        yield product_id, amount


def group_by_product(txs: Sequence[Dict]) -> Dict[str, List[float]]:
    grouped = {}
    for product_id, amount in _accepted(txs):
        grouped.setdefault(product_id, []).append(amount)
    return grouped


def totals_by_product(txs: Sequence[Dict]) -> Dict[str, float]:
    totals = {}
    for product_id, amount in _accepted(txs):
        totals[product_id] = totals.get(product_id, 0) + amount
    return totals


def amounts_for_product(txs: Sequence[Dict], product_id: str) -> List[float]:
    """Amounts recorded for one product in store order; [] when there are none."""
    return [amount for pid, amount in _accepted(txs) if pid == product_id]


def grand_total(txs: Sequence[Dict]) -> float:
    total = 0
    for _, amount in _accepted(txs):
        total += amount
    return total
