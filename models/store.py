"""Whole-file persistence of the transaction log.

Reads fail open: a missing or corrupt file is an empty log. Writes fail
loudly with ``StoreWriteError``.
"""
import logging
import threading
from typing import Any, Dict, List, Optional, Sequence

from utils.exceptions import StoreReadError, StoreWriteError
from utils.file_manager import read_json, sales_file, write_json

LOG = logging.getLogger(__name__)

Transaction = Dict[str, Any]

# Serializes load+push+replace inside one process only.
_APPEND_LOCK = threading.Lock()


def _read_transactions(filename: str) -> List[Transaction]:
    try:
        data = read_json(filename)
    except (OSError, ValueError, RecursionError) as e:
        raise StoreReadError(f"cannot read {filename}: {e}") from e
    if not isinstance(data, list):
        raise StoreReadError(f"{filename} does not hold a list of transactions")
    return data


def load(filename: Optional[str] = None) -> List[Transaction]:
    filename = filename or sales_file()
    try:
        return _read_transactions(filename)
    except StoreReadError as e:
        LOG.warning("Treating store as empty: %s", e)
        return []


def replace(transactions: Sequence[Transaction], filename: Optional[str] = None):
    filename = filename or sales_file()
    try:
        write_json(filename, list(transactions))
    except (OSError, TypeError, ValueError) as e:
        raise StoreWriteError(f"cannot write {filename}: {e}") from e


def append(tx: Transaction, filename: Optional[str] = None) -> List[Transaction]:
    """Append one transaction and return the full log as persisted."""
    filename = filename or sales_file()
    with _APPEND_LOCK:
        txs = load(filename)
        txs.append(tx)
        replace(txs, filename)
    LOG.info("Recorded %s for %s (%d transactions)", tx.get("amount"), tx.get("productId"), len(txs))
    return txs
