import utils.file_manager as fm
from models import products, store

def test_read_failure_maps_to_500(tmp_path, monkeypatch):
    monkeypatch.setattr(fm, "_DATA_DIR", tmp_path / "data")
    def boom(filename=None):
        raise RuntimeError("unexpected")
    monkeypatch.setattr(store, "load", boom)
    assert products.list_totals() == (500, {"success": False, "error": "Failed to get totals"})
    assert products.list_products()[0] == 500
    assert products.product_total("A") == (500, {"success": False, "error": "Failed to get product total"})
    assert products.product_amounts("A")[1]["error"] == "Failed to get product amounts"
    assert products.total_sales()[0] == 500

def test_add_transaction_keeps_only_known_fields(tmp_path, monkeypatch):
    monkeypatch.setattr(fm, "_DATA_DIR", tmp_path / "data")
    status, payload = products.add_transaction({"productId": "A", "amount": 2.5, "note": "x"})
    assert status == 201
    assert payload["data"] == {"productId": "A", "amount": 2.5}
    assert store.load() == [{"productId": "A", "amount": 2.5}]

def test_empty_store_is_not_found(tmp_path, monkeypatch):
    monkeypatch.setattr(fm, "_DATA_DIR", tmp_path / "data")
    assert products.list_totals() == (200, {"success": True, "data": []})
    assert products.product_total("A")[0] == 404
    assert products.product_amounts("A")[0] == 404
    assert products.total_sales() == (200, {"success": True, "data": {"totalSales": 0}})
