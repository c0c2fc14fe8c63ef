import logging
import os

from flask import Flask, jsonify, request
from utils.file_manager import ensure_defaults, read_config
from models.products import (
    add_transaction,
    list_products,
    list_totals,
    product_amounts,
    product_total,
    total_sales,
)

ensure_defaults()
app = Flask(__name__)

ENDPOINTS = {
    "GET /api/products/totals": "Get total amount for all products",
    "GET /api/products": "Get product details with amounts",
    "GET /api/products/:id/total": "Get product by ID with total amount",
    "GET /api/products/:id/amounts": "Get product by ID with all amounts",
    "POST /api/products": "Add new product",
    "GET /api/sales/total": "Get total sales across all products",
}

def _respond(result):
    status, payload = result
    return jsonify(payload), status

@app.get("/")
def index():
    return jsonify({"message": "Product API Server", "endpoints": ENDPOINTS})

# -------- Products --------
@app.get("/api/products/totals")
def products_totals():
    return _respond(list_totals())

@app.get("/api/products")
def products_list():
    return _respond(list_products())

@app.get("/api/products/<product_id>/total")
def product_total_get(product_id):
    return _respond(product_total(product_id))

@app.get("/api/products/<product_id>/amounts")
def product_amounts_get(product_id):
    return _respond(product_amounts(product_id))

@app.post("/api/products")
def products_add():
    data = request.get_json(force=True, silent=True) or {}
    return _respond(add_transaction(data))

# -------- Sales --------
@app.get("/api/sales/total")
def sales_total():
    return _respond(total_sales())

if __name__ == "__main__":
    cfg = read_config()
    logging.basicConfig(level=cfg.get("log_level", "INFO"))
    port = int(os.environ.get("PORT", cfg["server"]["port"]))
    logging.getLogger(__name__).info("Server is running on http://localhost:%d", port)
    app.run(host=cfg["server"]["host"], port=port, debug=bool(cfg["server"]["debug"]))
