"""
Local MCP server for the product sales service.

This implements a minimal Model Context Protocol (MCP) server using FastMCP
that exposes the same operations as the HTTP API: product totals, grouped
amounts, per-product lookups, grand total and appending a transaction.

Every tool returns an MCP content array holding one JSON text item: the
response envelope the HTTP API would send, plus its HTTP-equivalent `status`.
"""
import json
import logging
from typing import Any, Dict

from fastmcp import FastMCP

from utils.file_manager import ensure_defaults, read_config
from models import products

LOG = logging.getLogger(__name__)

server_instructions = """
This MCP server provides access to recorded product sales. It can report per-product
totals and amounts, the grand total of all sales, and record a new sale.
"""

def _content(result) -> Dict[str, Any]:
    status, payload = result
    body = dict(payload, status=status)
    return {"content": [{"type": "text", "text": json.dumps(body)}]}

def create_server() -> FastMCP:
    mcp = FastMCP(name="Product Sales Local MCP", instructions=server_instructions)

    @mcp.tool()
    async def product_totals() -> Dict[str, Any]:
        """
        Return the total sales amount for every product.

        Returns:
            MCP content array with JSON:
            {"success": true, "data": [{"productId": id, "totalAmount": n}, ...], "status": 200}
        """
        return _content(products.list_totals())

    @mcp.tool()
    async def product_amounts() -> Dict[str, Any]:
        """
        Return every recorded amount grouped by product, in recording order.
        """
        return _content(products.list_products())

    @mcp.tool()
    async def product_total(product_id: str) -> Dict[str, Any]:
        """
        Return the total sales amount for one product.

        Args:
            product_id: Exact, case-sensitive product identifier.

        Edge cases:
            - Unknown products return {"success": false, "error": "Product not found", "status": 404}.
        """
        return _content(products.product_total(product_id))

    @mcp.tool()
    async def product_amounts_for(product_id: str) -> Dict[str, Any]:
        """
        Return the recorded amounts for one product.

        Edge cases:
            - Unknown products return a 404 envelope rather than an empty list.
        """
        return _content(products.product_amounts(product_id))

    @mcp.tool()
    async def total_sales() -> Dict[str, Any]:
        """Return the grand total of all recorded sales as {"data": {"totalSales": n}}."""
        return _content(products.total_sales())

    @mcp.tool()
    async def add_transaction(arg: str) -> Dict[str, Any]:
        """
        Record a sale.

        The `arg` parameter is a JSON object: {"productId": "A1", "amount": 12.5}.
        `productId` must be a non-empty string and `amount` a positive number.

        Returns:
            MCP content array with the stored transaction on success (status 201)
            or an error payload (status 400) naming the invalid field.
        """
        try:
            data = json.loads(arg) if arg else {}
        except ValueError:
            return {"content": [{"type": "text", "text": json.dumps({"success": False, "error": "Invalid JSON argument", "status": 400})}]}
        return _content(products.add_transaction(data))

    return mcp


def main():
    ensure_defaults()
    cfg = read_config()
    logging.basicConfig(level=cfg.get("log_level", "INFO"))
    mcp_cfg = cfg["mcp"]
    server = create_server()
    LOG.info("Starting local MCP server on %s:%s (HTTP)", mcp_cfg["host"], mcp_cfg["port"])
    server.run(transport="http", host=mcp_cfg["host"], port=int(mcp_cfg["port"]), path=mcp_cfg["path"])


if __name__ == "__main__":
    main()
