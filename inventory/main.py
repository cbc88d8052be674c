"""
==============================================================================
Inventory Catalog - Demonstration Entry Point
==============================================================================

Runs a fixed sequence of catalog operations and prints a status line for
each one.

Usage:
------
    python -m inventory
    
    # or, once installed
    inventory-demo
    
    # Verbose catalog logging on stderr
    INVENTORY_DEBUG=true inventory-demo

==============================================================================
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, TextIO

from inventory.catalog import Catalog, Product
from inventory.config import get_settings
from inventory.schemas.common import OperationResult


logger = logging.getLogger(__name__)


class DemoReporter:
    """Writes operation results to a text stream."""
    
    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
    
    def section(self, title: str, first: bool = False) -> None:
        if not first:
            self._write("")
        self._write(title)
    
    def report(self, result: OperationResult) -> None:
        """Write the status line, then merge events or alerts of a result."""
        self._write(result.message)
        for line in result.events or result.alerts:
            self._write(line)
    
    def listing(self, label: str, result: OperationResult) -> None:
        """Write a listing result followed by its products."""
        self._write(result.message)
        self._write(f"{label}{self.format_products(result.products)}")
    
    @staticmethod
    def format_products(products: List[Product]) -> str:
        return "[" + ", ".join(str(product) for product in products) + "]"
    
    def _write(self, line: str) -> None:
        print(line, file=self._stream)


def run_demo(stream: Optional[TextIO] = None) -> Catalog:
    """
    Run the demonstration sequence.
    
    Args:
        stream: Output stream for status lines (stdout if None)
        
    Returns:
        The primary catalog after the merge
    """
    reporter = DemoReporter(stream if stream is not None else sys.stdout)
    inventory = Catalog()
    
    reporter.section("Adding Products:", first=True)
    reporter.report(inventory.add_or_update_product("1", "Laptop", "Electronics", 50))
    reporter.report(inventory.add_or_update_product("2", "Chair", "Furniture", 20))
    reporter.report(inventory.add_or_update_product("3", "Apple", "Groceries", 5))
    
    reporter.section("Updating Products:")
    reporter.report(inventory.add_or_update_product("1", "Laptop", "Electronics", 10))
    
    reporter.section("Removing Product:")
    reporter.report(inventory.remove_product("2"))
    
    reporter.section("Products in Category:")
    reporter.listing("Electronics: ", inventory.get_products_by_category("Electronics"))
    
    reporter.section("Top 2 Products:")
    reporter.listing("", inventory.get_top_k_products(2))
    
    reporter.section("Merging Inventories:")
    another_inventory = Catalog(reorder_level=inventory.reorder_level)
    reporter.report(another_inventory.add_or_update_product("4", "Table", "Furniture", 30))
    reporter.report(another_inventory.add_or_update_product("1", "Laptop", "Electronics", 60))
    reporter.report(inventory.combine_inventories(another_inventory))
    
    reporter.section("After Merging:")
    for category in ("Electronics", "Clothing", "Groceries", "Furniture"):
        reporter.listing(f"{category}: ", inventory.get_products_by_category(category))
    
    return inventory


def main() -> int:
    """Configure logging from settings and run the demonstration."""
    settings = get_settings()
    
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    
    inventory = run_demo()
    logger.debug(f"Final catalog stats: {inventory.get_stats()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
