"""
==============================================================================
Inventory Catalog Module
==============================================================================

In-memory inventory catalog with a by-ID index and a by-category index.

Features:
---------
- Insert or update products, moving them between categories
- Low-stock alerts below a configurable reorder level
- Category listing and top-K queries ordered by stock
- One-directional merge of another catalog

Index Structure:
---------------
The by-ID index is the only place product records live. The by-category
index holds product IDs only and resolves records through the by-ID index
at query time:

    _by_id:       {"1": Product(id="1", category="Electronics", ...)}
    _by_category: {"Electronics": {"1": None}}

Ordering:
--------
Listings are ordered by stock (descending), ties broken by the order in
which products first entered this catalog.

==============================================================================
"""

from __future__ import annotations

import heapq
import logging
import threading
from typing import Any, Callable, Dict, List, Optional, Tuple

from inventory.config import get_settings
from inventory.core import exceptions
from inventory.core.exceptions import CatalogError
from inventory.schemas.common import OperationResult, ResultStatus
from inventory.utils.validators import QuantityValidator, TextFieldValidator

from .models import Product


# Module logger
logger = logging.getLogger(__name__)


class Catalog:
    """
    Inventory catalog manager.
    
    Every public operation validates its input first and reports problems
    through the returned ``OperationResult``; a failed call leaves both
    indexes untouched.
    
    Attributes:
        reorder_level: Stock threshold below which alerts are raised
    
    Example:
        >>> catalog = Catalog()
        >>> catalog.add_or_update_product("1", "Laptop", "Electronics", 50).status
        <ResultStatus.ADDED: 'added'>
        >>> [p.id for p in catalog.get_top_k_products(1).products]
        ['1']
    """
    
    _id_validator = TextFieldValidator("Product ID")
    _name_validator = TextFieldValidator("Product name")
    _category_validator = TextFieldValidator("Category name")
    _stock_validator = QuantityValidator(minimum=0)
    _top_k_validator = QuantityValidator(minimum=1)
    
    def __init__(self, reorder_level: Optional[int] = None) -> None:
        """
        Initialize an empty catalog.
        
        Args:
            reorder_level: Low-stock threshold (uses settings if None)
            
        Raises:
            ValueError: If reorder_level is not a non-negative integer
        """
        if reorder_level is None:
            reorder_level = get_settings().reorder_level
        if not self._stock_validator.is_valid(reorder_level):
            raise ValueError(f"reorder_level must be a non-negative integer, got {reorder_level!r}")
        
        self._reorder_level = reorder_level
        self._by_id: Dict[str, Product] = {}
        self._by_category: Dict[str, Dict[str, None]] = {}
        self._sequence: Dict[str, int] = {}
        self._next_sequence = 0
        self._lock = threading.RLock()
    
    # =========================================================================
    # PROPERTIES
    # =========================================================================
    
    @property
    def reorder_level(self) -> int:
        """Get the low-stock threshold."""
        return self._reorder_level
    
    @property
    def products(self) -> List[Product]:
        """Get all products in first-insertion order."""
        with self._lock:
            return list(self._by_id.values())
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._by_id)
    
    def __contains__(self, product_id: object) -> bool:
        if not isinstance(product_id, str):
            return False
        with self._lock:
            return product_id in self._by_id
    
    # =========================================================================
    # MUTATIONS
    # =========================================================================
    
    def add_or_update_product(
        self,
        product_id: str,
        name: str,
        category: str,
        stock: int
    ) -> OperationResult:
        """
        Insert a new product or update an existing one.
        
        An update may change the category, which moves the product from the
        old category bucket to the new one.
        
        Args:
            product_id: Unique product identifier
            name: Display name
            category: Category name
            stock: Quantity on hand (>= 0)
            
        Returns:
            ADDED or UPDATED result with the stored product, or a
            validation failure
        """
        try:
            self._validate_text(self._id_validator, product_id, exceptions.invalid_identifier)
            self._validate_text(self._name_validator, name, exceptions.invalid_name)
            self._validate_text(self._category_validator, category, exceptions.invalid_category)
            self._validate_stock(stock)
        except CatalogError as exc:
            logger.warning(f"Rejected add/update of {product_id!r}: {exc.message}")
            return OperationResult.failure(exc)
        
        with self._lock:
            return self._upsert(product_id, name, category, stock)
    
    def remove_product(self, product_id: str) -> OperationResult:
        """
        Remove a product from both indexes.
        
        Args:
            product_id: Product identifier
            
        Returns:
            REMOVED with the removed product, NOT_FOUND, or a validation failure
        """
        try:
            self._validate_text(self._id_validator, product_id, exceptions.invalid_identifier)
        except CatalogError as exc:
            logger.warning(f"Rejected removal: {exc.message}")
            return OperationResult.failure(exc)
        
        with self._lock:
            product = self._by_id.pop(product_id, None)
            if product is None:
                logger.info(f"Product ID '{product_id}' not found")
                return OperationResult.failure(exceptions.not_found(
                    f"Product ID '{product_id}' not found.",
                    product_id=product_id
                ))
            
            self._remove_from_category(product)
            del self._sequence[product_id]
        
        logger.info(f"Removed: {product}")
        return OperationResult(
            status=ResultStatus.REMOVED,
            message=f"Removed: {product}",
            products=[product]
        )
    
    def combine_inventories(self, other: Optional["Catalog"]) -> OperationResult:
        """
        Merge another catalog into this one.
        
        For each product of ``other``: unknown IDs are imported with full
        add semantics; known IDs take the other stock only when it is
        strictly greater (name and category stay as they are here).
        ``other`` is never modified.
        
        Args:
            other: Catalog to merge from
            
        Returns:
            MERGED result listing the changed products, or INVALID_ARGUMENT
        """
        if other is None or not isinstance(other, Catalog):
            exc = exceptions.invalid_argument(
                "Cannot combine with a null inventory.",
                other=repr(other)
            )
            logger.warning(exc.message)
            return OperationResult.failure(exc)
        
        # Snapshot first so the two locks are never held together
        incoming = other.products
        
        changed: List[Product] = []
        alerts: List[str] = []
        events: List[str] = []
        
        with self._lock:
            for other_product in incoming:
                existing = self._by_id.get(other_product.id)
                
                if existing is None:
                    result = self._upsert(
                        other_product.id,
                        other_product.name,
                        other_product.category,
                        other_product.stock
                    )
                    changed.extend(result.products)
                    alerts.extend(result.alerts)
                    events.append(result.message)
                    events.extend(result.alerts)
                    events.append(f"Added new product: {other_product}")
                    continue
                
                if other_product.stock > existing.stock:
                    updated = existing.model_copy(update={"stock": other_product.stock})
                    self._by_id[updated.id] = updated
                    changed.append(updated)
                    events.append(f"Updated product with higher stock: {updated}")
                    logger.info(f"Merge raised stock of '{updated.id}' to {updated.stock}")
        
        logger.info(f"✅ Combined inventories: {len(changed)} product(s) changed")
        return OperationResult(
            status=ResultStatus.MERGED,
            message="Combining with another inventory...",
            products=changed,
            alerts=alerts,
            events=events
        )
    
    # =========================================================================
    # QUERIES
    # =========================================================================
    
    def get_product(self, product_id: str) -> OperationResult:
        """Look up a single product by ID."""
        try:
            self._validate_text(self._id_validator, product_id, exceptions.invalid_identifier)
        except CatalogError as exc:
            return OperationResult.failure(exc)
        
        with self._lock:
            product = self._by_id.get(product_id)
        
        if product is None:
            return OperationResult.failure(exceptions.not_found(
                f"Product ID '{product_id}' not found.",
                product_id=product_id
            ))
        
        return OperationResult(
            status=ResultStatus.FOUND,
            message=f"Found: {product}",
            products=[product]
        )
    
    def get_products_by_category(self, category: str) -> OperationResult:
        """
        List the products of one category.
        
        Args:
            category: Category name
            
        Returns:
            FOUND with products ordered by stock (descending), EMPTY when
            the category has no products, or a validation failure
        """
        try:
            self._validate_text(self._category_validator, category, exceptions.invalid_category)
        except CatalogError as exc:
            logger.warning(f"Rejected category listing: {exc.message}")
            return OperationResult.failure(exc)
        
        with self._lock:
            product_ids = self._by_category.get(category, {})
            products = sorted(
                (self._by_id[product_id] for product_id in product_ids),
                key=self._rank_key
            )
        
        if not products:
            logger.debug(f"No products found in category '{category}'")
            return OperationResult(
                status=ResultStatus.EMPTY,
                message=f"No products found in the category: '{category}'."
            )
        
        return OperationResult(
            status=ResultStatus.FOUND,
            message=f"Products in category '{category}':",
            products=products
        )
    
    def get_top_k_products(self, k: int) -> OperationResult:
        """
        Get the k products with the highest stock across all categories.
        
        Args:
            k: Number of products wanted (> 0)
            
        Returns:
            FOUND with min(k, len(catalog)) products in descending stock
            order, EMPTY for an empty catalog, or INVALID_ARGUMENT
        """
        if not self._top_k_validator.is_valid(k):
            exc = exceptions.invalid_argument("Invalid number. 'k' must be positive.", k=repr(k))
            logger.warning(exc.message)
            return OperationResult.failure(exc)
        
        with self._lock:
            top_products = heapq.nlargest(
                k,
                self._by_id.values(),
                key=lambda product: (product.stock, -self._sequence[product.id])
            )
        
        if not top_products:
            return OperationResult(
                status=ResultStatus.EMPTY,
                message="No products to display."
            )
        
        return OperationResult(
            status=ResultStatus.FOUND,
            message=f"Top {k} products by stock quantity:",
            products=top_products
        )
    
    # =========================================================================
    # UTILITY METHODS
    # =========================================================================
    
    def get_categories(self) -> List[str]:
        """Get all non-empty category names, sorted."""
        with self._lock:
            return sorted(self._by_category)
    
    def get_stats(self) -> Dict:
        """Get catalog statistics."""
        with self._lock:
            return {
                "total_products": len(self._by_id),
                "total_stock": sum(p.stock for p in self._by_id.values()),
                "low_stock_products": sum(
                    1 for p in self._by_id.values() if p.is_low_stock(self._reorder_level)
                ),
                "categories": {
                    category: len(product_ids)
                    for category, product_ids in sorted(self._by_category.items())
                }
            }
    
    # =========================================================================
    # INTERNALS
    # =========================================================================
    
    def _upsert(self, product_id: str, name: str, category: str, stock: int) -> OperationResult:
        """Insert or replace a product. Caller holds the lock and has validated input."""
        product = Product(id=product_id, name=name, category=category, stock=stock)
        existing = self._by_id.get(product_id)
        
        if existing is not None:
            self._remove_from_category(existing)
            status = ResultStatus.UPDATED
            message = f"Updated: {product}"
            alert = (
                f'Alert: Product "{name}" is running low. '
                f"Current stock: {stock}. Reorder soon."
            )
        else:
            self._sequence[product_id] = self._next_sequence
            self._next_sequence += 1
            status = ResultStatus.ADDED
            message = f"Added: {product}"
            alert = (
                f'Alert: Product "{name}" is low in stock. '
                f"Current stock: {stock}. Consider restocking."
            )
        
        self._by_id[product_id] = product
        self._by_category.setdefault(category, {})[product_id] = None
        logger.info(message)
        
        alerts = []
        if product.is_low_stock(self._reorder_level):
            logger.warning(alert)
            alerts.append(alert)
        
        return OperationResult(
            status=status,
            message=message,
            products=[product],
            alerts=alerts
        )
    
    def _remove_from_category(self, product: Product) -> None:
        """Drop a product ID from its bucket, deleting the bucket when empty."""
        product_ids = self._by_category.get(product.category)
        if product_ids is None:
            return
        
        product_ids.pop(product.id, None)
        if not product_ids:
            del self._by_category[product.category]
    
    def _rank_key(self, product: Product) -> Tuple[int, int]:
        return (-product.stock, self._sequence[product.id])
    
    @staticmethod
    def _validate_text(
        validator: TextFieldValidator,
        value: Any,
        error_factory: Callable[[Any], CatalogError]
    ) -> None:
        if not validator.is_valid(value):
            raise error_factory(value)
    
    def _validate_stock(self, stock: Any) -> None:
        if isinstance(stock, bool) or not isinstance(stock, int):
            raise exceptions.invalid_stock(stock, "Stock must be an integer.")
        if not self._stock_validator.is_valid(stock):
            raise exceptions.invalid_stock(stock)
