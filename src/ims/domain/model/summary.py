"""Read-only aggregate views over the product set."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class OutOfStockProduct:
    id: int
    name: str


@dataclass(frozen=True)
class ProductSummary:
    """Inventory statistics, recomputed on every request and never stored."""

    total_products: int
    total_quantity: int
    average_price: Decimal
    out_of_stock: list[OutOfStockProduct] = field(default_factory=list)
