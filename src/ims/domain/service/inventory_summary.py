"""Domain service: Inventory Summary.

Computes the ``ProductSummary`` in a single pass over the full product
set. Nothing is cached or maintained incrementally; every call reflects
the products it is handed.
"""

from __future__ import annotations

from collections.abc import Iterable

from ims.domain.model.product import Product
from ims.domain.model.summary import OutOfStockProduct, ProductSummary
from ims.domain.model.value_objects import Money


def summarize(products: Iterable[Product]) -> ProductSummary:
    total_products = 0
    total_quantity = 0
    total_price = Money.zero()
    out_of_stock: list[OutOfStockProduct] = []

    for product in products:
        total_products += 1
        total_quantity += product.quantity
        total_price = total_price + product.price
        if not product.in_stock:
            out_of_stock.append(
                OutOfStockProduct(id=product.id, name=product.name)  # type: ignore[arg-type]
            )

    return ProductSummary(
        total_products=total_products,
        total_quantity=total_quantity,
        average_price=total_price.average_over(total_products),
        out_of_stock=out_of_stock,
    )
