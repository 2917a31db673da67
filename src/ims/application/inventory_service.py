"""Application service: the inventory use cases.

Every boundary (CLI, HTTP) goes through ``InventoryService``; none of
them talk to the repository directly. The service holds no state of its
own beyond the repository reference, so one instance can be shared by
any number of concurrent requests.

Repository faults (I/O errors, a broken file) are not caught here: they
reach the boundary unchanged.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from ims.domain.exceptions import (
    DuplicateNameError,
    InvalidNameError,
    ProductNotFoundError,
)
from ims.domain.model.product import Product, ProductPage
from ims.domain.model.summary import ProductSummary
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.inventory_summary import summarize

logger = logging.getLogger(__name__)


class InventoryService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def create_product(
        self,
        name: str,
        price: str | int | Decimal,
        quantity: int | None = None,
    ) -> Product:
        """Add a new product.

        Checks run in a fixed order so the reported error is deterministic:
        blank name, duplicate name, quantity, price. A missing quantity
        defaults to 0.
        """
        if not name or not name.strip():
            raise InvalidNameError("Product name is required")

        if self._product_repo.get_by_name(name) is not None:
            raise DuplicateNameError(name)

        product = Product.create(name=name, price=price, quantity=quantity)
        product = self._product_repo.save(product)
        logger.info(
            "Created product '%s'", product.name, extra={"product_id": product.id}
        )
        return product

    def get_product(self, product_id: int) -> Product:
        return self._get_or_raise(product_id)

    def list_products(self, page: int, size: int) -> ProductPage:
        """Return one page of products exactly as the repository slices it."""
        return self._product_repo.list_page(page, size)

    def search_products(self, query: str) -> list[Product]:
        """Products whose name contains *query*, ignoring case."""
        return self._product_repo.search_by_name(query)

    def update_quantity(self, product_id: int, quantity: int) -> Product:
        product = self._get_or_raise(product_id)
        product.update_quantity(quantity)
        product = self._product_repo.save(product)
        logger.info(
            "Set quantity of '%s' to %d",
            product.name,
            product.quantity,
            extra={"product_id": product.id},
        )
        return product

    def delete_product(self, product_id: int) -> None:
        """Remove a product. Deleting an already-deleted ID is an error."""
        product = self._get_or_raise(product_id)
        self._product_repo.delete(product)
        logger.info("Deleted product '%s'", product.name, extra={"product_id": product_id})

    def get_summary(self) -> ProductSummary:
        return summarize(self._product_repo.list_all())

    # --- Internal helpers -----------------------------------------------------

    def _get_or_raise(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
