"""Product entity.

The single persisted record of the inventory. A product is created via
``Product.create()``, changed only through ``update_quantity()`` and
removed by the store on deletion.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ims.domain.model.value_objects import Money, check_quantity


@dataclass
class Product:
    """A product in the inventory.

    ``id`` stays ``None`` until the store assigns one on first save.
    The ``__init__`` is intentionally simple so the repository can
    reconstitute persisted products without re-validating.
    """

    id: int | None
    name: str
    quantity: int
    price: Money

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        price: str | int | Decimal | Money,
        quantity: int | None = None,
    ) -> Product:
        """Build an unsaved product, validating quantity then price."""
        qty = 0 if quantity is None else check_quantity(quantity)
        money = price if isinstance(price, Money) else Money.of(price)
        return Product(id=None, name=name, quantity=qty, price=money)

    # --- Mutations ------------------------------------------------------------

    def update_quantity(self, new_quantity: int) -> None:
        """Replace the stock level. Name, price and id are left untouched."""
        self.quantity = check_quantity(new_quantity)

    @property
    def in_stock(self) -> bool:
        return self.quantity > 0


@dataclass(frozen=True)
class ProductPage:
    """One slice of the product listing. ``page`` is zero-based."""

    items: list[Product]
    page: int
    size: int
    total: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return -(-self.total // self.size)
