"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.

Implementations must make each single-record read, save and delete
atomic, and should reject a save that would give two products the same
exact name: the service-level uniqueness check is only advisory when
creations race.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.product import Product, ProductPage


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return the product with exactly this name (case-sensitive), or None."""

    @abstractmethod
    def search_by_name(self, query: str) -> list[Product]:
        """Return products whose name contains *query*, ignoring case."""

    @abstractmethod
    def list_page(self, page: int, size: int) -> ProductPage:
        """Return one zero-based page of products."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Insert or update a product, assigning an ID to new ones."""

    @abstractmethod
    def delete(self, product: Product) -> None:
        """Remove a product."""
