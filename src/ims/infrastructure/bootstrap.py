"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from ims.application.inventory_service import InventoryService
from ims.infrastructure.config import get_settings
from ims.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


@lru_cache
def _json_repository(file_path: Path) -> JsonProductRepository:
    # One instance per file so every caller shares the same write lock.
    return JsonProductRepository(file_path)


def product_repository() -> JsonProductRepository:
    return _json_repository(get_settings().data_dir / "products.json")


def inventory_service() -> InventoryService:
    return InventoryService(product_repo=product_repository())
