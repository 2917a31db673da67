"""IMS API — FastAPI application factory.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Domain errors translated through one status table (see error_handlers)
    - The service is passed in, never looked up globally
"""

import logging

from fastapi import FastAPI

from ims.application.inventory_service import InventoryService
from ims.infrastructure.config import Settings, get_settings
from ims.infrastructure.http.error_handlers import register_error_handlers
from ims.infrastructure.http.routes import build_product_router

logger = logging.getLogger(__name__)


def create_app(service: InventoryService, settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="IMS API", version="1.0.0")
    app.include_router(build_product_router(service, settings))
    register_error_handlers(app)

    logger.info("IMS API configured")
    return app
