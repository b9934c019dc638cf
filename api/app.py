"""FastAPI application factory wiring clients, services and routes."""

import logging

from fastapi import FastAPI

from api.actions import create_actions_router
from api.data import create_data_router
from api.errors import register_error_handlers
from api.middleware import RequestIDMiddleware
from clients.postgres_client import PostgresClient
from clients.valkey_client import ValkeyClient
from core.config import AppConfig, get_config
from core.services.invoice_service import InvoiceMutationService
from core.view_cache import ViewCache
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_invoice_service(config: AppConfig) -> InvoiceMutationService:
    """Connect to Postgres and Valkey and build the invoice service."""
    postgres = PostgresClient(config.postgres_url)
    view_cache = ViewCache(ValkeyClient(config.valkey_url), ttl_seconds=config.view_cache_ttl_seconds)
    return InvoiceMutationService(
        postgres,
        view_cache,
        listing_path=config.listing_path,
        strict_not_found=config.strict_not_found,
    )


def create_app(service: InvoiceMutationService | None = None) -> FastAPI:
    """
    Build the dashboard app.

    With no service given, configuration is read from the environment and
    real clients are created.
    """
    if service is None:
        config = get_config()
        setup_logging(config.log_level)
        service = build_invoice_service(config)

    app = FastAPI(title="Invoice Dashboard")
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app)

    app.include_router(create_actions_router(service))
    app.include_router(create_data_router(service), prefix="/api")

    logger.info(f"App created (listing path {service.listing_path})")
    return app
