# app/api/__init__.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routers import artworks, carts, checkout, clients, functions, health, orders
from app.context import AppContext, init_app_context
from app.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(context: AppContext | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # inicjalizacja jawnie przy starcie, nie przy imporcie
        app.state.context = init_app_context(context)
        logger.info("Application context initialized")
        yield
        # kontekst przekazany z zewnatrz zamyka wlasciciel
        if context is None:
            app.state.context.engine.dispose()

    app = FastAPI(
        title="Art Gallery Storefront",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(artworks.router)
    app.include_router(clients.router)
    app.include_router(carts.router)
    app.include_router(checkout.router)
    app.include_router(functions.router)
    app.include_router(orders.router)

    return app
