import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.config import load_settings
from app.errors import ProductAPIError, product_api_error_handler
from app.routes import (
    health_router,
    dashboard_router,
    products_router,
)
from app.store import ProductStore

logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = ["Origin", "X-Requested-With", "Content-Type", "Accept"]


def create_app(store: Optional[ProductStore] = None) -> FastAPI:
    """
    Build the API application.
    When no store is given, one is opened at the configured path on startup
    and closed on shutdown; a supplied store is left for the caller to close.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if store is not None:
            app.state.store = store
            yield
            return

        settings = load_settings()
        owned_store = ProductStore(settings.database_path)
        owned_store.initialize()
        app.state.store = owned_store
        try:
            yield
        finally:
            owned_store.close()

    app = FastAPI(title="Dashboard Products API", version="1.0.0", lifespan=lifespan)
    if store is not None:
        app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=CORS_ALLOW_HEADERS,
    )
    app.add_exception_handler(ProductAPIError, product_api_error_handler)

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        # Set on every response, with or without an Origin header
        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Headers"] = ", ".join(CORS_ALLOW_HEADERS)
        return response

    # Register routers
    app.include_router(health_router)
    app.include_router(dashboard_router)
    app.include_router(products_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = load_settings()
    logging.basicConfig(level=logging.INFO)
    logger.info("server started, listening at port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
