from app.routes.health import router as health_router
from app.routes.dashboard import router as dashboard_router
from app.routes.products import router as products_router

__all__ = [
    "health_router",
    "dashboard_router",
    "products_router",
]
