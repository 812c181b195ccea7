"""
Dashboard API Routes (mock data)
These endpoints return fixed sample payloads and never touch the database.
"""

from fastapi import APIRouter

router = APIRouter(tags=["dashboard"])

STATISTICS = {
    "users": 46,
    "products": 123,
    "sales": 67,
    "profit": 23000,
}

SALES = [
    {"x": 50, "y": 7},
    {"x": 60, "y": 8},
    {"x": 70, "y": 8},
    {"x": 80, "y": 9},
    {"x": 90, "y": 9},
    {"x": 100, "y": 9},
    {"x": 110, "y": 10},
    {"x": 120, "y": 11},
    {"x": 130, "y": 14},
    {"x": 140, "y": 14},
    {"x": 150, "y": 15},
]

VISITORS = {
    "day": [1, 2, 3, 4, 5, 6, 7, 8, 9, 10],
    "count": [3, 6, 10, 2, 32, 19, 9, 8, 16, 7],
}

TOP_PRODUCTS = {
    "product": ["Iphone 16", "JBL c15", "Dell XPS 16", "Pixel 8 pro", "LG G8"],
    "count": [3, 6, 10, 2, 32],
}

SOLD_PRODUCTS = {
    "category": ["Phones", "Headphones", "Laptops", "Chargers", "TVs"],
    "count": [23, 67, 12, 60, 15],
}


@router.get("/statistics")
def get_statistics():
    """Headline counters for the dashboard."""
    return STATISTICS


@router.get("/sales")
def get_sales():
    """XY series for the sales chart."""
    return SALES


@router.get("/visitors")
def get_visitors():
    """Daily visitor counts."""
    return VISITORS


@router.get("/top_products")
def get_top_products():
    return TOP_PRODUCTS


@router.get("/sold_products")
def get_sold_products():
    return SOLD_PRODUCTS
