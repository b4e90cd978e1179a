"""
Mock Data API Endpoints
Seeds the store with demo catalog data (admin only, never in production)

Endpoints:
- POST /api/v1/mock/categories - Replace categories with demo ones
- POST /api/v1/mock/attributes - Replace attributes with demo ones
- POST /api/v1/mock/products   - Replace products with demo ones
- POST /api/v1/mock/reviews    - Replace reviews with demo ones
- POST /api/v1/mock/all        - All of the above, in order

Author: TM3
Date: 2025-12-02
"""
import logging

from fastapi import APIRouter, HTTPException, Query

from app.services.mock_service import MockService

logger = logging.getLogger(__name__)

router = APIRouter()


def _run(action: str, func, *args):
    try:
        result = func(*args)
    except Exception as e:
        logger.error(f"Error mocking {action}: {e}")
        raise HTTPException(status_code=500, detail=f"Error mocking {action}: {str(e)}")

    return {"status": "success", **result}


@router.post("/categories")
async def mock_categories():
    return _run("categories", MockService().mock_categories)


@router.post("/attributes")
async def mock_attributes():
    return _run("attributes", MockService().mock_attributes)


@router.post("/products")
async def mock_products(times: int = Query(50, ge=1, le=500, description="Copies of each demo product")):
    """Creates times x 8 products linked to random categories"""
    return _run("products", MockService().mock_products, times)


@router.post("/reviews")
async def mock_reviews():
    return _run("reviews", MockService().mock_reviews)


@router.post("/all")
async def mock_all(times: int = Query(50, ge=1, le=500, description="Copies of each demo product")):
    """Seeds categories, attributes, products and reviews"""
    return _run("all", MockService().mock_all, times)
