"""
Orders API Endpoints
Handles storefront checkout and order management

Author: TM3
Date: 2025-12-02
"""
from fastapi import APIRouter, HTTPException, Query
from typing import Optional

from app.domain.order import OrderInput, OrderStatusUpdate, ORDER_STATUSES
from app.repositories.order_repository import OrderRepository

router = APIRouter()


@router.post("/", status_code=201)
async def create_order(order_input: OrderInput):
    """
    Place an order from the storefront checkout

    Status defaults to "pending".
    """
    if order_input.status and order_input.status not in ORDER_STATUSES:
        raise HTTPException(status_code=400, detail=f"Invalid status: {order_input.status}")

    try:
        repo = OrderRepository()
        order = repo.create(order_input)

        return {
            "status": "success",
            "data": order.to_dict()
        }

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error creating order: {str(e)}")


@router.get("/")
async def get_orders(
    status: Optional[str] = Query(None, description="Filter by order status"),
    user_id: Optional[str] = Query(None, alias="userId", description="Filter by customer account"),
    search: Optional[str] = Query(None, description="Search by customer name, phone or address"),
    limit: int = Query(50, ge=1, le=1000),
    offset: int = Query(0, ge=0)
):
    """
    Get all orders with optional filters (admin panel list)
    """
    try:
        repo = OrderRepository()

        orders, total = repo.find_all(
            status=status,
            user_id=user_id,
            search=search,
            limit=limit,
            offset=offset
        )

        return {
            "status": "success",
            "total": total,
            "limit": limit,
            "offset": offset,
            "count": len(orders),
            "data": [order.to_dict() for order in orders]
        }

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching orders: {str(e)}")


@router.get("/{order_id}")
async def get_order(order_id: int):
    """Get a single order"""
    try:
        repo = OrderRepository()
        order = repo.find_by_id(order_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching order: {str(e)}")

    if not order:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")

    return {
        "status": "success",
        "data": order.to_dict()
    }


@router.patch("/{order_id}/status")
async def update_order_status(order_id: int, update: OrderStatusUpdate):
    """Change order status"""
    if update.status not in ORDER_STATUSES:
        raise HTTPException(status_code=400, detail=f"Invalid status: {update.status}")

    try:
        repo = OrderRepository()
        order = repo.update_status(order_id, update.status)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error updating order: {str(e)}")

    if not order:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")

    return {
        "status": "success",
        "data": order.to_dict()
    }


@router.delete("/{order_id}")
async def delete_order(order_id: int):
    """Delete an order"""
    repo = OrderRepository()
    result = repo.delete(order_id)

    if not result['success']:
        status_code = 404 if result.get('error') == 'Order not found' else 500
        raise HTTPException(status_code=status_code, detail=result['error'])

    return {"status": "success", "message": f"Order {order_id} deleted"}
