"""
Order Domain Models

Represents storefront orders: the payload a checkout sends and the
persisted order. Keys are camelCase on the wire (storefront convention),
snake_case in Python and in the database.

Author: TM3
Date: 2025-12-02
"""
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime
from decimal import Decimal


ORDER_STATUSES = ("pending", "processing", "shipped", "completed", "cancelled")

# Columns shared by the orders table and OrderInput, in INSERT order
ORDER_INPUT_COLUMNS = (
    "slug", "page_title",
    "status", "user_id", "cart",
    "total_price", "old_total_price", "total_qnt",
    "customer_name", "customer_phone", "customer_address",
    "shipping_method", "customer_comment",
)


class OrderInput(BaseModel):
    """
    Schema for creating an order from the storefront checkout

    Fields:
        slug: Page slug of the order (order page in the account area)
        page_title: Page title of the order
        status: Order status (defaults to "pending" when stored)
        user_id: Customer account, None for guest checkouts
        cart: Serialized cart (JSON string of line items)
        total_price: Final price of the cart
        old_total_price: Price before discounts
        total_qnt: Total quantity of items
        customer_*: Contact and delivery data
        shipping_method: Chosen shipping method
        customer_comment: Free-form comment from checkout
    """

    # Page fields
    slug: Optional[str] = None
    page_title: Optional[str] = None

    status: Optional[str] = Field(None, description="Order status")
    user_id: Optional[str] = Field(None, description="Customer account ID")
    cart: Optional[str] = Field(None, description="Serialized cart JSON")
    total_price: Optional[Decimal] = Field(None, description="Cart total", ge=0)
    old_total_price: Optional[Decimal] = Field(None, description="Cart total before discounts", ge=0)
    total_qnt: Optional[int] = Field(None, description="Total items quantity", ge=0)

    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    customer_address: Optional[str] = None
    shipping_method: Optional[str] = None
    customer_comment: Optional[str] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_row(self) -> tuple:
        """Values in ORDER_INPUT_COLUMNS order, status defaulted"""
        data = self.model_dump()
        if not data.get("status"):
            data["status"] = "pending"
        return tuple(data[column] for column in ORDER_INPUT_COLUMNS)


class Order(OrderInput):
    """
    Order domain model - a stored storefront order

    Fields:
        id: Internal order ID (primary key)
        created_at: When order was placed
        updated_at: When order was last updated
    """

    id: int = Field(..., description="Internal order ID")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_dict(self) -> dict:
        """Convert to camelCase dict with Decimal to float conversion"""
        data = self.model_dump(by_alias=True, mode="json")

        for field in ["totalPrice", "oldTotalPrice"]:
            if data.get(field) is not None:
                data[field] = float(data[field])

        return data


class OrderStatusUpdate(BaseModel):
    """Schema for changing order status from the admin panel"""
    status: str
