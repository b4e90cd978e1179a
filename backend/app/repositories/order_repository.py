"""
Order Repository - Data Access Layer for Orders

Handles all database queries for storefront orders and returns Order
domain models.

Author: TM3
Date: 2025-12-02
"""
import logging
from typing import List, Optional, Tuple, Dict, Any

from app.domain.order import Order, OrderInput, ORDER_INPUT_COLUMNS
from app.core.database import get_db_connection_dict

logger = logging.getLogger(__name__)

ORDER_COLUMNS = ", ".join(("id",) + ORDER_INPUT_COLUMNS + ("created_at", "updated_at"))


class OrderRepository:
    """
    Repository for Order data access

    All SQL queries for orders are centralized here.
    """

    def create(self, order_input: OrderInput) -> Order:
        """
        Insert a new order

        Args:
            order_input: Checkout payload

        Returns:
            Stored Order (with id and timestamps)
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            placeholders = ", ".join(["%s"] * len(ORDER_INPUT_COLUMNS))
            cursor.execute(f"""
                INSERT INTO orders ({", ".join(ORDER_INPUT_COLUMNS)})
                VALUES ({placeholders})
                RETURNING {ORDER_COLUMNS}
            """, order_input.to_row())

            row = cursor.fetchone()
            conn.commit()

            order = Order(**dict(row))
            logger.info(f"Order {order.id} created ({order.total_qnt} items, total {order.total_price})")
            return order

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def find_by_id(self, order_id: int) -> Optional[Order]:
        """
        Find order by ID

        Returns:
            Order or None if not found
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {ORDER_COLUMNS}
                FROM orders
                WHERE id = %s
            """, (order_id,))

            row = cursor.fetchone()
            if not row:
                return None

            return Order(**dict(row))

        finally:
            cursor.close()
            conn.close()

    def find_all(
        self,
        status: Optional[str] = None,
        user_id: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 50,
        offset: int = 0
    ) -> Tuple[List[Order], int]:
        """
        Find orders with filters

        Args:
            status: Filter by order status
            user_id: Filter by customer account
            search: Search by customer name, phone, or address
            limit: Maximum results to return
            offset: Number of results to skip

        Returns:
            Tuple of (list of orders, total count)
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            # Build WHERE clause
            conditions = []
            params: List[Any] = []

            if status:
                conditions.append("status = %s")
                params.append(status)

            if user_id:
                conditions.append("user_id = %s")
                params.append(user_id)

            if search:
                conditions.append("""(
                    customer_name ILIKE %s OR
                    customer_phone ILIKE %s OR
                    customer_address ILIKE %s
                )""")
                search_param = f"%{search}%"
                params.extend([search_param, search_param, search_param])

            where_clause = " AND ".join(conditions) if conditions else "1=1"

            # Get total count
            cursor.execute(f"""
                SELECT COUNT(*) as total
                FROM orders
                WHERE {where_clause}
            """, params)
            total = cursor.fetchone()['total']

            cursor.execute(f"""
                SELECT {ORDER_COLUMNS}
                FROM orders
                WHERE {where_clause}
                ORDER BY created_at DESC, id DESC
                LIMIT %s OFFSET %s
            """, params + [limit, offset])

            orders = [Order(**dict(row)) for row in cursor.fetchall()]
            return orders, total

        finally:
            cursor.close()
            conn.close()

    def update_status(self, order_id: int, status: str) -> Optional[Order]:
        """
        Change order status

        Returns:
            Updated Order or None if not found
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                UPDATE orders
                SET status = %s, updated_at = NOW()
                WHERE id = %s
                RETURNING {ORDER_COLUMNS}
            """, (status, order_id))

            row = cursor.fetchone()
            if not row:
                conn.rollback()
                return None

            conn.commit()
            return Order(**dict(row))

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def delete(self, order_id: int) -> Dict[str, Any]:
        """
        Delete an order

        Returns:
            Result dict with success status
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                DELETE FROM orders
                WHERE id = %s
                RETURNING id
            """, (order_id,))

            result = cursor.fetchone()
            if not result:
                return {
                    'success': False,
                    'error': 'Order not found'
                }

            conn.commit()
            return {'success': True}

        except Exception as e:
            conn.rollback()
            logger.error(f"Error deleting order {order_id}: {e}")
            return {
                'success': False,
                'error': str(e)
            }

        finally:
            cursor.close()
            conn.close()
