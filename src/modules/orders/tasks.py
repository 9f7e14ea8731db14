"""Celery tasks for the orders module."""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from celery import shared_task
from django.utils import timezone

from modules.orders.services import build_order_service

logger = structlog.get_logger(__name__)


@shared_task(name="orders.build_delivery_manifest")
def build_delivery_manifest(target_date: Optional[str] = None) -> Dict[str, Any]:
    """Resolve the delivery list for ``target_date`` (``yyyy-MM-dd``, default today).

    Scheduled every morning by Celery beat; the return value is the
    manifest handed to the delivery round.
    """
    target = target_date or timezone.localdate().isoformat()
    orders = build_order_service().get_orders_for_delivery_date(target)
    manifest = {
        "date": target,
        "count": len(orders),
        "orders": [
            {
                "order_number": order.order_number,
                "customer_name": order.customer_name,
                "customer_address_line1": order.customer_address_line1,
                "customer_city": order.customer_city,
                "status": order.status,
                "items": [
                    {
                        "product_name": item.product_name,
                        "quantity_per_day": item.quantity_per_day,
                    }
                    for item in order.items.all()
                ],
            }
            for order in orders
        ],
    }
    logger.info("orders.delivery_manifest_built", date=target, count=len(orders))
    return manifest
