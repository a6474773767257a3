"""Application service: report summaries.

Summaries are computed over the page the controller has loaded, like the
list views themselves; they never fetch on their own.
"""

from __future__ import annotations

from storeadmin.application.dto import (
    InventorySummary,
    SalesSummary,
    StockLevelBreakdown,
)
from storeadmin.domain.model import inventory, order
from storeadmin.domain.model.item import Item, lookup


def _amount(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def sales_summary(orders: list[Item]) -> SalesSummary:
    total = sum(_amount(lookup(o, "totalAmount")) for o in orders)
    count = len(orders)
    return SalesSummary(
        total_sales=total,
        total_orders=count,
        average_order_value=total / count if count else 0.0,
        pending_orders=sum(1 for o in orders if order.is_pending(o)),
    )


def inventory_summary(items: list[Item]) -> InventorySummary:
    breakdown = stock_level_breakdown(items)
    stock_value = sum(
        inventory.unit_price(item) * inventory.available(item) for item in items
    )
    return InventorySummary(
        total_products=len(items),
        stock_value=float(stock_value),
        low_stock_items=breakdown.low,
        out_of_stock_items=breakdown.out,
    )


def stock_level_breakdown(items: list[Item]) -> StockLevelBreakdown:
    statuses = [inventory.stock_status(item) for item in items]
    return StockLevelBreakdown(
        healthy=statuses.count(inventory.IN_STOCK),
        low=statuses.count(inventory.LOW_STOCK),
        out=statuses.count(inventory.OUT_OF_STOCK),
    )
