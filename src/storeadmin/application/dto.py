"""Data Transfer Objects — plain containers that cross layer boundaries.

Report summaries are computed in the application layer and rendered by
the CLI without exposing raw backend items.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SalesSummary:
    """Totals over the orders currently loaded."""

    total_sales: float
    total_orders: int
    average_order_value: float
    pending_orders: int


@dataclass(frozen=True)
class InventorySummary:
    """Stock health over the inventory items currently loaded."""

    total_products: int
    stock_value: float
    low_stock_items: int
    out_of_stock_items: int


@dataclass(frozen=True)
class StockLevelBreakdown:
    healthy: int
    low: int
    out: int
