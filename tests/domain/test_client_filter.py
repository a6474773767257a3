"""Unit tests for the client-side filter."""

from datetime import datetime, timedelta, timezone

from storeadmin.domain.model import order, product
from storeadmin.domain.model.value_objects import FilterState
from storeadmin.domain.service.client_filter import FilterSpec, apply_filter

NOW = datetime(2024, 5, 20, 12, 0, tzinfo=timezone.utc)

PRODUCT_SPEC = FilterSpec(search_fields=product.search_fields)
ORDER_SPEC = FilterSpec(
    search_fields=order.search_fields,
    status_of=order.display_status,
    date_of=order.created_at,
)

PRODUCTS = [
    {"id": 1, "name": "Linen Shirt", "category": {"name": "Tops"}},
    {"id": 2, "name": "Denim Jeans", "category": {"name": "Bottoms"}},
    {"id": 3, "name": "Wool Scarf", "category": None},
]


def _order(order_id, status, days_ago):
    created = (NOW - timedelta(days=days_ago)).isoformat().replace("+00:00", "Z")
    return {"id": order_id, "userId": "cust", "status": status, "createdAt": created}


ORDERS = [
    _order("a", "PENDING", 0),
    _order("b", "SHIPPED", 3),
    _order("c", "DELIVERED", 20),
    _order("d", "CANCELLED", 45),
]


class TestSearch:

    def test_empty_term_returns_everything(self):
        assert apply_filter(PRODUCTS, FilterState(), PRODUCT_SPEC) == PRODUCTS

    def test_case_insensitive_substring(self):
        result = apply_filter(PRODUCTS, FilterState(search_term="SHIRT"), PRODUCT_SPEC)
        assert [p["id"] for p in result] == [1]

    def test_fields_are_or_combined(self):
        result = apply_filter(PRODUCTS, FilterState(search_term="bottoms"), PRODUCT_SPEC)
        assert [p["id"] for p in result] == [2]

    def test_missing_nested_field_does_not_crash(self):
        result = apply_filter(PRODUCTS, FilterState(search_term="scarf"), PRODUCT_SPEC)
        assert [p["id"] for p in result] == [3]

    def test_input_not_mutated(self):
        items = list(PRODUCTS)
        apply_filter(items, FilterState(search_term="zzz"), PRODUCT_SPEC)
        assert items == PRODUCTS

    def test_result_is_subset_in_order(self):
        result = apply_filter(PRODUCTS, FilterState(search_term="n"), PRODUCT_SPEC)
        assert [p["id"] for p in result] == [1, 2]


class TestStatusAndDate:

    def test_status_matches_display_label_case_insensitively(self):
        state = FilterState(status_filter="shipped")
        result = apply_filter(ORDERS, state, ORDER_SPEC, now=NOW)
        assert [o["id"] for o in result] == ["b"]

    def test_all_means_no_restriction(self):
        state = FilterState(status_filter="all", date_range_filter="all")
        assert apply_filter(ORDERS, state, ORDER_SPEC, now=NOW) == ORDERS

    def test_today(self):
        state = FilterState(date_range_filter="today")
        assert [o["id"] for o in apply_filter(ORDERS, state, ORDER_SPEC, now=NOW)] == ["a"]

    def test_week(self):
        state = FilterState(date_range_filter="week")
        assert [o["id"] for o in apply_filter(ORDERS, state, ORDER_SPEC, now=NOW)] == ["a", "b"]

    def test_month(self):
        state = FilterState(date_range_filter="month")
        result = apply_filter(ORDERS, state, ORDER_SPEC, now=NOW)
        assert [o["id"] for o in result] == ["a", "b", "c"]

    def test_missing_date_excluded_from_range(self):
        items = ORDERS + [{"id": "e", "status": "PENDING"}]
        state = FilterState(date_range_filter="week")
        result = apply_filter(items, state, ORDER_SPEC, now=NOW)
        assert "e" not in [o["id"] for o in result]

    def test_filters_are_and_combined(self):
        state = FilterState(search_term="a", status_filter="Processing", date_range_filter="week")
        result = apply_filter(ORDERS, state, ORDER_SPEC, now=NOW)
        assert [o["id"] for o in result] == ["a"]

    def test_status_ignored_when_resource_has_no_status(self):
        state = FilterState(status_filter="Shipped")
        assert apply_filter(PRODUCTS, state, PRODUCT_SPEC) == PRODUCTS


class TestFilterState:

    def test_clear(self):
        state = FilterState("x", "Shipped", "week")
        state.clear()
        assert state == FilterState()
        assert not state.has_status
        assert not state.has_date_range
