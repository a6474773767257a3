"""Unit tests for the resource registry."""

import pytest

from storeadmin.application.resources import (
    CATEGORIES,
    CUSTOMERS,
    INVENTORY,
    PRODUCTS,
    RESOURCES,
    EmptyPolicy,
    get_resource,
)
from storeadmin.domain.exceptions import ValidationError
from storeadmin.domain.model.envelope import EnvelopeShape


class TestResourceConfig:

    def test_every_resource_registered(self):
        assert set(RESOURCES) == {"product", "category", "customer", "order", "inventory"}

    def test_unknown_resource(self):
        with pytest.raises(ValidationError, match="Unknown resource"):
            get_resource("coupon")

    def test_zero_based_wire_page(self):
        assert PRODUCTS.wire_page(1) == 0
        assert PRODUCTS.wire_page(4) == 3

    def test_one_based_wire_page(self):
        assert CATEGORIES.wire_page(1) == 1
        assert CATEGORIES.wire_page(4) == 4

    def test_defaults(self):
        assert PRODUCTS.default_page_size == 100
        assert CATEGORIES.default_page_size == 1000
        assert CUSTOMERS.default_page_size == 10

    def test_customers_accept_result_list(self):
        assert EnvelopeShape.RESULT_LIST in CUSTOMERS.extra_shapes
        assert CUSTOMERS.requires_auth
        assert not PRODUCTS.requires_auth

    def test_empty_policies(self):
        assert PRODUCTS.empty_policy is EmptyPolicy.ERROR
        assert INVENTORY.empty_policy is EmptyPolicy.ERROR_KEEP_ROWS
        assert CUSTOMERS.empty_policy is EmptyPolicy.NEUTRAL

    def test_messages(self):
        assert INVENTORY.delete_prompt == "Are you sure you want to delete this inventory item?"
        assert CUSTOMERS.failure_message("fetch") == "Failed to fetch users"
        assert PRODUCTS.failure_message("fetch") == "Failed to fetch products"
        assert PRODUCTS.failure_message("delete") == "Failed to delete product"
