"""Resource registry: one configuration value per backend list.

The list controller is generic; everything that differs between the
product, category, customer, order and inventory pages lives here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storeadmin.domain.exceptions import ValidationError
from storeadmin.domain.model import category, customer, inventory, order, product
from storeadmin.domain.model.envelope import EnvelopeShape
from storeadmin.domain.service.client_filter import FilterSpec


class EmptyPolicy(Enum):
    """How a successful fetch that returned zero rows is presented."""

    ERROR = "ERROR"  # error banner on page 1, step back on later pages
    ERROR_KEEP_ROWS = "ERROR_KEEP_ROWS"  # error banner, rows and page info kept
    NEUTRAL = "NEUTRAL"  # plain "No <items> found." state


@dataclass(frozen=True)
class ResourceConfig:
    name: str
    singular: str
    plural: str
    path: str
    page_base: int
    default_page_size: int
    filter_spec: FilterSpec
    extra_shapes: tuple[EnvelopeShape, ...] = ()
    empty_policy: EmptyPolicy = EmptyPolicy.NEUTRAL
    # None: an unrecognized body is just an empty page.
    unrecognized_message: str | None = None
    requires_auth: bool = False
    requires_image: bool = False
    fetch_failure_message: str = ""

    def wire_page(self, page: int) -> int:
        """Translate a 1-based page number to the service's convention."""
        if self.page_base == 0:
            return max(0, page - 1)
        return page

    @property
    def empty_message(self) -> str:
        return f"No {self.plural} found. The API returned an empty result."

    @property
    def exhausted_message(self) -> str:
        return f"No more {self.plural} available on this page."

    @property
    def no_rows_message(self) -> str:
        return f"No {self.plural} found."

    @property
    def delete_prompt(self) -> str:
        return f"Are you sure you want to delete this {self.singular}?"

    def failure_message(self, action: str) -> str:
        """Fallback used when a failure carries no message of its own."""
        if action == "fetch":
            return self.fetch_failure_message or f"Failed to fetch {self.plural}"
        return f"Failed to {action} {self.singular}"


PRODUCTS = ResourceConfig(
    name="product",
    singular="product",
    plural="products",
    path="/product-service/product",
    page_base=0,
    default_page_size=100,
    filter_spec=FilterSpec(search_fields=product.search_fields),
    empty_policy=EmptyPolicy.ERROR,
    requires_image=True,
)

CATEGORIES = ResourceConfig(
    name="category",
    singular="category",
    plural="categories",
    path="/product-service/category",
    page_base=1,
    default_page_size=1000,
    filter_spec=FilterSpec(search_fields=category.search_fields),
    unrecognized_message="Failed to retrieve categories data",
)

CUSTOMERS = ResourceConfig(
    name="customer",
    singular="customer",
    plural="customers",
    path="/identity-service/identity/users",
    page_base=0,
    default_page_size=10,
    filter_spec=FilterSpec(search_fields=customer.search_fields),
    extra_shapes=(EnvelopeShape.RESULT_LIST,),
    unrecognized_message="Invalid API response format",
    requires_auth=True,
    fetch_failure_message="Failed to fetch users",
)

ORDERS = ResourceConfig(
    name="order",
    singular="order",
    plural="orders",
    path="/order-service/orders",
    page_base=0,
    default_page_size=100,
    filter_spec=FilterSpec(
        search_fields=order.search_fields,
        status_of=order.display_status,
        date_of=order.created_at,
    ),
    unrecognized_message="Invalid API response format",
)

INVENTORY = ResourceConfig(
    name="inventory",
    singular="inventory item",
    plural="inventory items",
    path="/inventory-service/inventory",
    page_base=0,
    default_page_size=100,
    filter_spec=FilterSpec(
        search_fields=inventory.search_fields,
        status_of=inventory.stock_status,
    ),
    empty_policy=EmptyPolicy.ERROR_KEEP_ROWS,
)

RESOURCES: dict[str, ResourceConfig] = {
    r.name: r for r in (PRODUCTS, CATEGORIES, CUSTOMERS, ORDERS, INVENTORY)
}


def get_resource(name: str) -> ResourceConfig:
    try:
        return RESOURCES[name]
    except KeyError:
        raise ValidationError(f"Unknown resource '{name}'") from None
