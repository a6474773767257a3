"""Tests for the HTTP resource gateway."""

import httpx
import pytest

from storeadmin.application.resources import CATEGORIES, CUSTOMERS, ORDERS, PRODUCTS
from storeadmin.infrastructure.http.api_client import ApiClient
from storeadmin.infrastructure.http.http_resource_gateway import HttpResourceGateway


class Recorder:

    def __init__(self, response=None):
        self.requests = []
        self.response = response if response is not None else httpx.Response(200, json=[])

    def __call__(self, request):
        self.requests.append(request)
        return self.response

    @property
    def last(self):
        return self.requests[-1]


def _gateway(resource, recorder, token=None):
    client = ApiClient("http://api.test/api", transport=httpx.MockTransport(recorder))
    return HttpResourceGateway(client, resource, credentials=lambda: token)


class TestFetchPage:

    @pytest.mark.asyncio
    async def test_zero_based_service(self):
        recorder = Recorder()
        await _gateway(PRODUCTS, recorder).fetch_page(1, 100)

        request = recorder.last
        assert request.method == "GET"
        assert request.url.path == "/api/product-service/product"
        assert request.url.params["page"] == "0"
        assert request.url.params["size"] == "100"

    @pytest.mark.asyncio
    async def test_one_based_service(self):
        recorder = Recorder()
        await _gateway(CATEGORIES, recorder).fetch_page(2, 1000)
        assert recorder.last.url.params["page"] == "2"

    @pytest.mark.asyncio
    async def test_server_filter_passed_through(self):
        recorder = Recorder()
        await _gateway(ORDERS, recorder).fetch_page(1, 10, server_filter="PENDING")
        assert recorder.last.url.params["filter"] == "PENDING"

    @pytest.mark.asyncio
    async def test_returns_raw_body(self):
        recorder = Recorder(httpx.Response(200, json={"result": [{"id": "u1"}]}))
        body = await _gateway(CUSTOMERS, recorder, token="t").fetch_page(1, 10)
        assert body == {"result": [{"id": "u1"}]}


class TestAuth:

    @pytest.mark.asyncio
    async def test_bearer_sent_for_identity_service(self):
        recorder = Recorder()
        await _gateway(CUSTOMERS, recorder, token="secret").fetch_page(1, 10)
        assert recorder.last.headers["authorization"] == "Bearer secret"

    @pytest.mark.asyncio
    async def test_no_header_without_token(self):
        recorder = Recorder()
        await _gateway(CUSTOMERS, recorder, token=None).fetch_page(1, 10)
        assert "authorization" not in recorder.last.headers

    @pytest.mark.asyncio
    async def test_no_header_for_public_services(self):
        recorder = Recorder()
        await _gateway(PRODUCTS, recorder, token="secret").fetch_page(1, 10)
        assert "authorization" not in recorder.last.headers


class TestMutations:

    @pytest.mark.asyncio
    async def test_create_applies_placeholder_for_products(self):
        recorder = Recorder(httpx.Response(201, json={"id": 1}))
        await _gateway(PRODUCTS, recorder).create({"name": "Tee"})
        assert b"placehold.co" in recorder.last.content

    @pytest.mark.asyncio
    async def test_update_path(self):
        recorder = Recorder(httpx.Response(200, json={}))
        await _gateway(CATEGORIES, recorder).update(5, {"name": "x"})
        assert recorder.last.method == "PUT"
        assert recorder.last.url.path == "/api/product-service/category/5"

    @pytest.mark.asyncio
    async def test_patch_path(self):
        recorder = Recorder(httpx.Response(200, json={}))
        await _gateway(ORDERS, recorder).patch("o1", "payment-status", {"paymentStatus": "PAID"})
        assert recorder.last.method == "PATCH"
        assert recorder.last.url.path == "/api/order-service/orders/o1/payment-status"

    @pytest.mark.asyncio
    async def test_delete_sends_bearer_for_customers(self):
        recorder = Recorder(httpx.Response(204))
        await _gateway(CUSTOMERS, recorder, token="secret").delete("u1")
        assert recorder.last.method == "DELETE"
        assert recorder.last.url.path == "/api/identity-service/identity/users/u1"
        assert recorder.last.headers["authorization"] == "Bearer secret"
