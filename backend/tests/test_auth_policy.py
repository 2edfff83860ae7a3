"""
NexParcel Backend — Authorization Policy Tests
================================================

What:  The ROUTE_POLICY table against the routes the app actually serves,
       and the gate's 401/403 behavior over HTTP.

What we test:
    ✅ Every policy entry names a registered route (no typos, no stale rows)
    ✅ Protected routes answer 401 without a token, before validating input
    ✅ Role-restricted routes answer 403 for other roles and unknown users
    ✅ Public routes need no token
"""

import re
import uuid

import pytest

from conftest import ADMIN_EMAIL, CUSTOMER_EMAIL, DELIVERY_EMAIL
from nexparcel.auth.policy import ROUTE_POLICY, Access, required_access


def concrete_path(template: str) -> str:
    """Fill path parameters with syntactically valid values."""
    return re.sub(r"\{[^}]+\}", uuid.uuid4().hex, template)


ROLE_ROUTES = sorted(key for key, access in ROUTE_POLICY.items() if access is not Access.AUTHENTICATED)


class TestPolicyTable:

    def test_every_entry_is_a_registered_route(self, app):
        # The OpenAPI document lists every route, however routers are nested
        registered = {
            (method.upper(), path)
            for path, operations in app.openapi()["paths"].items()
            for method in operations
        }

        assert registered
        assert set(ROUTE_POLICY) - registered == set()

    def test_public_routes(self):
        for method, path in [
            ("GET", "/"),
            ("GET", "/health"),
            ("POST", "/jwt"),
            ("POST", "/users"),
            ("GET", "/deliverymen"),
            ("GET", "/home-stats"),
        ]:
            assert required_access(method, path) is None

    def test_head_follows_get(self):
        assert required_access("HEAD", "/users") is Access.ADMIN

    def test_required_roles(self):
        assert Access.AUTHENTICATED.required_role is None
        assert Access.ADMIN.required_role == "Admin"
        assert Access.DELIVERY_MEN.required_role == "Delivery Men"


class TestGate:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method, template", sorted(ROUTE_POLICY))
    async def test_no_token_is_401(self, test_client, method, template):
        response = await test_client.request(method, concrete_path(template))

        assert response.status_code == 401
        body = response.json()
        assert body["error"] == "unauthorized"
        assert body["message"] == "unauthorized access"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method, template", ROLE_ROUTES)
    async def test_customer_is_403(self, test_client, seeded, auth_headers, method, template):
        response = await test_client.request(
            method, concrete_path(template), headers=auth_headers(CUSTOMER_EMAIL)
        )

        assert response.status_code == 403
        assert response.json()["message"] == "forbidden access"

    @pytest.mark.asyncio
    async def test_unknown_user_is_403(self, test_client, auth_headers):
        response = await test_client.get("/users", headers=auth_headers("stranger@mail.com"))

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_delivery_man_cannot_use_admin_routes(self, test_client, seeded, auth_headers):
        response = await test_client.get("/users", headers=auth_headers(DELIVERY_EMAIL))

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_cannot_use_delivery_routes(self, test_client, seeded, auth_headers):
        response = await test_client.put(f"/user/{DELIVERY_EMAIL}", headers=auth_headers(ADMIN_EMAIL))

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_garbage_token_is_401(self, test_client):
        response = await test_client.get("/users", headers={"Authorization": "Bearer not.a.jwt"})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_token_without_bearer_prefix(self, test_client, seeded, auth_headers):
        token = auth_headers(ADMIN_EMAIL)["Authorization"].split(" ", 1)[1]

        response = await test_client.get("/users", headers={"Authorization": token})

        assert response.status_code == 200
