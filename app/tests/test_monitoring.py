import pytest

from app.db.seed import SAMPLE_PRODUCTS, ensure_default_admin, seed_sample_products
from app.models.product import Product
from app.services.auth import get_user_by_email


class TestMonitoring:

    async def test_health_endpoint(self, test_client):
        response = await test_client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["dependencies"]["database"] == "connected"

    async def test_metrics_endpoint(self, test_client, client_token):
        await test_client.get("/api/products", headers={"Authorization": f"Bearer {client_token}"})
        response = await test_client.get("/metrics")
        assert response.status_code == 200
        assert "http_requests_total" in response.text
        assert "db_operations_total" in response.text

    async def test_metrics_label_uses_route_template(self, test_client, client_token):
        await test_client.get("/api/products/424242", headers={"Authorization": f"Bearer {client_token}"})
        response = await test_client.get("/metrics")
        assert 'endpoint="/api/products/{product_id}"' in response.text
        assert 'endpoint="/api/products/424242"' not in response.text

    async def test_unmatched_paths_share_one_label(self, test_client):
        await test_client.get("/no/such/path/1")
        await test_client.get("/no/such/path/2")
        response = await test_client.get("/metrics")
        assert 'endpoint="<unmatched>"' in response.text
        assert "/no/such/path" not in response.text

    async def test_root(self, test_client):
        response = await test_client.get("/")
        assert response.status_code == 200
        assert response.json()["health"] == "/health"

    async def test_unknown_route_uses_error_shape(self, test_client):
        response = await test_client.get("/api/nothing-here")
        assert response.status_code == 404
        assert "error" in response.json()


class TestSeeding:

    async def test_default_admin_created_once(self, db_session, settings):
        settings.ADMIN_PASSWORD = "bootstrap-pass"
        assert await ensure_default_admin(db_session, settings) is True
        assert await ensure_default_admin(db_session, settings) is False

        admin = await get_user_by_email(db_session, settings.ADMIN_EMAIL)
        assert admin.role == "admin"

    async def test_default_admin_skipped_without_password(self, db_session, settings):
        assert await ensure_default_admin(db_session, settings) is False
        assert await get_user_by_email(db_session, settings.ADMIN_EMAIL) is None

    async def test_sample_products_only_seed_empty_catalog(self, db_session, count_rows):
        assert await seed_sample_products(db_session) == len(SAMPLE_PRODUCTS)
        assert await seed_sample_products(db_session) == 0
        assert await count_rows(Product) == len(SAMPLE_PRODUCTS)
