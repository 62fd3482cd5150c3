import secrets

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func
from sqlalchemy.future import select

from app.core.config import Settings
from app.core.enums import UserRole
from app.db.session import init_db
from app.main import create_app
from app.services.auth import create_user, issue_token

API = "/api"


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def settings(tmp_path):
    # Fresh secret and database file per test.
    return Settings(
        SECRET_KEY=secrets.token_hex(32),
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def token_issuer(app):
    return app.state.token_issuer


@pytest.fixture
async def setup_db(app):
    await init_db(app.state.engine)
    yield
    await app.state.engine.dispose()


@pytest.fixture
async def db_session(app, setup_db):
    async with app.state.session_factory() as session:
        yield session


@pytest.fixture
async def test_client(app, setup_db):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


async def _make_user(app, email, password, name, role):
    async with app.state.session_factory() as session:
        return await create_user(session, email, password, name, role)


@pytest.fixture
async def admin_user(app, setup_db):
    return await _make_user(app, "admin@finance.com", "admin123", "Admin User", UserRole.ADMIN)


@pytest.fixture
async def client_user(app, setup_db):
    return await _make_user(app, "alice@example.com", "alice-pass", "Alice", UserRole.CLIENT)


@pytest.fixture
async def client_user_2(app, setup_db):
    return await _make_user(app, "bob@example.com", "bob-pass", "Bob", UserRole.CLIENT)


@pytest.fixture
def admin_token(token_issuer, admin_user):
    return issue_token(token_issuer, admin_user)


@pytest.fixture
def client_token(token_issuer, client_user):
    return issue_token(token_issuer, client_user)


@pytest.fixture
def client_token_2(token_issuer, client_user_2):
    return issue_token(token_issuer, client_user_2)


@pytest.fixture
def expired_token(token_issuer, admin_user):
    return token_issuer.issue(
        admin_user.id, admin_user.email, admin_user.name, admin_user.role, expires_minutes=-60
    )


@pytest.fixture
def valid_product_data():
    return {
        "name": "Business Loan",
        "description": "Flexible business financing solutions",
        "price": 50000.0,
        "category": "Loans",
    }


@pytest.fixture
def create_product_factory(test_client, admin_token):
    async def _create_product(name="Test Product", price=1000.0, **kwargs):
        data = {
            "name": name,
            "description": f"{name} description",
            "price": price,
            "category": "General",
        }
        data.update(kwargs)

        response = await test_client.post(
            f"{API}/products",
            json=data,
            headers=auth_headers(admin_token)
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create_product


@pytest.fixture
def submit_quote_factory(test_client):
    async def _submit_quote(token, product_id, quantity=1, **kwargs):
        data = {"product_id": product_id, "quantity": quantity}
        data.update(kwargs)

        response = await test_client.post(
            f"{API}/quote-requests",
            json=data,
            headers=auth_headers(token)
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _submit_quote


@pytest.fixture
def count_rows(app):
    async def _count(model):
        async with app.state.session_factory() as session:
            res = await session.execute(select(func.count()).select_from(model))
            return res.scalar_one()

    return _count


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "auth: marks tests related to authentication"
    )
    config.addinivalue_line(
        "markers", "crud: marks tests related to CRUD operations"
    )
    config.addinivalue_line(
        "markers", "quotes: marks tests related to quote requests"
    )
