import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.session_toucher import BackgroundSessionToucher
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.password_hasher import Argon2PasswordHasher
from src.depends import get_password_hasher, get_session_toucher, get_unit_of_work
from src.domain.entities import Account
from tests.fixtures.admin import ADMIN_PASSWORD, ADMIN_USERNAME, login
from tests.fixtures.json_loader import TestDataLoader

# Argon2id with the cheapest accepted parameters keeps the suite fast
test_hasher = Argon2PasswordHasher(time_cost=1, memory_cost=8, parallelism=1)


@pytest.fixture(autouse=True)
def app_config(monkeypatch, tmp_path):
    monkeypatch.setattr(ApplicationConfig, "DB_URI", "sqlite+aiosqlite:///")
    monkeypatch.setattr(ApplicationConfig, "DB_NAME", str(tmp_path / "test.db"))
    monkeypatch.setattr(ApplicationConfig, "SESSION_PEPPER", "integration-test-pepper")
    monkeypatch.setattr(ApplicationConfig, "ENVIRONMENT", "development")
    return ApplicationConfig


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine(app_config):
    engine = create_async_engine(app_config.database_url())
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def session_toucher(session_factory):
    toucher = BackgroundSessionToucher(session_factory)
    yield toucher
    await toucher.drain()


@pytest_asyncio.fixture
async def app(app_config, session_factory, session_toucher):
    from src.api.app import create_app

    app = create_app(app_config)

    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_password_hasher] = lambda: test_hasher
    app.dependency_overrides[get_session_toucher] = lambda: session_toucher
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_account(db_session):
    account = Account(username=ADMIN_USERNAME, password_hash=test_hasher.hash(ADMIN_PASSWORD))
    db_session.add(account)
    await db_session.commit()
    await db_session.refresh(account)
    return account


@pytest_asyncio.fixture
async def seeded(db_session, test_data):
    for page in test_data.pages():
        db_session.add(page)
    for entity in test_data.entities():
        db_session.add(entity)
    await db_session.commit()


@pytest_asyncio.fixture
async def logged_in(client, admin_account):
    """Client holding a valid admin_session cookie; yields the raw token"""
    response = await login(client)
    assert response.status_code == 200
    return response.cookies["admin_session"]
