from datetime import timedelta

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.password_hasher import PasswordHasher
from src.depends import get_password_hasher, get_unit_of_work
from src.domain.entities import UserRole
from tests.fixtures.factories import DEFAULT_PASSWORD, make_session, make_user


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_password_hasher] = lambda: PasswordHasher(rounds=4)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def seed_user(db_session):
    """Insert a user with DEFAULT_PASSWORD and return it."""

    async def _seed(role: UserRole, email=None, name: str = "Test User"):
        user = make_user(role=role, email=email, name=name)
        db_session.add(user)
        await db_session.commit()
        # Detached so later request rollbacks do not expire it
        db_session.expunge(user)
        return user

    return _seed


@pytest_asyncio.fixture
async def login(client):
    """Log in through the API and return the access token."""

    async def _login(email: str, password: str = DEFAULT_PASSWORD) -> str:
        response = await client.post(
            "/auth/login", json={"email": email, "password": password}
        )
        assert response.status_code == 200, response.text
        return response.json()["access_token"]

    return _login


@pytest_asyncio.fixture
async def auth_headers(seed_user, login):
    """Seed a user of the given role, log in, and return Authorization headers."""

    async def _headers(role: UserRole):
        user = await seed_user(role)
        token = await login(user.email)
        return {"Authorization": f"Bearer {token}"}, user

    return _headers


@pytest_asyncio.fixture
async def store_session(db_session):
    """Insert a session row directly, bypassing login."""

    async def _store(user, expires_in: timedelta = timedelta(hours=24), revoked: bool = False):
        session = make_session(user, expires_in=expires_in, revoked=revoked)
        db_session.add(session)
        await db_session.commit()
        db_session.expunge(session)
        return session

    return _store
