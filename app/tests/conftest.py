"""
This module contains fixtures and test utilities for the application.

Every test gets its own SQLite database file in a temporary directory. It
provides a session on that database, a client for the FastAPI app using the
same database, and a couple of seeded authors (an admin and a regular user)
with their authorization headers.
"""
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.core.db import DatabaseSessionManager, get_async_db
from app.core.security import generate_token, hash_password
from app.db_objects.author import get_role, save_author
from app.db_objects.db_models import Author, Email, Heading
from app.main import app

PASSWORD = "Str0ngP@ssword!"


@pytest_asyncio.fixture
async def sessionmanager(tmp_path):
    """Provides a session manager bound to a fresh SQLite database."""
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", {"echo": False})
    await manager.init()
    yield manager
    await manager.close()


@pytest_asyncio.fixture
async def db(sessionmanager):
    """Provides a database session for the DAO and service tests."""
    async with sessionmanager.session() as session:
        yield session


@pytest_asyncio.fixture
async def client(sessionmanager):
    """Provides a client for the FastAPI app, using the test database."""
    async def _get_test_db():
        async with sessionmanager.session() as session:
            yield session

    app.dependency_overrides[get_async_db] = _get_test_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as test_client:
        yield test_client
    app.dependency_overrides.clear()


async def _create_author(db, name: str, roles: list[str], email: str) -> Author:
    db_author = Author(
        name=name,
        password=hash_password(PASSWORD),
        emails=[Email(email=email)],
        roles=[await get_role(db, role) for role in roles],
    )
    await save_author(db, db_author)
    await db.commit()
    return db_author


@pytest_asyncio.fixture
async def admin(db):
    """An author with the admin role."""
    return await _create_author(db, "admin", ["admin", "user"], "admin@example.com")


@pytest_asyncio.fixture
async def author(db):
    """An author with the default role."""
    return await _create_author(db, "alice", ["user"], "alice@example.com")


@pytest_asyncio.fixture
async def other_author(db):
    """Another author with the default role."""
    return await _create_author(db, "bob", ["user"], "bob@example.com")


@pytest_asyncio.fixture
async def heading(db):
    """A heading to publish announcements under."""
    db_heading = Heading(name="Vehicles")
    db.add(db_heading)
    await db.commit()
    return db_heading


def _auth_header(db_author: Author) -> dict[str, str]:
    return {"Authorization": str(generate_token(db_author.name))}


@pytest.fixture
def admin_headers(admin):
    """Authorization header of the admin."""
    return _auth_header(admin)


@pytest.fixture
def author_headers(author):
    """Authorization header of the regular author."""
    return _auth_header(author)


@pytest.fixture
def other_headers(other_author):
    """Authorization header of the other regular author."""
    return _auth_header(other_author)


@pytest.fixture
def mock_send_email(mocker):
    """Patches the notification email sent when a suitable ad matches."""
    return mocker.patch(
        "app.db_objects.suitable_ad.send_announcement_email",
        new_callable=mocker.AsyncMock,
        return_value=True,
    )
