import uuid
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


@pytest.fixture(autouse=True, scope="session")
def fast_hashing():
    # Minimum bcrypt cost keeps the suite quick
    from app.config import settings
    settings.bcrypt_rounds = 4


@pytest_asyncio.fixture
async def store(tmp_path):
    from app.database import build_engine, build_session_factory, create_tables
    from app.store import UserStore

    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.sqlite3'}")
    await create_tables(engine)
    yield UserStore(build_session_factory(engine))
    await engine.dispose()


@pytest_asyncio.fixture
async def client(store):
    from app.main import app

    # ASGITransport skips the lifespan, so the store is attached by hand
    app.state.store = store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    del app.state.store


@pytest_asyncio.fixture
async def registered_user(client):
    response = await client.post(
        "/signup",
        json={"username": "al", "email": "al@x.com", "password": "secret"},
    )
    assert response.status_code == 201
    return response.json()["response"]


@pytest.fixture
def add_task(store):
    from app.models.task import Task

    async def _add(user_id: str, description: str, minutes_ago: int = 0) -> str:
        task_id = str(uuid.uuid4())
        created_at = datetime.now(timezone.utc) - timedelta(minutes=minutes_ago)
        async with store.session_factory() as session:
            session.add(Task(
                id=task_id,
                user_id=user_id,
                description=description,
                created_at=created_at,
            ))
            await session.commit()
        return task_id

    return _add


@pytest.fixture
def drop_table(store):
    from sqlalchemy import text

    async def _drop(name: str) -> None:
        async with store.session_factory() as session:
            await session.execute(text(f"DROP TABLE {name}"))
            await session.commit()

    return _drop
