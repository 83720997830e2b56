import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from leave_service.core.db import get_db, init_db
from leave_service.main import app
from leave_service.services.context import ServiceContext


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads (tests only)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, expire_on_commit=False, autoflush=False, class_=Session)


@pytest.fixture
def session(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def ctx(session):
    return ServiceContext(session)


@pytest.fixture
def employee(ctx):
    return ctx.create_employee("Alice Smith")


@pytest.fixture
def annual(ctx):
    return ctx.create_leave_type("Annual", 5, True)


@pytest.fixture
def client(session_factory):
    async def override_get_db():
        with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    # startup 이벤트(파일 DB 초기화)를 돌리지 않도록 context manager 없이 사용
    yield TestClient(app)
    app.dependency_overrides.clear()
