import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from leave_service.core.config import settings

logger = logging.getLogger(__name__)


def make_engine(url: str, echo: bool = False) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # TestClient/uvicorn이 다른 스레드에서 세션을 열 수 있음
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=echo, connect_args=connect_args)


# SQLAlchemy Engine
engine = make_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)

# 세션 팩토리
SessionLocal = sessionmaker(
    bind=engine,
    expire_on_commit=False,
    autoflush=False,
    class_=Session,
)

# Base 클래스 (모든 모델의 부모)
Base = declarative_base()


# FastAPI 의존성 주입용 세션
async def get_db() -> Session:
    with SessionLocal() as session:
        try:
            yield session
        finally:
            session.close()


def init_db(bind: Engine = engine) -> None:
    """
    애플리케이션 시작 시 한 번 호출해서
    employees / leave_types / leave_requests / counters 테이블을 생성하고,
    카운터를 이미 저장된 최대 id 이상으로 맞춘다.
    """
    from leave_service.core.counters import sync_counter
    from leave_service.models import counter, record  # noqa: F401

    Base.metadata.create_all(bind=bind)

    with Session(bind=bind) as session:
        seq = sync_counter(session)
        session.commit()
    logger.info("Database initialized (entity_id counter at %d)", seq)
