import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from leave_service.core.exceptions import StorageError
from leave_service.models.counter import Counter
from leave_service.models.record import RECORD_TABLES

logger = logging.getLogger(__name__)

ENTITY_ID = "entity_id"


class IdAllocator:
    """counters 테이블의 seq를 1씩 증가시켜 id를 발급한다 (첫 id는 1)."""

    def __init__(self, session: Session, name: str = ENTITY_ID):
        self.session = session
        self.name = name

    def next(self) -> int:
        try:
            counter = self.session.get(Counter, self.name)
            if counter is None:
                counter = Counter(name=self.name, seq=0)
                self.session.add(counter)
            counter.seq += 1
            self.session.flush()
        except SQLAlchemyError as exc:
            # 같은 id를 다시 내주느니 실패하는 편이 맞다
            logger.error("Failed to set new ID for counter %r: %s", self.name, exc)
            raise StorageError("Failed to set new ID.") from exc
        return counter.seq


def sync_counter(session: Session, name: str = ENTITY_ID) -> int:
    """
    카운터를 엔티티 테이블들에 저장된 최대 id 이상으로 올린다.
    복원/이관된 DB에서 이미 쓰인 id가 다시 발급되지 않도록 시작 시 호출.
    """
    max_id = 0
    for table in RECORD_TABLES:
        value = session.scalar(select(func.max(table.id)))
        if value is not None and value > max_id:
            max_id = value

    counter = session.get(Counter, name)
    if counter is None:
        counter = Counter(name=name, seq=max_id)
        session.add(counter)
    elif counter.seq < max_id:
        logger.warning("Counter %r behind stored ids (%d < %d), raising", name, counter.seq, max_id)
        counter.seq = max_id
    session.flush()
    return counter.seq
