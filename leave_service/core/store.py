import logging
from typing import Generic, Iterator, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from leave_service.core.exceptions import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class EntityStore(Generic[T]):
    """
    id -> record 형태의 durable map.

    record는 pydantic 모델이고, 테이블의 ``payload`` 컬럼에
    JSON bytes로 저장된다. 인코딩 크기는 ``max_size`` 이하여야 한다.
    인코딩/디코딩/저장 실패는 모두 StorageError (복구 불가능한 내부 오류).
    """

    def __init__(
        self,
        session: Session,
        table: type,
        schema: Type[T],
        max_size: int = 1024,
    ):
        self.session = session
        self.table = table
        self.schema = schema
        self.max_size = max_size

    def _dump(self, record: T) -> bytes:
        try:
            return record.model_dump_json().encode("utf-8")
        except ValueError as exc:
            raise StorageError(f"Cannot encode {self.schema.__name__}: {exc}") from exc

    def fits(self, record: T) -> bool:
        """인코딩 크기가 max_size 이하인지. 클라이언트 입력 검증용."""
        return len(self._dump(record)) <= self.max_size

    def _encode(self, record: T) -> bytes:
        data = self._dump(record)
        if len(data) > self.max_size:
            raise StorageError(
                f"{self.schema.__name__} encoding is {len(data)} bytes "
                f"(max {self.max_size})"
            )
        return data

    def _decode(self, payload: bytes) -> T:
        try:
            return self.schema.model_validate_json(payload)
        except ValidationError as exc:
            raise StorageError(f"Cannot decode {self.schema.__name__}: {exc}") from exc

    def _flush(self) -> None:
        try:
            self.session.flush()
        except SQLAlchemyError as exc:
            logger.error("Failed to persist %s: %s", self.table.__tablename__, exc)
            raise StorageError(f"Failed to persist {self.table.__tablename__}") from exc

    def put(self, id: int, record: T) -> None:
        self.session.merge(self.table(id=id, payload=self._encode(record)))
        self._flush()

    def get(self, id: int) -> Optional[T]:
        row = self.session.get(self.table, id)
        if row is None:
            return None
        return self._decode(row.payload)

    def delete(self, id: int) -> None:
        row = self.session.get(self.table, id)
        if row is None:
            return
        self.session.delete(row)
        self._flush()

    def iterate(self) -> Iterator[Tuple[int, T]]:
        # 호출 시점의 상태를 id 오름차순으로 읽는다
        stmt = select(self.table).order_by(self.table.id)
        for row in self.session.scalars(stmt):
            yield row.id, self._decode(row.payload)

    def values(self) -> List[T]:
        return [record for _, record in self.iterate()]

    def __contains__(self, id: int) -> bool:
        return self.session.get(self.table, id) is not None

    def __len__(self) -> int:
        return self.session.scalar(select(func.count()).select_from(self.table))
