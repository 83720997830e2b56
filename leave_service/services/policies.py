import logging
from datetime import datetime, timezone
from typing import List, Union

from leave_service.core.counters import IdAllocator
from leave_service.core.exceptions import InvalidPayload, NotFound
from leave_service.core.store import EntityStore
from leave_service.schemas.leave_type import LeaveName, LeaveType

logger = logging.getLogger(__name__)


class PolicyCatalog:
    """leave type 정의 저장소 (생성 후 변경 없음)."""

    def __init__(self, store: EntityStore[LeaveType], ids: IdAllocator):
        self.store = store
        self.ids = ids

    def create(
        self,
        name: Union[LeaveName, str],
        quota: int,
        carryover_allowed: bool = False,
    ) -> LeaveType:
        try:
            leave_name = LeaveName(name)
        except ValueError:
            allowed = ", ".join(n.value for n in LeaveName)
            raise InvalidPayload(
                f"Unknown leave type name {name!r} (expected one of {allowed})."
            ) from None
        if quota < 0:
            raise InvalidPayload("Leave type quota must not be negative.")

        leave_type = LeaveType(
            id=self.ids.next(),
            name=leave_name,
            quota=quota,
            carryover_allowed=carryover_allowed,
            created_at=datetime.now(timezone.utc),
        )
        self.store.put(leave_type.id, leave_type)
        logger.info("Created leave type %d (%s, quota=%d)", leave_type.id, leave_name.value, quota)
        return leave_type

    def get(self, leave_type_id: int) -> LeaveType:
        leave_type = self.store.get(leave_type_id)
        if leave_type is None:
            raise NotFound("Leave type not found")
        return leave_type

    def list(self) -> List[LeaveType]:
        leave_types = self.store.values()
        if not leave_types:
            raise NotFound("No leave types found")
        return leave_types
