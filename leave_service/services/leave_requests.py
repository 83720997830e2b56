"""
Leave request 상태 머신.

approve는 Approved를 제외한 모든 상태에서, reject는 Rejected를 제외한
모든 상태에서 가능하다. accrue는 Approved에서만, cancel은 Pending/Rejected에서만
가능하다. cancel은 상태를 바꾸는 대신 레코드를 삭제한다.

approve와 accrue는 각각 leave type의 quota만큼 잔여 일수를 차감한다
(같은 요청에 대해 두 번 차감됨, 둘 다 0에서 멈춤).
"""
import logging
from datetime import datetime, timezone
from typing import Dict, FrozenSet, List

from leave_service.core.counters import IdAllocator
from leave_service.core.exceptions import Conflict, InvalidPayload, NotFound
from leave_service.core.store import EntityStore
from leave_service.schemas.leave_request import MAX_REASON_LENGTH, LeaveRequest, LeaveStatus
from leave_service.services.employees import EmployeeLedger
from leave_service.services.policies import PolicyCatalog

logger = logging.getLogger(__name__)

# op -> 허용되는 현재 상태
TRANSITIONS: Dict[str, FrozenSet[LeaveStatus]] = {
    "approve": frozenset({
        LeaveStatus.PENDING,
        LeaveStatus.REJECTED,
        LeaveStatus.ACCRUED,
        LeaveStatus.CANCELED,
    }),
    "reject": frozenset({
        LeaveStatus.PENDING,
        LeaveStatus.APPROVED,
        LeaveStatus.ACCRUED,
        LeaveStatus.CANCELED,
    }),
    "accrue": frozenset({LeaveStatus.APPROVED}),
    "cancel": frozenset({LeaveStatus.PENDING, LeaveStatus.REJECTED}),
}

CONFLICT_MESSAGES = {
    ("approve", LeaveStatus.APPROVED): "Leave request is already approved.",
    ("reject", LeaveStatus.REJECTED): "Leave request is already rejected.",
    ("accrue", LeaveStatus.PENDING): "Only approved leave requests can be accrued.",
    ("accrue", LeaveStatus.ACCRUED): "Leave request is already accrued.",
    ("cancel", LeaveStatus.APPROVED): "Cannot cancel an approved leave request.",
}


class LeaveRequestMachine:
    def __init__(
        self,
        store: EntityStore[LeaveRequest],
        ids: IdAllocator,
        ledger: EmployeeLedger,
        policies: PolicyCatalog,
    ):
        self.store = store
        self.ids = ids
        self.ledger = ledger
        self.policies = policies

    def _guard(self, op: str, request: LeaveRequest) -> None:
        if request.status not in TRANSITIONS[op]:
            message = CONFLICT_MESSAGES.get(
                (op, request.status),
                f"Cannot {op} a leave request that is {request.status.value}.",
            )
            raise Conflict(message)

    def _set_status(self, request: LeaveRequest, status: LeaveStatus) -> LeaveRequest:
        updated = request.model_copy(update={"status": status})
        self.store.put(updated.id, updated)
        logger.info("Leave request %d: %s -> %s", request.id, request.status.value, status.value)
        return updated

    def _debit(self, request: LeaveRequest) -> None:
        # 직원과 leave type을 모두 찾은 뒤에만 쓴다
        employee = self.ledger.get(request.employee_id)
        leave_type = self.policies.get(request.leave_type_id)
        self.ledger.debit(employee, leave_type.name, leave_type.quota)

    def create(
        self,
        employee_id: int,
        leave_type_id: int,
        start_date: int,
        end_date: int,
        reason: str,
    ) -> LeaveRequest:
        if not reason or not reason.strip():
            raise InvalidPayload("Ensure 'reason' is provided.")
        if len(reason) > MAX_REASON_LENGTH:
            raise InvalidPayload(f"'reason' must be at most {MAX_REASON_LENGTH} characters.")
        self.ledger.get(employee_id)
        self.policies.get(leave_type_id)

        request = LeaveRequest(
            id=self.ids.next(),
            employee_id=employee_id,
            leave_type_id=leave_type_id,
            start_date=start_date,
            end_date=end_date,
            status=LeaveStatus.PENDING,
            reason=reason,
            created_at=datetime.now(timezone.utc),
        )
        if not self.store.fits(request):
            # 멀티바이트 문자로 길이 제한 안에서도 넘칠 수 있음
            raise InvalidPayload("Leave request is too large; shorten 'reason'.")
        self.store.put(request.id, request)
        logger.info("Created leave request %d for employee %d", request.id, employee_id)
        return request

    def get(self, request_id: int) -> LeaveRequest:
        request = self.store.get(request_id)
        if request is None:
            raise NotFound("Leave request not found")
        return request

    def list(self) -> List[LeaveRequest]:
        requests = self.store.values()
        if not requests:
            raise NotFound("No leave requests found")
        return requests

    def history(self, employee_id: int) -> List[LeaveRequest]:
        self.ledger.get(employee_id)
        requests = [
            request for request in self.store.values()
            if request.employee_id == employee_id
        ]
        if not requests:
            raise NotFound("No leave requests found")
        return requests

    def approve(self, request_id: int) -> LeaveRequest:
        request = self.get(request_id)
        self._guard("approve", request)
        self._debit(request)
        return self._set_status(request, LeaveStatus.APPROVED)

    def reject(self, request_id: int) -> LeaveRequest:
        request = self.get(request_id)
        self._guard("reject", request)
        return self._set_status(request, LeaveStatus.REJECTED)

    def accrue(self, request_id: int) -> LeaveRequest:
        request = self.get(request_id)
        self._guard("accrue", request)
        self._debit(request)
        return self._set_status(request, LeaveStatus.ACCRUED)

    def cancel(self, request_id: int) -> None:
        request = self.get(request_id)
        self._guard("cancel", request)
        self.store.delete(request_id)
        logger.info("Canceled leave request %d (removed)", request_id)
