import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from leave_service.core.config import Settings, settings as default_settings
from leave_service.core.counters import IdAllocator
from leave_service.core.exceptions import StorageError
from leave_service.core.store import EntityStore
from leave_service.models.record import EmployeeRecord, LeaveRequestRecord, LeaveTypeRecord
from leave_service.schemas.employee import Employee
from leave_service.schemas.leave_request import LeaveRequest
from leave_service.schemas.leave_type import LeaveName, LeaveType
from leave_service.services.employees import EmployeeLedger
from leave_service.services.leave_requests import LeaveRequestMachine
from leave_service.services.policies import PolicyCatalog
from leave_service.services.reports import ReportProjector

logger = logging.getLogger(__name__)


class ServiceContext:
    """
    세 개의 엔티티 저장소와 id 카운터를 하나의 Session 위에 묶은 객체.

    변경 작업은 transaction() 안에서 실행되어 전부 commit되거나
    (예외 발생 시) 전부 rollback된다.
    """

    def __init__(self, session: Session, settings: Optional[Settings] = None):
        settings = settings or default_settings
        self.session = session
        self.ids = IdAllocator(session)

        self.policies = PolicyCatalog(
            EntityStore(session, LeaveTypeRecord, LeaveType, max_size=512),
            self.ids,
        )
        self.ledger = EmployeeLedger(
            EntityStore(session, EmployeeRecord, Employee, max_size=1024),
            self.ids,
            starting_balance=settings.DEFAULT_LEAVE_BALANCE,
            email_domain=settings.EMAIL_DOMAIN,
        )
        self.requests = LeaveRequestMachine(
            EntityStore(session, LeaveRequestRecord, LeaveRequest, max_size=1024),
            self.ids,
            self.ledger,
            self.policies,
        )
        self.reports = ReportProjector(self.requests, self.ledger, self.policies)

    @contextmanager
    def transaction(self) -> Iterator[None]:
        try:
            yield
        except Exception:
            self.session.rollback()
            raise
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("Failed to commit transaction: %s", exc)
            raise StorageError("Failed to commit transaction") from exc

    # employees

    def create_employee(self, name: str, email: Optional[str] = None) -> Employee:
        with self.transaction():
            return self.ledger.create(name, email)

    def get_employee(self, employee_id: int) -> Employee:
        return self.ledger.get(employee_id)

    def get_employees(self) -> List[Employee]:
        return self.ledger.list()

    def search_employee(self, query: str) -> List[Employee]:
        return self.ledger.search(query)

    # leave types

    def create_leave_type(
        self,
        name: Union[LeaveName, str],
        quota: int,
        carryover_allowed: bool = False,
    ) -> LeaveType:
        with self.transaction():
            return self.policies.create(name, quota, carryover_allowed)

    def get_leave_type(self, leave_type_id: int) -> LeaveType:
        return self.policies.get(leave_type_id)

    def get_leave_types(self) -> List[LeaveType]:
        return self.policies.list()

    # leave requests

    def create_leave_request(
        self,
        employee_id: int,
        leave_type_id: int,
        start_date: int,
        end_date: int,
        reason: str,
    ) -> LeaveRequest:
        with self.transaction():
            return self.requests.create(employee_id, leave_type_id, start_date, end_date, reason)

    def get_leave_requests(self) -> List[LeaveRequest]:
        return self.requests.list()

    def approve_leave_request(self, request_id: int) -> str:
        with self.transaction():
            self.requests.approve(request_id)
        return "Leave request approved."

    def reject_leave_request(self, request_id: int) -> str:
        with self.transaction():
            self.requests.reject(request_id)
        return "Leave request rejected."

    def accrue_leave(self, request_id: int) -> str:
        with self.transaction():
            self.requests.accrue(request_id)
        return "Leave accrued."

    def cancel_leave_request(self, request_id: int) -> str:
        with self.transaction():
            self.requests.cancel(request_id)
        return "Leave request canceled."

    def get_leave_history(self, employee_id: int) -> List[LeaveRequest]:
        return self.requests.history(employee_id)

    def generate_leave_report(self, employee_id: int) -> str:
        return self.reports.generate(employee_id)
