import logging
from datetime import datetime, timezone
from typing import List, Optional

from leave_service.core.counters import IdAllocator
from leave_service.core.exceptions import InvalidPayload, NotFound
from leave_service.core.store import EntityStore
from leave_service.schemas.employee import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH, Employee
from leave_service.schemas.leave_type import LeaveName

logger = logging.getLogger(__name__)


def generate_email(name: str, domain: str) -> str:
    return f"{name.lower().replace(' ', '.')}@{domain}"


class EmployeeLedger:
    """
    직원 레코드와 leave type별 잔여 일수.

    잔여 일수는 debit()으로만 줄어들고 0 아래로는 내려가지 않는다.
    """

    def __init__(
        self,
        store: EntityStore[Employee],
        ids: IdAllocator,
        starting_balance: int = 20,
        email_domain: str = "company.com",
    ):
        self.store = store
        self.ids = ids
        self.starting_balance = starting_balance
        self.email_domain = email_domain

    def create(self, name: str, email: Optional[str] = None) -> Employee:
        if not name or not name.strip():
            raise InvalidPayload("Employee name is required.")
        if len(name) > MAX_NAME_LENGTH:
            raise InvalidPayload(f"Employee name must be at most {MAX_NAME_LENGTH} characters.")
        if email and len(email) > MAX_EMAIL_LENGTH:
            raise InvalidPayload(f"Employee email must be at most {MAX_EMAIL_LENGTH} characters.")
        if not email:
            email = generate_email(name, self.email_domain)

        employee = Employee(
            id=self.ids.next(),
            name=name,
            email=email,
            balances={leave_name: self.starting_balance for leave_name in LeaveName},
            created_at=datetime.now(timezone.utc),
        )
        if not self.store.fits(employee):
            raise InvalidPayload("Employee record is too large; shorten name or email.")
        self.store.put(employee.id, employee)
        logger.info("Created employee %d (%s)", employee.id, employee.email)
        return employee

    def get(self, employee_id: int) -> Employee:
        employee = self.store.get(employee_id)
        if employee is None:
            raise NotFound("Employee not found")
        return employee

    def list(self) -> List[Employee]:
        employees = self.store.values()
        if not employees:
            raise NotFound("No employees found")
        return employees

    def search(self, query: str) -> List[Employee]:
        if not query:
            raise InvalidPayload("Search query is required.")
        needle = query.lower()
        employees = [
            employee
            for employee in self.store.values()
            if needle in employee.name.lower() or needle in employee.email.lower()
        ]
        if not employees:
            raise NotFound("No matching employees found")
        return employees

    @staticmethod
    def balance(employee: Employee, leave_name: LeaveName) -> int:
        return employee.balances.get(leave_name, 0)

    def debit(self, employee: Employee, leave_name: LeaveName, days: int) -> Employee:
        # 잔여 일수가 부족해도 막지 않고 0에서 멈춘다
        balances = dict(employee.balances)
        before = balances.get(leave_name, 0)
        balances[leave_name] = max(0, before - days)
        updated = employee.model_copy(update={"balances": balances})
        self.store.put(updated.id, updated)
        logger.info(
            "Debited employee %d %s balance by %d (%d -> %d)",
            employee.id, leave_name.value, days, before, balances[leave_name],
        )
        return updated
