from typing import Dict

from leave_service.schemas.leave_type import LeaveName
from leave_service.services.employees import EmployeeLedger
from leave_service.services.leave_requests import LeaveRequestMachine
from leave_service.services.policies import PolicyCatalog


class ReportProjector:
    """직원별 leave 내역을 사람이 읽을 수 있는 텍스트로 만든다 (읽기 전용)."""

    def __init__(
        self,
        requests: LeaveRequestMachine,
        ledger: EmployeeLedger,
        policies: PolicyCatalog,
    ):
        self.requests = requests
        self.ledger = ledger
        self.policies = policies

    def generate(self, employee_id: int) -> str:
        employee = self.ledger.get(employee_id)
        leave_requests = self.requests.history(employee_id)

        lines = [f"Leave report for {employee.name} (Employee ID: {employee.id})", ""]
        total_days_by_type: Dict[LeaveName, int] = {}

        for request in leave_requests:
            # leave type을 못 찾으면 NotFound로 리포트 전체를 중단
            leave_type = self.policies.get(request.leave_type_id)
            balance = self.ledger.balance(employee, leave_type.name)
            total_days_by_type[leave_type.name] = (
                total_days_by_type.get(leave_type.name, 0) + leave_type.quota
            )
            lines.extend([
                f"Leave Request ID: {request.id}",
                f"Leave Type: {leave_type.name.value}",
                f"Quota: {leave_type.quota}",
                f"Remaining Balance: {balance}",
                f"Start Date: {request.start_date}",
                f"End Date: {request.end_date}",
                f"Status: {request.status.value}",
                f"Reason: {request.reason}",
                "",
            ])

        lines.append("Summary of Leave Taken by Type:")
        for leave_name in LeaveName:
            if leave_name in total_days_by_type:
                lines.append(f"{leave_name.value}: {total_days_by_type[leave_name]} days")

        return "\n".join(lines) + "\n"
