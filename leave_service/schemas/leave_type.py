from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class LeaveName(str, Enum):
    """leave type 이름. 값이 곧 표시용 라벨이자 잔여 일수 map의 key."""

    ANNUAL = "Annual"
    SICK = "Sick"
    MATERNITY = "Maternity"
    PATERNITY = "Paternity"
    UNPAID = "Unpaid"


class LeaveTypeCreate(BaseModel):
    """POST /leave-types 요청 바디

    name은 문자열로 받고 catalog에서 LeaveName으로 검증한다 (모르는 값은 400).
    """
    name: str
    quota: int
    carryover_allowed: bool = False


class LeaveType(BaseModel):
    id: int
    name: LeaveName
    quota: int
    carryover_allowed: bool
    created_at: datetime
