from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

# 인코딩된 LeaveRequest가 1024 bytes를 넘지 않도록
MAX_REASON_LENGTH = 500


class LeaveStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    ACCRUED = "Accrued"
    CANCELED = "Canceled"


class LeaveRequestCreate(BaseModel):
    """POST /leave-requests 요청 바디"""
    employee_id: int
    leave_type_id: int
    start_date: int = Field(..., ge=0)
    end_date: int = Field(..., ge=0)
    reason: str = Field(..., max_length=MAX_REASON_LENGTH)


class LeaveRequest(BaseModel):
    id: int
    employee_id: int
    leave_type_id: int
    start_date: int
    end_date: int
    status: LeaveStatus = LeaveStatus.PENDING
    reason: str
    created_at: datetime
