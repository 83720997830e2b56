from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, Field

from leave_service.schemas.leave_type import LeaveName

MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 255


class EmployeeCreate(BaseModel):
    """POST /employees 요청 바디. email이 비어 있으면 이름으로 생성."""
    name: str = Field(..., max_length=MAX_NAME_LENGTH)
    email: Optional[str] = Field(None, max_length=MAX_EMAIL_LENGTH)


class Employee(BaseModel):
    id: int
    name: str
    email: str
    balances: Dict[LeaveName, int]
    created_at: datetime
