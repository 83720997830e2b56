from typing import List

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse

from leave_service.core.deps import get_context
from leave_service.schemas.employee import Employee, EmployeeCreate
from leave_service.schemas.leave_request import LeaveRequest
from leave_service.services.context import ServiceContext

router = APIRouter(
    prefix="/employees",
    tags=["employees"],
)


@router.post(
    "",
    response_model=Employee,
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    payload: EmployeeCreate,
    ctx: ServiceContext = Depends(get_context),
):
    return ctx.create_employee(payload.name, payload.email)


@router.get(
    "",
    response_model=List[Employee],
)
async def list_employees(ctx: ServiceContext = Depends(get_context)):
    return ctx.get_employees()


@router.get(
    "/search",
    response_model=List[Employee],
)
async def search_employees(
    query: str = Query(...),
    ctx: ServiceContext = Depends(get_context),
):
    """
    이름 또는 email에 대한 대소문자 무시 부분 일치 검색.

    예:
    GET /employees/search?query=alice
    """
    return ctx.search_employee(query)


@router.get(
    "/{employee_id}",
    response_model=Employee,
)
async def get_employee(
    employee_id: int,
    ctx: ServiceContext = Depends(get_context),
):
    return ctx.get_employee(employee_id)


@router.get(
    "/{employee_id}/leave-history",
    response_model=List[LeaveRequest],
)
async def get_leave_history(
    employee_id: int,
    ctx: ServiceContext = Depends(get_context),
):
    return ctx.get_leave_history(employee_id)


@router.get(
    "/{employee_id}/leave-report",
    response_class=PlainTextResponse,
)
async def get_leave_report(
    employee_id: int,
    ctx: ServiceContext = Depends(get_context),
):
    return ctx.generate_leave_report(employee_id)
