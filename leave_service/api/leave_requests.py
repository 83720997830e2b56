from typing import List

from fastapi import APIRouter, Depends, status

from leave_service.core.deps import get_context
from leave_service.schemas.leave_request import LeaveRequest, LeaveRequestCreate
from leave_service.schemas.message import Message
from leave_service.services.context import ServiceContext

router = APIRouter(
    prefix="/leave-requests",
    tags=["leave-requests"],
)


@router.post(
    "",
    response_model=LeaveRequest,
    status_code=status.HTTP_201_CREATED,
)
async def create_leave_request(
    payload: LeaveRequestCreate,
    ctx: ServiceContext = Depends(get_context),
):
    """
    leave 신청 생성 (status는 항상 Pending으로 시작).
    employee_id / leave_type_id가 없으면 404.
    """
    return ctx.create_leave_request(
        employee_id=payload.employee_id,
        leave_type_id=payload.leave_type_id,
        start_date=payload.start_date,
        end_date=payload.end_date,
        reason=payload.reason,
    )


@router.get(
    "",
    response_model=List[LeaveRequest],
)
async def list_leave_requests(ctx: ServiceContext = Depends(get_context)):
    return ctx.get_leave_requests()


@router.post("/{request_id}/approve", response_model=Message)
async def approve_leave_request(
    request_id: int,
    ctx: ServiceContext = Depends(get_context),
):
    """
    승인 처리: 직원의 해당 leave type 잔여 일수를 quota만큼 차감 (0 미만으로는 안 내려감).
    이미 Approved면 409.
    """
    return Message(message=ctx.approve_leave_request(request_id))


@router.post("/{request_id}/reject", response_model=Message)
async def reject_leave_request(
    request_id: int,
    ctx: ServiceContext = Depends(get_context),
):
    return Message(message=ctx.reject_leave_request(request_id))


@router.post("/{request_id}/accrue", response_model=Message)
async def accrue_leave(
    request_id: int,
    ctx: ServiceContext = Depends(get_context),
):
    """Approved 상태인 요청만 가능. 잔여 일수를 한 번 더 차감한다."""
    return Message(message=ctx.accrue_leave(request_id))


@router.delete("/{request_id}", response_model=Message)
async def cancel_leave_request(
    request_id: int,
    ctx: ServiceContext = Depends(get_context),
):
    """Pending/Rejected 요청을 저장소에서 삭제. Approved면 409."""
    return Message(message=ctx.cancel_leave_request(request_id))
