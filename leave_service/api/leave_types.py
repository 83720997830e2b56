from typing import List

from fastapi import APIRouter, Depends, status

from leave_service.core.deps import get_context
from leave_service.schemas.leave_type import LeaveType, LeaveTypeCreate
from leave_service.services.context import ServiceContext

router = APIRouter(
    prefix="/leave-types",
    tags=["leave-types"],
)


@router.post(
    "",
    response_model=LeaveType,
    status_code=status.HTTP_201_CREATED,
)
async def create_leave_type(
    payload: LeaveTypeCreate,
    ctx: ServiceContext = Depends(get_context),
):
    return ctx.create_leave_type(payload.name, payload.quota, payload.carryover_allowed)


@router.get(
    "",
    response_model=List[LeaveType],
)
async def list_leave_types(ctx: ServiceContext = Depends(get_context)):
    return ctx.get_leave_types()


@router.get(
    "/{leave_type_id}",
    response_model=LeaveType,
)
async def get_leave_type(
    leave_type_id: int,
    ctx: ServiceContext = Depends(get_context),
):
    return ctx.get_leave_type(leave_type_id)
