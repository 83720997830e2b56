import pytest

from leave_service.core.exceptions import InvalidPayload, NotFound
from leave_service.schemas.leave_type import LeaveName


def test_create_leave_type(ctx):
    leave_type = ctx.create_leave_type("Maternity", 90, False)

    assert leave_type.name is LeaveName.MATERNITY
    assert leave_type.quota == 90
    assert leave_type.carryover_allowed is False
    assert ctx.get_leave_type(leave_type.id) == leave_type


def test_create_accepts_enum_member(ctx):
    assert ctx.create_leave_type(LeaveName.UNPAID, 0).name is LeaveName.UNPAID


def test_unknown_name_is_invalid_payload(ctx):
    with pytest.raises(InvalidPayload):
        ctx.create_leave_type("Holiday", 5)

    with pytest.raises(NotFound):
        ctx.get_leave_types()


def test_negative_quota_is_invalid_payload(ctx):
    with pytest.raises(InvalidPayload):
        ctx.create_leave_type("Sick", -1)


def test_get_missing_leave_type(ctx):
    with pytest.raises(NotFound):
        ctx.get_leave_type(123)


def test_list_empty_is_not_found(ctx):
    with pytest.raises(NotFound, match="No leave types found"):
        ctx.get_leave_types()


def test_list_returns_all_in_creation_order(ctx):
    sick = ctx.create_leave_type("Sick", 10)
    annual = ctx.create_leave_type("Annual", 15, True)

    assert ctx.get_leave_types() == [sick, annual]
