import pytest

from leave_service.core.exceptions import NotFound


def test_report_lists_requests_and_summary(ctx, employee, annual):
    sick = ctx.create_leave_type("Sick", 3)
    first = ctx.create_leave_request(employee.id, annual.id, 10, 14, "Family trip")
    second = ctx.create_leave_request(employee.id, sick.id, 20, 22, "Flu")
    third = ctx.create_leave_request(employee.id, annual.id, 30, 34, "Hiking")
    ctx.approve_leave_request(first.id)

    report = ctx.generate_leave_report(employee.id)

    assert report == (
        f"Leave report for Alice Smith (Employee ID: {employee.id})\n"
        "\n"
        f"Leave Request ID: {first.id}\n"
        "Leave Type: Annual\n"
        "Quota: 5\n"
        "Remaining Balance: 15\n"
        "Start Date: 10\n"
        "End Date: 14\n"
        "Status: Approved\n"
        "Reason: Family trip\n"
        "\n"
        f"Leave Request ID: {second.id}\n"
        "Leave Type: Sick\n"
        "Quota: 3\n"
        "Remaining Balance: 20\n"
        "Start Date: 20\n"
        "End Date: 22\n"
        "Status: Pending\n"
        "Reason: Flu\n"
        "\n"
        f"Leave Request ID: {third.id}\n"
        "Leave Type: Annual\n"
        "Quota: 5\n"
        "Remaining Balance: 15\n"
        "Start Date: 30\n"
        "End Date: 34\n"
        "Status: Pending\n"
        "Reason: Hiking\n"
        "\n"
        "Summary of Leave Taken by Type:\n"
        "Annual: 10 days\n"
        "Sick: 3 days\n"
    )


def test_report_uses_current_balance(ctx, employee, annual):
    request = ctx.create_leave_request(employee.id, annual.id, 1, 5, "Trip")
    assert "Remaining Balance: 20" in ctx.generate_leave_report(employee.id)

    ctx.approve_leave_request(request.id)
    ctx.accrue_leave(request.id)

    assert "Remaining Balance: 10" in ctx.generate_leave_report(employee.id)


def test_report_for_missing_employee(ctx):
    with pytest.raises(NotFound, match="Employee not found"):
        ctx.generate_leave_report(999)


def test_report_without_requests(ctx, employee):
    with pytest.raises(NotFound):
        ctx.generate_leave_report(employee.id)


def test_report_aborts_on_unresolvable_leave_type(ctx, employee, annual):
    sick = ctx.create_leave_type("Sick", 3)
    ctx.create_leave_request(employee.id, annual.id, 1, 2, "Trip")
    ctx.create_leave_request(employee.id, sick.id, 3, 4, "Flu")
    ctx.policies.store.delete(sick.id)

    with pytest.raises(NotFound, match="Leave type not found"):
        ctx.generate_leave_report(employee.id)
