import pytest

from leave_service.core.exceptions import InvalidPayload, NotFound
from leave_service.schemas.leave_type import LeaveName


def test_new_employee_gets_starting_balance_for_every_leave_name(ctx):
    employee = ctx.create_employee("Alice Smith", "alice@example.org")

    assert set(employee.balances) == set(LeaveName)
    assert all(days == 20 for days in employee.balances.values())
    assert employee.email == "alice@example.org"


@pytest.mark.parametrize("email", [None, ""])
def test_email_defaults_from_name(ctx, email):
    employee = ctx.create_employee("Jane Mary Doe", email)

    assert employee.email == "jane.mary.doe@company.com"


def test_empty_name_is_invalid_payload(ctx):
    with pytest.raises(InvalidPayload):
        ctx.create_employee("")


def test_get_employee_round_trip(ctx, employee):
    assert ctx.get_employee(employee.id) == employee


def test_get_missing_employee(ctx):
    with pytest.raises(NotFound):
        ctx.get_employee(404)


def test_list_empty_is_not_found(ctx):
    with pytest.raises(NotFound, match="No employees found"):
        ctx.get_employees()


def test_search_is_case_insensitive_on_name_and_email(ctx):
    alice = ctx.create_employee("Alice Smith")
    bob = ctx.create_employee("Bob Jones", "bob@SMITHS.example")
    ctx.create_employee("Carol White")

    assert ctx.search_employee("smith") == [alice, bob]
    assert ctx.search_employee("ALICE") == [alice]


def test_search_without_match_is_not_found(ctx, employee):
    with pytest.raises(NotFound, match="No matching employees found"):
        ctx.search_employee("zed")


def test_debit_saturates_at_zero(ctx, employee):
    updated = ctx.ledger.debit(employee, LeaveName.SICK, 25)

    assert updated.balances[LeaveName.SICK] == 0
    assert ctx.get_employee(employee.id).balances[LeaveName.SICK] == 0
    assert ctx.get_employee(employee.id).balances[LeaveName.ANNUAL] == 20


def test_overlong_name_or_email_is_invalid_payload(ctx):
    with pytest.raises(InvalidPayload):
        ctx.create_employee("a" * 101)
    with pytest.raises(InvalidPayload):
        ctx.create_employee("Alice", "a" * 256)

    with pytest.raises(NotFound):
        ctx.get_employees()


def test_multibyte_employee_over_record_size_is_invalid_payload(ctx):
    with pytest.raises(InvalidPayload, match="too large"):
        ctx.create_employee("김" * 100, "이" * 255)
