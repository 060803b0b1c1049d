from src.hr_attendance.hr_attendance.attendance.identity import IdentityResolver, numeric_key
from src.hr_attendance.hr_attendance.employees.model import Employee


def _resolver():
    return IdentityResolver.from_roster(
        [
            Employee(employee_id="E1", employee_code="NV00001", name="A"),
            Employee(employee_id="E12", employee_code="NV00012", name="B"),
            Employee(employee_id="EX", employee_code="", name="No code"),
        ]
    )


def test_numeric_key_strips_prefix_and_zeros():
    assert numeric_key("NV00007") == "7"
    assert numeric_key(" 0012 ") == "12"
    assert numeric_key("abc") is None


def test_padded_and_bare_device_ids_match_employee_code():
    resolver = _resolver()

    assert resolver.resolve("00001").employee_id == "E1"
    assert resolver.resolve("1").employee_id == "E1"
    assert resolver.resolve(" 12 ").employee_id == "E12"


def test_unknown_numeric_id_gets_placeholder():
    identity = _resolver().resolve("000345")

    assert identity.employee_id == "finger:345"
    assert identity.display_code == "345"
    assert identity.linked is False


def test_non_numeric_id_uses_raw_value():
    identity = _resolver().resolve("guest")

    assert identity.employee_id == "finger:guest"
    assert identity.linked is False


def test_resolution_is_stable_within_a_call():
    resolver = _resolver()

    assert resolver.resolve("999") is resolver.resolve("999")
    assert resolver.resolve("0001") == resolver.resolve("1")


def test_employees_without_digits_are_not_registered():
    # "1", "00001", "12", "00012"
    assert len(_resolver()) == 4
