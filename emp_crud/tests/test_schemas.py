# tests/test_schemas.py
import pytest
from pydantic import ValidationError

from emp_crud.config import GENDER_MESSAGE, NAME_MESSAGE
from emp_crud.employees import parse_ids
from emp_crud.main import error_fields
from emp_crud.schemas import EmployeeCreate, EmployeeUpdate, Msg, is_valid_name


@pytest.mark.parametrize("name", ["张三", "欧阳小明子", "user_12", "a-b_c-d", "x" * 16])
def test_valid_names(name):
    assert is_valid_name(name)


@pytest.mark.parametrize("name", ["a", "!!!", "", "张", "欧阳小明子丑", "short", "x" * 17, "张三abc", "has space"])
def test_invalid_names(name):
    assert not is_valid_name(name)


def test_create_collects_every_field_error():
    with pytest.raises(ValidationError) as exc_info:
        EmployeeCreate(name="!!", gender="Q", email="nope")

    fields = error_fields(exc_info.value.errors())
    assert fields["name"] == NAME_MESSAGE
    assert fields["gender"] == GENDER_MESSAGE
    assert "email" in fields


def test_gender_is_normalised():
    assert EmployeeCreate(name="张三", gender=" f ", email="zs@example.com").gender == "F"


def test_update_keeps_only_supplied_fields():
    update = EmployeeUpdate(email="only@example.com")
    assert update.model_dump(exclude_unset=True) == {"email": "only@example.com"}


def test_update_checks_supplied_name():
    with pytest.raises(ValidationError):
        EmployeeUpdate(name="x")


def test_msg_constructors():
    ok = Msg[dict].succeed()
    bad = Msg[dict].fail({"va_msg": "taken"})

    assert ok.ok and ok.model_dump() == {"code": 100, "msg": "success", "extra": {}}
    assert not bad.ok and bad.model_dump() == {"code": 200, "msg": "failure", "extra": {"va_msg": "taken"}}


def test_parse_ids():
    assert parse_ids("7") == [7]
    assert parse_ids("3-5-9") == [3, 5, 9]


@pytest.mark.parametrize("ids", ["abc", "3-x", "3-", ""])
def test_parse_ids_rejects_non_numeric(ids):
    with pytest.raises(ValueError):
        parse_ids(ids)
