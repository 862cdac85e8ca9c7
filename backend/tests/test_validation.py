import pytest
from pydantic_core import PydanticCustomError

from jobly.core.errors import ValidationError
from jobly.core.validation import check_email, check_url, describe_error, validate_query
from jobly.schemas.company import CompanyFilter


def test_describe_extra_property():
    err = {"type": "extra_forbidden", "loc": ("query", "color"), "msg": "Extra inputs are not permitted"}
    assert describe_error(err) == 'instance is not allowed to have the additional property "color"'


def test_describe_missing_property():
    err = {"type": "missing", "loc": ("body", "name"), "msg": "Field required"}
    assert describe_error(err) == 'instance requires property "name"'


def test_describe_missing_body():
    assert describe_error({"type": "missing", "loc": ("body",), "msg": "Field required"}) == "instance is required"


def test_describe_type_mismatch():
    err = {"type": "int_parsing", "loc": ("minEmployees",), "msg": "Input should be a valid integer"}
    assert describe_error(err) == "instance.minEmployees is not of a type(s) integer"


def test_describe_length_and_range():
    assert describe_error(
        {"type": "string_too_long", "loc": ("body", "handle"), "ctx": {"max_length": 25}}
    ) == "instance.handle does not meet maximum length of 25"
    assert describe_error(
        {"type": "greater_than_equal", "loc": ("body", "numEmployees"), "ctx": {"ge": 0}}
    ) == "instance.numEmployees must be greater than or equal to 0"


def test_describe_falls_back_to_message():
    err = {"type": "json_invalid", "loc": ("body", 1), "msg": "JSON decode error"}
    assert describe_error(err) == "instance[1] JSON decode error"


def test_check_url():
    assert check_url("http://c1.img") == "http://c1.img"
    with pytest.raises(PydanticCustomError):
        check_url("not-a-url")


def test_check_email():
    assert check_email("new@email.com2") == "new@email.com2"
    with pytest.raises(PydanticCustomError):
        check_email("not an email")


def test_validate_query_coerces_integers():
    filters = validate_query(CompanyFilter, {"name": "c", "minEmployees": "2", "maxEmployees": "3"})
    assert filters.name == "c"
    assert filters.min_employees == 2
    assert filters.max_employees == 3


def test_validate_query_empty():
    filters = validate_query(CompanyFilter, {})
    assert filters.name is None
    assert filters.min_employees is None
    assert filters.max_employees is None


def test_validate_query_collects_every_violation():
    with pytest.raises(ValidationError) as exc_info:
        validate_query(CompanyFilter, {"minEmployees": "x", "color": "blue"})
    assert exc_info.value.status_code == 400
    assert sorted(exc_info.value.message) == [
        'instance is not allowed to have the additional property "color"',
        "instance.minEmployees is not of a type(s) integer",
    ]


def test_validate_query_rejects_snake_case_keys():
    with pytest.raises(ValidationError):
        validate_query(CompanyFilter, {"min_employees": "1"})
