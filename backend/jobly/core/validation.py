"""Request payload validation.

Schemas are closed pydantic models (see :mod:`jobly.schemas`). This module adds
the format checks they share and turns pydantic's error records into the
``instance.<field> ...`` messages the API reports, e.g.::

    instance is not allowed to have the additional property "color"
    instance.minEmployees is not of a type(s) integer
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence, TypeVar

import pydantic
from email_validator import EmailNotValidError, validate_email
from pydantic import AnyUrl, BaseModel, TypeAdapter
from pydantic_core import PydanticCustomError

from jobly.core.errors import ValidationError

M = TypeVar("M", bound=BaseModel)

_url_adapter = TypeAdapter(AnyUrl)

# request sections FastAPI puts in front of the field path
_SECTIONS = {"body", "query", "path", "header", "cookie"}

_TYPE_NAMES = {
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
    "string_type": "string",
    "bool_type": "boolean",
    "bool_parsing": "boolean",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
}


def _format_error(fmt: str) -> PydanticCustomError:
    return PydanticCustomError("format", 'value does not conform to the "{format}" format', {"format": fmt})


def check_url(value: str) -> str:
    """Accept ``value`` if it parses as an absolute URL. The string is kept as sent."""
    try:
        _url_adapter.validate_python(value)
    except pydantic.ValidationError:
        raise _format_error("uri")
    return value


def check_email(value: str) -> str:
    try:
        # syntax only: no DNS lookup, no public-TLD rule
        validate_email(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        raise _format_error("email")
    return value


def _path(loc: Sequence[Any]) -> str:
    parts = ["instance"]
    for item in loc:
        if isinstance(item, int):
            parts.append(f"[{item}]")
        else:
            parts.append(f".{item}")
    return "".join(parts)


def describe_error(error: Mapping[str, Any]) -> str:
    loc = tuple(error.get("loc") or ())
    if loc and loc[0] in _SECTIONS:
        loc = loc[1:]
    kind = error.get("type", "")
    ctx = error.get("ctx") or {}

    if kind == "extra_forbidden" and loc:
        return f'{_path(loc[:-1])} is not allowed to have the additional property "{loc[-1]}"'
    if kind == "missing":
        if not loc:
            return "instance is required"
        return f'{_path(loc[:-1])} requires property "{loc[-1]}"'

    path = _path(loc)
    if kind in _TYPE_NAMES:
        return f"{path} is not of a type(s) {_TYPE_NAMES[kind]}"
    if kind == "format":
        return f'{path} does not conform to the "{ctx.get("format")}" format'
    if kind == "string_too_short":
        return f"{path} does not meet minimum length of {ctx.get('min_length')}"
    if kind == "string_too_long":
        return f"{path} does not meet maximum length of {ctx.get('max_length')}"
    if kind == "greater_than_equal":
        return f"{path} must be greater than or equal to {ctx.get('ge')}"
    return f"{path} {error.get('msg', 'is invalid')}"


def describe_errors(errors: Iterable[Mapping[str, Any]]) -> list[str]:
    return [describe_error(e) for e in errors]


def validate_query(model: type[M], params: Mapping[str, str]) -> M:
    """Validate query-string ``params`` against ``model``.

    Values arrive as text; pydantic's lax mode coerces numeric strings before
    the type check, so ``minEmployees=3`` passes and ``minEmployees=abc`` does not.
    """
    try:
        return model.model_validate(dict(params))
    except pydantic.ValidationError as exc:
        raise ValidationError(describe_errors(exc.errors()))
