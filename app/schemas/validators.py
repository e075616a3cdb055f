"""Shared field rules for the input schemas."""
from pydantic import HttpUrl, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

from app.core.results import RULE_ERROR

_url_adapter = TypeAdapter(HttpUrl)


def rule_error(message: str) -> PydanticCustomError:
    return PydanticCustomError(RULE_ERROR, message)


def min_length(value, limit: int, message: str):
    if value is not None and len(value) < limit:
        raise rule_error(message)
    return value


def max_length(value, limit: int, message: str):
    if value is not None and len(value) > limit:
        raise rule_error(message)
    return value


def at_least(value, limit, message: str):
    if value is not None and value < limit:
        raise rule_error(message)
    return value


def at_most(value, limit, message: str):
    if value is not None and value > limit:
        raise rule_error(message)
    return value


def check_url(value: str | None) -> str | None:
    # Validate, but keep the caller's exact string
    if value is None:
        return value
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise rule_error("Invalid image URL")
    return value


def check_image_list(value: list[str] | None) -> list[str] | None:
    if value is None:
        return value
    min_length(value, 1, "At least one image required")
    for url in value:
        check_url(url)
    return value


def reject_null(data: dict, *fields: str) -> dict:
    """Partial updates may omit a column but not clear a required one."""
    if isinstance(data, dict):
        for field in fields:
            if field in data and data[field] is None:
                raise rule_error(f"{field} cannot be null")
    return data
