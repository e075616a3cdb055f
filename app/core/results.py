"""
Uniform result envelope returned by every action.

Expected domain outcomes (not found, conflict) are returned as failed
results by the action itself. The ``action`` decorator is the boundary that
turns schema and store exceptions into results, so nothing raised inside an
action ever reaches the caller.
"""
from enum import Enum
from functools import wraps
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from app.core.logging_config import get_logger

logger = get_logger()

RULE_ERROR = "venue_rule"


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    PERSISTENCE = "persistence"


class ActionResult(BaseModel):
    success: bool
    data: Any = None
    error: str | None = None
    message: str | None = None
    kind: ErrorKind | None = Field(default=None, exclude=True)

    @classmethod
    def ok(cls, data: Any = None, message: str | None = None) -> "ActionResult":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, kind: ErrorKind, error: str) -> "ActionResult":
        return cls(success=False, error=error, kind=kind)

    @classmethod
    def not_found(cls, error: str) -> "ActionResult":
        return cls.fail(ErrorKind.NOT_FOUND, error)

    @classmethod
    def conflict(cls, error: str) -> "ActionResult":
        return cls.fail(ErrorKind.CONFLICT, error)

    def envelope(self) -> dict:
        body = {"success": self.success}
        for key in ("data", "error", "message"):
            value = getattr(self, key)
            if value is not None:
                body[key] = value
        return body


def format_validation_error(exc: ValidationError) -> str:
    """Custom rule messages verbatim, built-in ones prefixed with the field path."""
    messages = []
    for err in exc.errors():
        if err["type"] == RULE_ERROR:
            messages.append(err["msg"])
            continue
        loc = ".".join(str(part) for part in err["loc"])
        messages.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(messages)


def action(failure_message: str):
    """Wrap an action taking ``db`` first so it always returns an ActionResult."""

    def decorator(func):
        @wraps(func)
        def wrapper(db, *args, **kwargs):
            try:
                return func(db, *args, **kwargs)
            except ValidationError as e:
                db.rollback()
                return ActionResult.fail(ErrorKind.VALIDATION, format_validation_error(e))
            except SQLAlchemyError:
                db.rollback()
                logger.exception(f"{func.__name__} failed")
                return ActionResult.fail(ErrorKind.PERSISTENCE, failure_message)

        return wrapper

    return decorator
