"""Scoped fields attached to every log record (command, company, job_id, user_id).

The CLI opens one scope per command; ContextualFilter copies the active
fields onto each record that passes through the root handler.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional

_fields: ContextVar[Dict[str, Any]] = ContextVar("jobmatch_log_fields", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the active fields."""
    return dict(_fields.get())


def push_log_context(**fields: Any) -> Token:
    """Layer fields over the active ones and return a token for pop_log_context().

    Example:
        >>> token = push_log_context(company="acme", job_id="staff-engineer")
        >>> pop_log_context(token)
    """
    return _fields.set({**_fields.get(), **fields})


def pop_log_context(token: Token) -> None:
    _fields.reset(token)


def clear_log_context() -> None:
    _fields.set({})


class log_context:
    """``with`` form of push/pop; exceptions propagate.

    Example:
        >>> with log_context(command="analyze", user_id="tarun"):
        ...     logger.info("Analyzing match")
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self.token: Optional[Token] = None

    def __enter__(self) -> "log_context":
        self.token = push_log_context(**self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if self.token is not None:
            pop_log_context(self.token)
            self.token = None
        return False
