from typing import Any


class ParseError(ValueError):
    """Raised when a date value is not valid ISO-8601."""

    def __init__(self, value: Any, reason: str = "not a valid ISO-8601 date") -> None:
        self.value = value
        super().__init__(f"{value!r} is {reason}")


class StageOrderError(Exception):
    """Raised when a stage would be recorded before the stage that precedes it."""


class TemplateNotFoundError(KeyError):
    """Raised when a template id is not in the catalog."""
