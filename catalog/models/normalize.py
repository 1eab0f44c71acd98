"""Value normalisation shared by the model validators.

Validators never reject input; they collapse anything unusable to a
safe default.
"""

from typing import Any


def non_empty_or_default(value: str | None, default: str = "") -> str:
    """Return ``value`` unless it is None or empty.

    Whitespace-only strings are kept as-is.
    """
    return value if value else default


def positive_or_default(value: Any, default: Any = 0) -> Any:
    """Return ``value`` when it is a number greater than zero."""
    if value is not None and value > 0:
        return value
    return default
