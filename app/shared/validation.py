"""
Declarative request validation.

A rule set is an ordered list of checks. Each check inspects one field
of a RequestInput and returns a ValidationFailure or None. Every check
runs, failures accumulate, and only then is the request accepted or
rejected with RequestValidationFailed.

Field values are judged the way a string-based validator would see them:
absent and null become "", booleans "true"/"false", numbers their decimal
text.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence

PARAMS = "params"
BODY = "body"


class _Missing:
    """Marker for a field absent from the request."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

_INT_PATTERN = re.compile(r"^[-+]?(0|[1-9][0-9]*)$")
_NUMERIC_PATTERN = re.compile(r"^[-+]?([0-9]*\.)?[0-9]+$")
_BOOLEAN_STRINGS = frozenset({"true", "false", "1", "0"})


@dataclass(frozen=True)
class RequestInput:
    """The parts of a request that rules may inspect."""

    params: Mapping[str, Any] = field(default_factory=dict)
    body: Mapping[str, Any] = field(default_factory=dict)

    def get(self, location: str, name: str) -> Any:
        source = self.params if location == PARAMS else self.body
        return source.get(name, MISSING)


@dataclass(frozen=True)
class ValidationFailure:
    """One failed check on one field."""

    msg: str
    path: str
    location: str
    value: Any = MISSING

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the ``errors`` array; absent values are omitted."""
        entry: dict[str, Any] = {"type": "field"}
        if self.value is not MISSING:
            entry["value"] = self.value
        entry.update(msg=self.msg, path=self.path, location=self.location)
        return entry


Check = Callable[[RequestInput], Optional[ValidationFailure]]


class RequestValidationFailed(Exception):
    """Raised when at least one check of a rule set failed."""

    def __init__(self, failures: Sequence[ValidationFailure]) -> None:
        self.failures = list(failures)
        super().__init__(f"{len(self.failures)} validation failure(s)")


def as_text(value: Any) -> str:
    """Render a JSON value as the text a validator inspects."""
    if value is MISSING or value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float, str)):
        return str(value)
    return "[object]"


def is_int(value: Any) -> bool:
    return _INT_PATTERN.match(as_text(value)) is not None


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def not_empty(value: Any) -> bool:
    return as_text(value) != ""


def is_numeric(value: Any) -> bool:
    return _NUMERIC_PATTERN.match(as_text(value)) is not None


def is_positive(value: Any) -> bool:
    """Loose numeric comparison with zero; non-numbers are never positive.

    Values that do not fit a finite float (``"9" * 400``, ``10 ** 400``)
    are rejected as well, since they cannot be stored as a price.
    """
    if isinstance(value, str):
        value = value.strip() or "0"
    elif not isinstance(value, (int, float)):
        return False
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return False
    return math.isfinite(number) and number > 0


def max_length(limit: int) -> Callable[[Any], bool]:
    """Predicate factory: the field's text is at most ``limit`` characters."""

    def within(value: Any) -> bool:
        return len(as_text(value)) <= limit

    return within


def is_boolean(value: Any) -> bool:
    return as_text(value) in _BOOLEAN_STRINGS


def to_boolean(value: Any) -> bool:
    """Coerce a value accepted by is_boolean."""
    return as_text(value) in ("true", "1")


def check(location: str, name: str, predicate: Callable[[Any], bool], msg: str) -> Check:
    """Build a check that fails with ``msg`` when ``predicate`` rejects the field.

    Args:
        location: Where the field lives (PARAMS or BODY).
        name: Field name.
        predicate: Pure function over the raw field value.
        msg: Human-readable failure message.
    """

    def run(request_input: RequestInput) -> Optional[ValidationFailure]:
        value = request_input.get(location, name)
        if predicate(value):
            return None
        return ValidationFailure(msg=msg, path=name, location=location, value=value)

    return run


def collect_failures(
    rules: Sequence[Check], request_input: RequestInput
) -> list[ValidationFailure]:
    """Run every rule and return all failures in rule order."""
    failures = []
    for rule in rules:
        failure = rule(request_input)
        if failure is not None:
            failures.append(failure)
    return failures


def ensure_valid(rules: Sequence[Check], request_input: RequestInput) -> None:
    """Raise RequestValidationFailed if any rule fails."""
    failures = collect_failures(rules, request_input)
    if failures:
        raise RequestValidationFailed(failures)
