"""Declarative assertions over a response envelope.

A contract case declares an ordered tuple of ``Check`` objects for the
envelope's ``message``. Checks are applied in declaration order and the first
one that does not hold raises ``AssertionFailure`` naming the field path,
the expectation and the observed value.

Usage
>>> message = assert_success_shape(
...     outcome.envelope,
...     MessageKind.ARRAY,
...     checks=(non_empty(), unique_items()),
... )
"""

from enum import Enum
from typing import Any, Callable, Iterable, Optional, Sequence

from .envelope import Envelope
from .errors import AssertionFailure

# Offending items quoted in a failure message.
_MAX_REPORTED_ITEMS = 5


class MessageKind(Enum):
    """JSON kinds a ``message`` field can take."""
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"


def kind_of(value: Any) -> Optional[MessageKind]:
    """Map a decoded JSON value to its ``MessageKind`` (``None`` for scalars)."""
    if isinstance(value, dict):
        return MessageKind.OBJECT
    if isinstance(value, list):
        return MessageKind.ARRAY
    if isinstance(value, str):
        return MessageKind.STRING
    return None


def assert_kind(value: Any, expected: MessageKind, path: str) -> None:
    actual = kind_of(value)
    if actual is not expected:
        raise AssertionFailure(
            path,
            f"a JSON {expected.value}",
            actual.value if actual else type(value).__name__,
        )


class Check:
    """A named predicate over a value.

    Parameters
    - description: Human-readable expectation used in failure messages
    - predicate: Returns ``True`` when the value satisfies the expectation
    - detail: Optional projection of the value reported as "actual"
    """

    def __init__(
        self,
        description: str,
        predicate: Callable[[Any], bool],
        detail: Optional[Callable[[Any], Any]] = None,
    ):
        self.description = description
        self.predicate = predicate
        self.detail = detail

    def apply(self, value: Any, path: str) -> None:
        if not self.predicate(value):
            actual = self.detail(value) if self.detail else value
            raise AssertionFailure(path, self.description, actual)

    def __repr__(self) -> str:
        return f"Check({self.description!r})"


class FieldCheck(Check):
    """Descend into ``value[key]``, check its kind, then apply nested checks."""

    def __init__(self, key: str, kind: MessageKind, checks: Sequence[Check] = ()):
        super().__init__(f"field {key!r} as a JSON {kind.value}", lambda value: True)
        self.key = key
        self.kind = kind
        self.checks = tuple(checks)

    def apply(self, value: Any, path: str) -> None:
        field_path = f"{path}.{self.key}"
        if self.key not in value:
            raise AssertionFailure(field_path, "field to be present", "<missing>")
        nested = value[self.key]
        assert_kind(nested, self.kind, field_path)
        run_checks(nested, self.checks, field_path)


def run_checks(value: Any, checks: Iterable[Check], path: str) -> None:
    """Apply checks in order; the first failure propagates."""
    for check in checks:
        check.apply(value, path)


def _size(value: Any) -> int:
    return len(value)


# Collection checks

def non_empty() -> Check:
    return Check("at least one element", lambda value: len(value) > 0, _size)


def empty() -> Check:
    return Check("no elements", lambda value: len(value) == 0)


def size_greater_than(minimum: int) -> Check:
    return Check(f"more than {minimum} elements", lambda value: len(value) > minimum, _size)


def has_keys(*keys: str) -> Check:
    """Object contains every one of ``keys``."""
    return Check(
        f"keys {list(keys)} to be present",
        lambda value: all(key in value for key in keys),
        lambda value: [key for key in keys if key not in value],
    )


def contains_item(item: Any) -> Check:
    return Check(f"to contain {item!r}", lambda value: item in value)


def all_items(description: str, predicate: Callable[[Any], bool]) -> Check:
    """Every element of an array satisfies ``predicate``.

    The failure message quotes the first few offending elements.
    """
    return Check(
        f"all elements {description}",
        lambda value: all(predicate(item) for item in value),
        lambda value: [item for item in value if not predicate(item)][:_MAX_REPORTED_ITEMS],
    )


def unique_items() -> Check:
    """No two elements are equal; objects and arrays are compared by value."""
    def duplicates(value: Sequence[Any]) -> list:
        seen, repeated = [], []
        for item in value:
            if item in seen:
                if item not in repeated:
                    repeated.append(item)
            else:
                seen.append(item)
        return repeated

    return Check(
        "no duplicate elements",
        lambda value: not duplicates(value),
        lambda value: duplicates(value)[:_MAX_REPORTED_ITEMS],
    )


# String checks

def non_empty_string() -> Check:
    return Check("a non-empty string", lambda value: isinstance(value, str) and value != "")


def starts_with(prefix: str) -> Check:
    return Check(f"to start with {prefix!r}", lambda value: value.startswith(prefix))


def ends_with_any(suffixes: Sequence[str]) -> Check:
    return Check(f"to end with one of {list(suffixes)}", lambda value: value.endswith(tuple(suffixes)))


def contains_text(fragment: str) -> Check:
    return Check(f"to contain {fragment!r}", lambda value: fragment in value)


def is_lowercase_alpha(value: Any) -> bool:
    return isinstance(value, str) and value.isalpha() and value.islower()


# Envelope-level assertions

def assert_status(status_code: int, expected_status: int) -> None:
    if status_code != expected_status:
        raise AssertionFailure("http status", expected_status, status_code)


def assert_success_shape(
    body: Envelope,
    expected_message_kind: MessageKind,
    checks: Sequence[Check] = (),
) -> Any:
    """Verify a success envelope and return its ``message``."""
    status = body.field("status")
    if status != "success":
        raise AssertionFailure("status", "'success'", status)

    message = body.field("message")
    assert_kind(message, expected_message_kind, "message")
    run_checks(message, checks, "message")
    return message


def assert_error_shape(body: Envelope, expected_code: int, expected_message: str) -> None:
    """Verify an error envelope: status, integer code and exact message."""
    status = body.field("status")
    if status != "error":
        raise AssertionFailure("status", "'error'", status)

    code = body.field("code")
    if isinstance(code, bool) or not isinstance(code, int):
        raise AssertionFailure("code", "an integer", code)
    if code != expected_code:
        raise AssertionFailure("code", expected_code, code)

    message = body.field("message")
    if message != expected_message:
        raise AssertionFailure("message", repr(expected_message), message)
