"""Built-in field validators.

Each validator is a callable ``(value, data) -> str | None`` that can be
used directly as ``FieldDescriptor.validate`` or referenced by kind name
in a wizard config (see ``BUILTIN_VALIDATORS``).

Validators only see non-empty values: the required check runs first and
short-circuits, and empty optional values are never passed to them.

Example:
    ```python
    from stepform_wizard.validators import EmailValidator, MinLengthValidator

    FieldDescriptor(
        name="password",
        label="Password",
        kind=FieldKind.PASSWORD,
        required=True,
        validate=MinLengthValidator(8, "Password must be at least 8 characters"),
    )
    ```
"""

import re
from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Dict, Iterable

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class FieldRule(ABC):
    """Base class for built-in validators."""

    kind: str = ""

    def __init__(self, message: str | None = None):
        if message is not None and not isinstance(message, str):
            raise TypeError(f"message must be a string, got {type(message).__name__}")
        self.message = message

    @abstractmethod
    def check(self, value: Any, data: Dict[str, Any]) -> bool:
        """Return True if ``value`` satisfies the rule."""

    @property
    @abstractmethod
    def default_message(self) -> str:
        """Message used when none was configured."""

    def __call__(self, value: Any, data: Dict[str, Any]) -> str | None:
        if self.check(value, data):
            return None
        return self.message or self.default_message

    @property
    def rule(self) -> Dict[str, Any]:
        """Describe the rule as plain data."""
        return {"kind": self.kind, "message": self.message or self.default_message}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rule!r})"


class PatternValidator(FieldRule):
    """Value (as a string) must match a regular expression."""

    kind = "pattern"

    def __init__(self, pattern: str, message: str | None = None, flags: int = 0):
        super().__init__(message)
        self.pattern = re.compile(pattern, flags)

    def check(self, value: Any, data: Dict[str, Any]) -> bool:
        return bool(self.pattern.search(str(value)))

    @property
    def default_message(self) -> str:
        return "Invalid format"

    @property
    def rule(self) -> Dict[str, Any]:
        return {**super().rule, "pattern": self.pattern.pattern}


class EmailValidator(PatternValidator):
    """Value must look like ``local@domain.tld``."""

    kind = "email"

    def __init__(self, message: str | None = None):
        super().__init__(EMAIL_PATTERN, message)

    @property
    def default_message(self) -> str:
        return "Invalid email format"


def _length(value: Any) -> int:
    try:
        return len(value)
    except TypeError:
        return len(str(value))


def _checked_length(length: Any) -> int:
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"length must be an integer, got {type(length).__name__}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return length


class MinLengthValidator(FieldRule):
    """Value must have at least ``length`` characters (or items)."""

    kind = "min_length"

    def __init__(self, length: int, message: str | None = None):
        super().__init__(message)
        self.length = _checked_length(length)

    def check(self, value: Any, data: Dict[str, Any]) -> bool:
        return _length(value) >= self.length

    @property
    def default_message(self) -> str:
        return f"Must be at least {self.length} characters"

    @property
    def rule(self) -> Dict[str, Any]:
        return {**super().rule, "length": self.length}


class MaxLengthValidator(FieldRule):
    """Value must have at most ``length`` characters (or items)."""

    kind = "max_length"

    def __init__(self, length: int, message: str | None = None):
        super().__init__(message)
        self.length = _checked_length(length)

    def check(self, value: Any, data: Dict[str, Any]) -> bool:
        return _length(value) <= self.length

    @property
    def default_message(self) -> str:
        return f"Must be at most {self.length} characters"

    @property
    def rule(self) -> Dict[str, Any]:
        return {**super().rule, "length": self.length}


class MatchesFieldValidator(FieldRule):
    """Value must equal the value of another field in the accumulated data.

    Typical use is a "confirm password" field.
    """

    kind = "matches"

    def __init__(self, field: str, message: str | None = None):
        super().__init__(message)
        if not isinstance(field, str) or not field:
            raise TypeError(f"field must be a non-empty field name, got {field!r}")
        self.field = field

    def check(self, value: Any, data: Dict[str, Any]) -> bool:
        return value == data.get(self.field)

    @property
    def default_message(self) -> str:
        return "Values do not match"

    @property
    def rule(self) -> Dict[str, Any]:
        return {**super().rule, "field": self.field}


class OneOfValidator(FieldRule):
    """Value must be one of an allowed set."""

    kind = "one_of"

    def __init__(self, values: Iterable[Any], message: str | None = None):
        super().__init__(message)
        if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
            raise TypeError(f"values must be a list of choices, got {type(values).__name__}")
        self.values = tuple(values)

    def check(self, value: Any, data: Dict[str, Any]) -> bool:
        return value in self.values

    @property
    def default_message(self) -> str:
        return "Invalid selection"

    @property
    def rule(self) -> Dict[str, Any]:
        return {**super().rule, "values": list(self.values)}


class IsoDateValidator(FieldRule):
    """Value must be a ``date`` or an ISO ``YYYY-MM-DD`` string."""

    kind = "date"

    def check(self, value: Any, data: Dict[str, Any]) -> bool:
        if isinstance(value, date):
            return True
        try:
            date.fromisoformat(str(value))
        except ValueError:
            return False
        return True

    @property
    def default_message(self) -> str:
        return "Invalid date"


class AllOfValidator:
    """Run several validators in order and return the first error."""

    kind = "all_of"

    def __init__(self, *validators: Any):
        self.validators = validators

    def __call__(self, value: Any, data: Dict[str, Any]) -> str | None:
        for validator in self.validators:
            error = validator(value, data)
            if error:
                return error
        return None

    @property
    def rule(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "validators": [
                getattr(v, "rule", {"kind": "custom"}) for v in self.validators
            ],
        }

    def __repr__(self) -> str:
        return f"AllOfValidator({len(self.validators)} validators)"


BUILTIN_VALIDATORS: Dict[str, type[FieldRule]] = {
    PatternValidator.kind: PatternValidator,
    EmailValidator.kind: EmailValidator,
    MinLengthValidator.kind: MinLengthValidator,
    MaxLengthValidator.kind: MaxLengthValidator,
    MatchesFieldValidator.kind: MatchesFieldValidator,
    OneOfValidator.kind: OneOfValidator,
    IsoDateValidator.kind: IsoDateValidator,
}


__all__ = [
    "EMAIL_PATTERN",
    "FieldRule",
    "PatternValidator",
    "EmailValidator",
    "MinLengthValidator",
    "MaxLengthValidator",
    "MatchesFieldValidator",
    "OneOfValidator",
    "IsoDateValidator",
    "AllOfValidator",
    "BUILTIN_VALIDATORS",
]
