"""Step and field descriptors.

Descriptors are frozen dataclasses: once a wizard is constructed its steps
and fields never change. Only the controller's ``WizardState`` is mutable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from stepform_common.serialization import callable_name

# (value, accumulated_data) -> error message or None
FieldValidatorFn = Callable[[Any, dict[str, Any]], Optional[str]]


class FieldKind(str, Enum):
    """Input kinds understood by a presentation layer."""

    TEXT = "text"
    EMAIL = "email"
    PASSWORD = "password"
    DATE = "date"
    SELECT = "select"
    TEXTAREA = "textarea"
    CHECKBOX = "checkbox"


@dataclass(frozen=True)
class FieldOption:
    """A single choice of a ``select`` field."""

    label: str
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "value": self.value}


@dataclass(frozen=True)
class FieldDescriptor:
    """A single named input.

    Attributes:
        name: Key under which the value is stored in the accumulated data.
            Unique across the whole wizard.
        label: Human-readable label, also used in the "is required" message
        kind: Input kind
        required: Whether an empty value blocks forward navigation
        options: Ordered choices (``select`` fields only)
        validate: Optional custom validator ``(value, data) -> str | None``
        placeholder: Optional hint text for the presentation layer
        default: Optional value seeded into the wizard data when the caller
            supplies none
    """

    name: str
    label: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    options: tuple[FieldOption, ...] = ()
    validate: FieldValidatorFn | None = field(default=None, compare=False)
    placeholder: str | None = None
    default: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, FieldKind):
            object.__setattr__(self, "kind", FieldKind(self.kind))
        if not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options))

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict; the validator is represented by name."""
        return {
            "name": self.name,
            "label": self.label,
            "kind": self.kind.value,
            "required": self.required,
            "options": [option.to_dict() for option in self.options],
            "validate": callable_name(self.validate),
            "placeholder": self.placeholder,
            "default": self.default,
        }


@dataclass(frozen=True)
class StepDescriptor:
    """One page of the wizard.

    Attributes:
        id: Identifier, unique within the wizard
        title: Heading shown for the step
        description: Optional sub-heading
        fields: Ordered fields of the step
    """

    id: str
    title: str
    fields: tuple[FieldDescriptor, ...] = ()
    description: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def field_names(self) -> list[str]:
        """Names of the step's fields in display order."""
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> FieldDescriptor | None:
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "fields": [f.to_dict() for f in self.fields],
        }
