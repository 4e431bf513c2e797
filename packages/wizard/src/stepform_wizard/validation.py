"""Field- and step-level validation.

Both functions are pure: they read the accumulated data and return
results without touching wizard state. The controller decides whether to
store a step result as the current field errors.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from .exceptions import FieldValidatorError
from .fields import FieldDescriptor, StepDescriptor

logger = logging.getLogger(__name__)


def is_empty(value: Any) -> bool:
    """Whether a value counts as "not filled in".

    Python truthiness decides: ``None``, ``""``, ``False`` (an unchecked
    checkbox), ``0`` and empty collections are empty. Empty lists and dicts
    therefore fail a required check, e.g. a multi-choice field with nothing
    picked.
    """
    return not value


def required_message(field_descriptor: FieldDescriptor) -> str:
    return f"{field_descriptor.label} is required"


def validate_field(
    field_descriptor: FieldDescriptor,
    value: Any,
    data: dict[str, Any],
) -> str | None:
    """Validate one field value.

    The required check short-circuits: a required field with an empty
    value reports "<label> is required" and its custom validator is never
    called. Custom validators only run for non-empty values.

    Args:
        field_descriptor: The field being validated
        value: Its current value
        data: The full accumulated wizard data (for cross-field rules)

    Returns:
        An error message, or None if the value is valid

    Raises:
        FieldValidatorError: If the custom validator raises
    """
    if is_empty(value):
        if field_descriptor.required:
            return required_message(field_descriptor)
        return None

    if field_descriptor.validate is None:
        return None

    try:
        error = field_descriptor.validate(value, data)
    except Exception as e:
        raise FieldValidatorError(
            field_descriptor.name, str(e), details={"error_type": type(e).__name__}
        ) from e

    return error or None


@dataclass(frozen=True)
class StepValidationResult:
    """Outcome of validating every field of a step.

    Attributes:
        step_id: Id of the validated step
        errors: Mapping from field name to error message, in field order
    """

    step_id: str
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid


def validate_step(step: StepDescriptor, data: dict[str, Any]) -> StepValidationResult:
    """Validate every field of ``step`` against ``data``.

    Args:
        step: Step to validate
        data: The accumulated wizard data

    Returns:
        StepValidationResult with one entry per failing field
    """
    errors: dict[str, str] = {}
    for field_descriptor in step.fields:
        error = validate_field(field_descriptor, data.get(field_descriptor.name), data)
        if error:
            errors[field_descriptor.name] = error

    if errors:
        logger.debug("Step '%s' has %d invalid field(s): %s", step.id, len(errors), list(errors))
    return StepValidationResult(step_id=step.id, errors=errors)
