"""Wizard exceptions.

Built on the common exception framework from stepform_common.

Field-level validation failures are not exceptions: they are reported as
messages in the wizard's field errors. A failing submit callback is not
wrapped either; its original exception propagates to the caller.
"""

from typing import Any, Dict

from stepform_common import ConfigurationError, ValidationError


class WizardConfigurationError(ConfigurationError):
    """Raised when a wizard definition is invalid.

    These are programmer errors (no steps, duplicate ids, a dangling
    validator reference) and are raised at construction or load time.
    """

    pass


class FieldValidatorError(ValidationError):
    """Raised when a custom field validator raises instead of returning a message."""

    def __init__(self, field_name: str, message: str, details: Dict[str, Any] | None = None):
        super().__init__(
            f"Validator for field '{field_name}' failed: {message}",
            context={"field": field_name, **(details or {})},
        )
        self.field_name = field_name
