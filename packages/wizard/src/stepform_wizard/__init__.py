"""Multi-step form wizard engine.

Turns a declarative list of steps and fields into a guarded navigation
flow with per-field validation, cross-step data accumulation and a single
terminal asynchronous submission.

Example:
    ```python
    from stepform_wizard import (
        FieldDescriptor, FieldKind, StepDescriptor, WizardController,
    )
    from stepform_wizard.validators import EmailValidator

    steps = [
        StepDescriptor("info", "Your details", fields=(
            FieldDescriptor("email", "Email", FieldKind.EMAIL, required=True,
                            validate=EmailValidator()),
        )),
    ]
    controller = WizardController(steps, on_submit=save)
    controller.set_field("email", "a@b.com")
    await controller.advance()
    ```
"""

from .controller import AdvanceOutcome, WizardController, check_steps
from .exceptions import FieldValidatorError, WizardConfigurationError
from .fields import FieldDescriptor, FieldKind, FieldOption, StepDescriptor
from .hooks import WizardHooks
from .loader import WizardConfigLoader
from .state import WizardSnapshot, WizardState
from .validation import StepValidationResult, validate_field, validate_step

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Descriptors
    "FieldKind",
    "FieldOption",
    "FieldDescriptor",
    "StepDescriptor",
    # Validation
    "StepValidationResult",
    "validate_field",
    "validate_step",
    # State machine
    "AdvanceOutcome",
    "WizardController",
    "WizardSnapshot",
    "WizardState",
    "WizardHooks",
    "check_steps",
    # Configuration
    "WizardConfigLoader",
    # Exceptions
    "WizardConfigurationError",
    "FieldValidatorError",
]
