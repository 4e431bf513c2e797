"""WizardConfigLoader for building wizards from YAML or dict configuration.

Example wizard config::

    name: register
    submit_label: Create Account

    steps:
      - id: info
        title: Create your account
        description: Enter your details to get started
        fields:
          - name: email
            label: Email
            kind: email
            required: true
            validators:
              - email
          - name: full_name
            label: Full Name
            required: true
            validators:
              - min_length: {length: 2, message: Name must be at least 2 characters}

      - id: password
        title: Choose a password
        fields:
          - name: password
            label: Password
            kind: password
            required: true
            validators:
              - min_length: 8
          - name: confirm_password
            label: Confirm Password
            kind: password
            required: true
            validators:
              - matches: {field: password, message: Passwords do not match}

    hooks:
      on_error:
        - "myapp.hooks:report_failure"
"""

import logging
import re
from pathlib import Path
from typing import Any, Callable

import yaml

from .controller import SubmitFn, WizardController
from .exceptions import WizardConfigurationError
from .fields import FieldDescriptor, FieldOption, StepDescriptor
from .function_resolver import resolve_function, resolve_functions
from .hooks import WizardHooks
from .schema import FieldConfig, WizardConfig, validate_config
from .validators import BUILTIN_VALIDATORS, AllOfValidator

logger = logging.getLogger(__name__)

CUSTOM_KIND = "custom"


class WizardConfigLoader:
    """Builds step descriptors and controllers from wizard configuration.

    Custom validators can be registered by name and referenced from the
    config as ``- custom: name``. A ``custom`` value that is not a
    registered name is resolved as a ``"module.path:function"`` reference.
    """

    def __init__(
        self,
        custom_validators: dict[str, Callable[..., Any] | str] | None = None,
    ):
        """Initialize the loader.

        Args:
            custom_validators: Optional named validators. Values can be
                callables or "module:function" strings.

        Raises:
            WizardConfigurationError: If a string reference cannot be resolved
        """
        try:
            self._custom_validators = resolve_functions(custom_validators or {})
        except (ValueError, ImportError, AttributeError) as e:
            raise WizardConfigurationError(
                f"Cannot resolve custom validators: {e}"
            ) from e

    def load(
        self,
        config_path: str | Path,
        on_submit: SubmitFn,
        hooks: WizardHooks | None = None,
    ) -> WizardController:
        """Load a wizard config file and create a WizardController.

        Args:
            config_path: Path to wizard YAML config file
            on_submit: Submit callback for the controller
            hooks: Optional hooks; overrides the config's ``hooks`` section

        Returns:
            Configured WizardController

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If config is invalid YAML
            WizardConfigurationError: If config structure is invalid
        """
        config_path = Path(config_path)

        with open(config_path) as f:
            wizard_config = yaml.safe_load(f)

        logger.debug("Loaded wizard config from %s", config_path)
        return self.load_from_dict(wizard_config, on_submit, hooks=hooks)

    def load_from_dict(
        self,
        wizard_config: dict[str, Any],
        on_submit: SubmitFn,
        hooks: WizardHooks | None = None,
    ) -> WizardController:
        """Create a WizardController from a config dict.

        Args:
            wizard_config: Wizard configuration dict
            on_submit: Submit callback for the controller
            hooks: Optional hooks; overrides the config's ``hooks`` section

        Returns:
            Configured WizardController

        Raises:
            WizardConfigurationError: If config structure is invalid
        """
        config = validate_config(wizard_config)
        steps = self._build_steps(config)

        if hooks is None:
            hooks = WizardHooks.from_config(config.hooks.model_dump(exclude_none=True))

        logger.info("Building wizard '%s' with %d step(s)", config.name, len(steps))
        return WizardController(
            steps,
            on_submit,
            initial_data=config.initial_data,
            submit_label=config.submit_label,
            hooks=hooks,
        )

    def build_steps(self, wizard_config: dict[str, Any]) -> list[StepDescriptor]:
        """Build step descriptors without creating a controller.

        Raises:
            WizardConfigurationError: If config structure is invalid
        """
        return self._build_steps(validate_config(wizard_config))

    def _build_steps(self, config: WizardConfig) -> list[StepDescriptor]:
        return [
            StepDescriptor(
                id=step.id,
                title=step.title,
                description=step.description,
                fields=tuple(self._build_field(f) for f in step.fields),
            )
            for step in config.steps
        ]

    def _build_field(self, field_config: FieldConfig) -> FieldDescriptor:
        validators = [
            self._build_validator(field_config.name, entry)
            for entry in field_config.validators
        ]
        if not validators:
            validate = None
        elif len(validators) == 1:
            validate = validators[0]
        else:
            validate = AllOfValidator(*validators)

        return FieldDescriptor(
            name=field_config.name,
            label=field_config.label,
            kind=field_config.kind,
            required=field_config.required,
            options=tuple(FieldOption(o.label, o.value) for o in field_config.options),
            validate=validate,
            placeholder=field_config.placeholder,
            default=field_config.default,
        )

    def _build_validator(self, field_name: str, entry: dict[str, Any]) -> Callable[..., Any]:
        """Turn one ``{kind: params}`` entry into a validator callable.

        Params may be a mapping (keyword arguments), a scalar or list
        (single positional argument) or null.
        """
        ((kind, params),) = entry.items()

        if kind == CUSTOM_KIND:
            return self._resolve_custom(field_name, params)

        factory = BUILTIN_VALIDATORS.get(kind)
        if factory is None:
            raise WizardConfigurationError(
                f"Unknown validator kind '{kind}' for field '{field_name}'",
                context={
                    "field": field_name,
                    "kind": kind,
                    "available": sorted([*BUILTIN_VALIDATORS, CUSTOM_KIND]),
                },
            )

        try:
            if params is None:
                return factory()
            if isinstance(params, dict):
                return factory(**params)
            return factory(params)
        except (TypeError, ValueError, re.error) as e:
            raise WizardConfigurationError(
                f"Invalid parameters for validator '{kind}' on field '{field_name}': {e}",
                context={"field": field_name, "kind": kind, "params": params},
            ) from e

    def _resolve_custom(self, field_name: str, ref: Any) -> Callable[..., Any]:
        if not isinstance(ref, str) or not ref:
            raise WizardConfigurationError(
                f"Custom validator for field '{field_name}' must be a name or "
                f"'module:function' reference",
                context={"field": field_name, "ref": ref},
            )
        if ref in self._custom_validators:
            return self._custom_validators[ref]
        try:
            return resolve_function(ref)
        except (ValueError, ImportError, AttributeError) as e:
            raise WizardConfigurationError(
                f"Cannot resolve custom validator '{ref}' for field '{field_name}': {e}",
                context={"field": field_name, "ref": ref},
            ) from e
