"""Configuration schema for declarative wizard definitions using Pydantic.

A wizard config has steps, each with fields, each with an optional list of
validator entries. A validator entry is a single-key mapping from a kind
name (a built-in kind or ``custom``) to its parameters.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import WizardConfigurationError
from .fields import FieldKind
from .state import DEFAULT_SUBMIT_LABEL


class OptionConfig(BaseModel):
    """Configuration for a select option."""

    label: str
    value: str


class FieldConfig(BaseModel):
    """Configuration for a field."""

    name: str = Field(min_length=1)
    label: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    options: List[OptionConfig] = Field(default_factory=list)
    placeholder: str | None = None
    default: Any = None
    validators: List[Dict[str, Any]] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    @field_validator("options", mode="before")
    @classmethod
    def normalize_options(cls, v: Any) -> Any:
        """Accept bare strings as options whose label and value are equal."""
        if not isinstance(v, list):
            return v
        return [{"label": o, "value": o} if isinstance(o, str) else o for o in v]

    @field_validator("validators", mode="before")
    @classmethod
    def normalize_validators(cls, v: Any) -> Any:
        """Accept bare kind names (``- email``) as parameterless entries."""
        if not isinstance(v, list):
            return v
        return [{entry: None} if isinstance(entry, str) else entry for entry in v]

    @field_validator("validators")
    @classmethod
    def validate_validator_entries(cls, v: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Each validator entry must name exactly one kind."""
        for entry in v:
            if len(entry) != 1:
                raise ValueError(
                    f"Validator entry must have exactly one key, got {sorted(entry)}"
                )
        return v


class StepConfig(BaseModel):
    """Configuration for a step."""

    id: str = Field(min_length=1)
    title: str
    description: str | None = None
    fields: List[FieldConfig] = Field(default_factory=list)

    model_config = {"extra": "forbid"}


HookEntry = Union[str, Dict[str, Any]]


class HooksConfig(BaseModel):
    """Hook callback references, keyed by event.

    Entries are ``"module.path:function"`` strings or ``{function: ...}``
    mappings. Unknown event keys are rejected.
    """

    on_step_change: Optional[List[HookEntry]] = None
    on_validation_failed: Optional[List[HookEntry]] = None
    on_submit: Optional[List[HookEntry]] = None
    on_error: Optional[List[HookEntry]] = None

    model_config = {"extra": "forbid"}


class WizardConfig(BaseModel):
    """Complete wizard configuration."""

    name: str = "wizard"
    version: str = "1.0.0"
    description: str = ""
    submit_label: str = DEFAULT_SUBMIT_LABEL
    initial_data: Dict[str, Any] = Field(default_factory=dict)
    steps: List[StepConfig] = Field(min_length=1)
    hooks: HooksConfig = Field(default_factory=HooksConfig)

    @field_validator("hooks", mode="before")
    @classmethod
    def normalize_hooks(cls, v: Any) -> Any:
        """An empty ``hooks:`` section parses as None."""
        return {} if v is None else v


def validate_config(config: Dict[str, Any]) -> WizardConfig:
    """Validate a raw wizard config dict.

    Args:
        config: Raw configuration (e.g. parsed YAML)

    Returns:
        Validated WizardConfig

    Raises:
        WizardConfigurationError: If the config does not match the schema
    """
    if not isinstance(config, dict):
        raise WizardConfigurationError(
            f"Wizard config must be a mapping, got {type(config).__name__}",
            context={"type": type(config).__name__},
        )
    try:
        return WizardConfig.model_validate(config)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
        raise WizardConfigurationError(
            f"Invalid wizard config: {'; '.join(errors)}",
            context={"errors": errors, "name": config.get("name")},
        ) from e
