"""Common exception hierarchy for all stepform packages.

Every stepform error carries an optional context dictionary so that callers
can report *which* field, step, or callback was involved without parsing
the message text.

Example:
    ```python
    from stepform_common.exceptions import ConfigurationError, StepformError

    raise ConfigurationError(
        "Duplicate field name",
        context={"field": "email", "steps": ["info", "contact"]}
    )

    # Catch any stepform error
    try:
        operation()
    except StepformError as e:
        logger.error("Error: %s", e)
        if e.context:
            logger.error("Context: %s", e.context)
    ```

Package-Specific Extensions:
    ```python
    from stepform_common.exceptions import ConfigurationError

    class WizardConfigurationError(ConfigurationError):
        '''Raised when a wizard definition is invalid.'''
    ```
"""

from typing import Any, Dict


class StepformError(Exception):
    """Base exception for all stepform packages.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (field names, step ids, etc.)
        details: Alternative to context (both are supported)

    Example:
        ```python
        error = StepformError(
            "Operation failed",
            context={"step": "info", "field": "email"}
        )
        str(error)
        # 'Operation failed'
        error.context
        # {'step': 'info', 'field': 'email'}
        ```
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        """Initialize the exception with optional context.

        Args:
            message: Error message
            context: Optional context dictionary
            details: Optional details dictionary (takes precedence over context)
        """
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class ValidationError(StepformError):
    """Raised when validation cannot be carried out.

    Ordinary "this value is wrong" results are *not* exceptions in stepform;
    they are reported as field error messages. Use this exception when the
    validation machinery itself fails, e.g. a custom validator raises.

    Example:
        ```python
        raise ValidationError(
            "Validator crashed",
            context={"field": "email", "error": "TypeError"}
        )
        ```
    """

    pass


class ConfigurationError(StepformError):
    """Raised when configuration is invalid or missing.

    Use this exception for configuration-related errors including:
    - Missing required configuration
    - Invalid configuration values
    - Duplicate identifiers

    Example:
        ```python
        raise ConfigurationError(
            "Wizard must have at least one step",
            context={"step_count": 0}
        )
        ```
    """

    pass


class SerializationError(StepformError):
    """Raised when serialization fails.

    Example:
        ```python
        raise SerializationError(
            "Cannot serialize object",
            context={"type": "Widget"}
        )
        ```
    """

    pass


__all__ = [
    "StepformError",
    "ValidationError",
    "ConfigurationError",
    "SerializationError",
]
