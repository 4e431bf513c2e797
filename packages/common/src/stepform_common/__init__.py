"""Common utilities and base classes for stepform packages.

- **Exceptions**: Unified exception hierarchy with context support
- **Serialization**: ``to_dict`` protocol and helpers

Example:
    ```python
    from stepform_common import ConfigurationError, serialize

    raise ConfigurationError("Wizard has no steps", context={"step_count": 0})
    ```
"""

from stepform_common.exceptions import (
    ConfigurationError,
    SerializationError,
    StepformError,
    ValidationError,
)
from stepform_common.serialization import (
    Serializable,
    callable_name,
    serialize,
)

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "StepformError",
    "ValidationError",
    "ConfigurationError",
    "SerializationError",
    # Serialization
    "Serializable",
    "serialize",
    "callable_name",
]
