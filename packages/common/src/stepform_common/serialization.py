"""Serialization protocol and helpers for stepform packages.

Descriptors and state snapshots expose ``to_dict()`` so a presentation
layer (or a test) can inspect them as plain data. Callables embedded in
descriptors are rendered by name, never by value.

Example:
    ```python
    from stepform_common.serialization import Serializable, serialize

    snapshot = controller.get_state()
    assert isinstance(snapshot, Serializable)
    payload = serialize(snapshot)
    ```
"""

from typing import Any, Callable, Dict, Protocol, runtime_checkable

from stepform_common.exceptions import SerializationError


@runtime_checkable
class Serializable(Protocol):
    """Protocol for objects that can render themselves as a dict.

    The ``@runtime_checkable`` decorator allows ``isinstance()`` checks.
    """

    def to_dict(self) -> Dict[str, Any]:
        """Convert object to dictionary representation.

        Returns:
            Dictionary with serialized data
        """
        ...


def serialize(obj: Any) -> Dict[str, Any]:
    """Serialize an object to dictionary.

    Convenience function that calls to_dict() with error handling.

    Args:
        obj: Object to serialize (must have to_dict method)

    Returns:
        Serialized dictionary

    Raises:
        SerializationError: If object doesn't support serialization or
            serialization fails
    """
    if not hasattr(obj, "to_dict"):
        raise SerializationError(
            f"Object of type {type(obj).__name__} is not serializable (missing to_dict method)",
            context={"type": type(obj).__name__, "object": str(obj)},
        )

    try:
        result = obj.to_dict()
        if not isinstance(result, dict):
            raise SerializationError(
                f"to_dict() must return a dict, got {type(result).__name__}",
                context={"type": type(obj).__name__, "result_type": type(result).__name__},
            )
        return result
    except Exception as e:
        if isinstance(e, SerializationError):
            raise
        raise SerializationError(
            f"Failed to serialize {type(obj).__name__}: {e}",
            context={"type": type(obj).__name__, "error": str(e)},
        ) from e


def callable_name(func: Callable[..., Any] | None) -> str | None:
    """Return a stable, human-readable name for a callable.

    Args:
        func: Callable to describe, or None

    Returns:
        ``"module:qualname"`` for functions, the class name for other
        callables, or None when ``func`` is None

    Example:
        ```python
        callable_name(len)
        # 'builtins:len'
        ```
    """
    if func is None:
        return None
    rule = getattr(func, "rule", None)
    if isinstance(rule, dict) and "kind" in rule:
        return str(rule["kind"])
    module = getattr(func, "__module__", None)
    qualname = getattr(func, "__qualname__", None)
    if module and qualname:
        return f"{module}:{qualname}"
    return type(func).__name__


__all__ = [
    "Serializable",
    "serialize",
    "callable_name",
]
