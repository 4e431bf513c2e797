"""Resolve ``"module.path:function"`` references to callables.

Wizard configs name custom validators and hook callbacks by reference.
WizardConfigLoader and WizardHooks.from_config() resolve them here.
"""

import importlib
import logging
from types import ModuleType
from typing import Any, Callable

logger = logging.getLogger(__name__)

REFERENCE_EXAMPLE = "myapp.validators:strong_password"
MAX_LISTED_CALLABLES = 10


def split_reference(func_ref: str) -> tuple[str, str]:
    """Split a reference into ``(module_path, attribute_name)``.

    ``"pkg.mod:func"`` splits on the colon; ``"pkg.mod.func"`` treats the
    last dotted segment as the attribute.

    Raises:
        ValueError: If the reference is empty or either part is missing
    """
    ref = (func_ref or "").strip()
    if not ref:
        raise ValueError(
            "Empty function reference. Expected 'module.path:function_name' "
            "or 'module.path.function_name'"
        )

    if ":" in ref:
        module_path, _, func_name = ref.partition(":")
    elif "." in ref:
        module_path, _, func_name = ref.rpartition(".")
    else:
        raise ValueError(
            f"Invalid function reference: '{ref}'. It needs a ':' or '.' "
            f"between module and function, e.g. '{REFERENCE_EXAMPLE}'"
        )

    if not module_path:
        raise ValueError(
            f"Invalid function reference: '{ref}'. Module path is empty, "
            f"e.g. '{REFERENCE_EXAMPLE}'"
        )
    if not func_name:
        raise ValueError(
            f"Invalid function reference: '{ref}'. Function name is empty, "
            f"e.g. '{REFERENCE_EXAMPLE}'"
        )
    return module_path, func_name


def _public_callables(module: ModuleType) -> str:
    names = [
        name for name in dir(module)
        if not name.startswith("_") and callable(getattr(module, name, None))
    ]
    listed = ", ".join(names[:MAX_LISTED_CALLABLES])
    if len(names) > MAX_LISTED_CALLABLES:
        listed += f", ... ({len(names) - MAX_LISTED_CALLABLES} more)"
    return listed or "(none)"


def resolve_function(func_ref: str) -> Callable[..., Any]:
    """Resolve a function reference string to a callable.

    Args:
        func_ref: ``"module.path:function_name"`` (preferred) or
            ``"module.path.function_name"``

    Returns:
        The referenced callable

    Raises:
        ValueError: If the reference is malformed or names a non-callable
        ImportError: If the module cannot be imported
        AttributeError: If the module has no such attribute

    Example:
        ```python
        strong = resolve_function("myapp.validators:strong_password")
        strong("hunter2", {})
        ```
    """
    module_path, func_name = split_reference(func_ref)

    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise ImportError(
            f"Cannot import module '{module_path}' for reference '{func_ref}': {e}"
        ) from e

    try:
        func = getattr(module, func_name)
    except AttributeError:
        raise AttributeError(
            f"Function '{func_name}' not found in module '{module_path}'. "
            f"Available functions: {_public_callables(module)}"
        ) from None

    if not callable(func):
        raise ValueError(
            f"'{func_name}' in module '{module_path}' is not callable "
            f"(got {type(func).__name__})"
        )

    logger.debug("Resolved function reference '%s'", func_ref)
    return func


def resolve_functions(
    func_refs: dict[str, str | Callable[..., Any]],
) -> dict[str, Callable[..., Any]]:
    """Resolve every value of a name -> reference mapping.

    Callables pass through unchanged; strings go through resolve_function().

    Raises:
        ValueError: If a value is neither a string nor a callable
        ImportError: If a referenced module cannot be imported
        AttributeError: If a referenced function is not found
    """
    resolved: dict[str, Callable[..., Any]] = {}
    for name, ref in func_refs.items():
        if callable(ref):
            resolved[name] = ref
        elif isinstance(ref, str):
            resolved[name] = resolve_function(ref)
        else:
            raise ValueError(
                f"Invalid function reference type for '{name}': "
                f"expected string or callable, got {type(ref).__name__}"
            )
    return resolved
