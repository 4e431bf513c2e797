"""Wizard lifecycle hooks for presentation layers.

A renderer usually wants to know when the step changes, when a forward
move was blocked, and how a submit ended. WizardHooks collects callbacks
for those events; the controller triggers them.

Example:
    ```python
    from stepform_wizard.hooks import WizardHooks

    hooks = (
        WizardHooks()
        .on_step_change(lambda old, new, data: print(f"{old} -> {new}"))
        .on_validation_failed(lambda step, errors: show_errors(errors))
        .on_submit(lambda data: toast("Saved"))
        .on_error(lambda step, data, error: toast(str(error)))
    )

    controller = WizardController(steps, on_submit=save, hooks=hooks)
    ```
"""

import inspect
import logging
from typing import Any, Awaitable, Callable, Union

from .function_resolver import resolve_function

logger = logging.getLogger(__name__)


# Type aliases for hook callbacks
StepChangeCallback = Callable[[int, int, dict[str, Any]], Union[None, Awaitable[None]]]
ValidationFailedCallback = Callable[[str, dict[str, str]], Union[None, Awaitable[None]]]
SubmitCallback = Callable[[dict[str, Any]], Union[None, Awaitable[None]]]
ErrorCallback = Callable[
    [str, dict[str, Any], BaseException], Union[None, Awaitable[None]]
]


class WizardHooks:
    """Lifecycle hooks for wizard navigation and submission.

    - **on_step_change**: Called after the step index changed
    - **on_validation_failed**: Called when a forward move was blocked
    - **on_submit**: Called after the submit callback succeeded
    - **on_error**: Called when the submit callback or another hook failed

    Callbacks may be sync or return an awaitable. An exception raised by a
    hook is re-raised by its trigger after the error hooks have run; the
    controller logs, rather than propagates, failures of ``on_submit``
    hooks, which run after the submit succeeded. An exception raised by an
    error hook is logged and suppressed.
    """

    def __init__(self) -> None:
        """Initialize WizardHooks with empty hook registrations."""
        self._step_change_hooks: list[StepChangeCallback] = []
        self._validation_failed_hooks: list[ValidationFailedCallback] = []
        self._submit_hooks: list[SubmitCallback] = []
        self._error_hooks: list[ErrorCallback] = []

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "WizardHooks":
        """Create WizardHooks from configuration dict.

        Args:
            config: Configuration dict with optional keys ``on_step_change``,
                ``on_validation_failed``, ``on_submit`` and ``on_error``, each
                a list of ``"module.path:func"`` strings or
                ``{function: "module.path:func"}`` dicts

        Returns:
            Configured WizardHooks instance

        Example config:
            ```yaml
            hooks:
              on_step_change:
                - "myapp.hooks:track_step"
              on_error:
                - function: "myapp.hooks:report_failure"
            ```
        """
        hooks = cls()
        registrars = {
            "on_step_change": hooks.on_step_change,
            "on_validation_failed": hooks.on_validation_failed,
            "on_submit": hooks.on_submit,
            "on_error": hooks.on_error,
        }

        for key, register in registrars.items():
            for hook_config in config.get(key, []) or []:
                callback = cls._load_callback(hook_config)
                if callback:
                    register(callback)

        return hooks

    @staticmethod
    def _load_callback(hook_config: dict[str, Any] | str) -> Callable[..., Any] | None:
        """Load a callback function from configuration.

        Args:
            hook_config: Either a string "module.path:function" or
                a dict with "function" key

        Returns:
            The loaded callback function, or None if loading failed
        """
        if isinstance(hook_config, str):
            func_ref = hook_config
        elif isinstance(hook_config, dict):
            func_ref = hook_config.get("function", "")
        else:
            logger.warning("Invalid hook config type: %s", type(hook_config))
            return None

        if not func_ref:
            return None

        try:
            return resolve_function(func_ref)
        except (ValueError, ImportError, AttributeError) as e:
            logger.warning("Failed to load hook function '%s': %s", func_ref, e)
            return None

    def on_step_change(self, callback: StepChangeCallback) -> "WizardHooks":
        """Register a callback for step changes.

        Args:
            callback: Function(old_index, new_index, data) -> None or awaitable

        Returns:
            Self for method chaining
        """
        self._step_change_hooks.append(callback)
        return self

    def on_validation_failed(self, callback: ValidationFailedCallback) -> "WizardHooks":
        """Register a callback for blocked forward moves.

        Args:
            callback: Function(step_id, field_errors) -> None or awaitable

        Returns:
            Self for method chaining
        """
        self._validation_failed_hooks.append(callback)
        return self

    def on_submit(self, callback: SubmitCallback) -> "WizardHooks":
        """Register a callback for successful submission.

        Args:
            callback: Function(data) -> None or awaitable

        Returns:
            Self for method chaining
        """
        self._submit_hooks.append(callback)
        return self

    def on_error(self, callback: ErrorCallback) -> "WizardHooks":
        """Register a callback for submit and hook failures.

        Args:
            callback: Function(step_id, data, error) -> None or awaitable

        Returns:
            Self for method chaining
        """
        self._error_hooks.append(callback)
        return self

    async def trigger_step_change(
        self, old_index: int, new_index: int, step_id: str, data: dict[str, Any]
    ) -> None:
        """Trigger all registered step-change hooks.

        Raises:
            Exception: Re-raises any exception from hooks after
                triggering error hooks
        """
        for callback in self._step_change_hooks:
            try:
                await self._invoke_callback(callback, old_index, new_index, data)
            except Exception as e:
                await self.trigger_error(step_id, data, e)
                raise

    async def trigger_validation_failed(
        self, step_id: str, errors: dict[str, str], data: dict[str, Any]
    ) -> None:
        """Trigger all registered validation-failed hooks.

        Raises:
            Exception: Re-raises any exception from hooks after
                triggering error hooks
        """
        for callback in self._validation_failed_hooks:
            try:
                await self._invoke_callback(callback, step_id, dict(errors))
            except Exception as e:
                await self.trigger_error(step_id, data, e)
                raise

    async def trigger_submit(self, step_id: str, data: dict[str, Any]) -> None:
        """Trigger all registered submit hooks.

        Raises:
            Exception: Re-raises any exception from hooks after
                triggering error hooks
        """
        for callback in self._submit_hooks:
            try:
                await self._invoke_callback(callback, data)
            except Exception as e:
                await self.trigger_error(step_id, data, e)
                raise

    async def trigger_error(
        self, step_id: str, data: dict[str, Any], error: BaseException
    ) -> None:
        """Invoke error hooks for an exception.

        Args:
            step_id: Step where the error occurred
            data: Wizard data at time of error
            error: The exception that occurred
        """
        logger.error("Wizard error in step %s: %s", step_id, error)

        for callback in self._error_hooks:
            try:
                await self._invoke_callback(callback, step_id, data, error)
            except Exception:
                logger.exception("Error in error handler")

    async def _invoke_callback(
        self, callback: Callable[..., Any], *args: Any
    ) -> None:
        """Invoke a callback, handling both sync and async."""
        result = callback(*args)
        if inspect.isawaitable(result):
            await result

    def clear(self) -> None:
        """Clear all registered hooks."""
        self._step_change_hooks.clear()
        self._validation_failed_hooks.clear()
        self._submit_hooks.clear()
        self._error_hooks.clear()

    @property
    def hook_count(self) -> dict[str, int]:
        """Get count of registered hooks by type."""
        return {
            "step_change": len(self._step_change_hooks),
            "validation_failed": len(self._validation_failed_hooks),
            "submit": len(self._submit_hooks),
            "error": len(self._error_hooks),
        }
