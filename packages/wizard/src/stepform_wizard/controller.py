"""WizardController: the multi-step form state machine.

The controller owns a ``WizardState`` and exposes the only operations that
may change it. Forward moves are gated by step validation; backward moves
never are. Advancing from the last step dispatches the caller's submit
callback exactly once at a time.

Example:
    ```python
    steps = [
        StepDescriptor(
            id="info",
            title="Create your account",
            fields=(
                FieldDescriptor("email", "Email", FieldKind.EMAIL, required=True,
                                validate=EmailValidator()),
            ),
        ),
        StepDescriptor(
            id="password",
            title="Choose a password",
            fields=(
                FieldDescriptor("password", "Password", FieldKind.PASSWORD, required=True,
                                validate=MinLengthValidator(8)),
            ),
        ),
    ]

    controller = WizardController(steps, on_submit=api.sign_up)
    controller.set_field("email", "a@b.com")
    await controller.advance()          # AdvanceOutcome.ADVANCED
    controller.set_field("password", "s3cretpass")
    await controller.advance()          # AdvanceOutcome.SUBMITTED
    ```
"""

import inspect
import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Iterable, Mapping, Union

from .exceptions import WizardConfigurationError
from .fields import FieldKind, StepDescriptor
from .hooks import WizardHooks
from .state import (
    DEFAULT_SUBMIT_LABEL,
    NEXT_LABEL,
    SUBMITTING_LABEL,
    WizardSnapshot,
    WizardState,
)
from .validation import validate_step

logger = logging.getLogger(__name__)

SubmitFn = Callable[[dict[str, Any]], Union[None, Awaitable[None]]]


class AdvanceOutcome(str, Enum):
    """Result of a forward navigation attempt."""

    BLOCKED = "blocked"  # current step failed validation
    ADVANCED = "advanced"  # moved to the next step
    SUBMITTED = "submitted"  # last step, submit callback succeeded
    IGNORED = "ignored"  # a submit is already in flight


def check_steps(steps: tuple[StepDescriptor, ...]) -> None:
    """Reject wizard definitions that could only fail at runtime.

    Raises:
        WizardConfigurationError: If there are no steps, a step id or field
            name is duplicated, or a select field has no options
    """
    if not steps:
        raise WizardConfigurationError(
            "Wizard must have at least one step", context={"step_count": 0}
        )

    step_ids: set[str] = set()
    field_owner: dict[str, str] = {}
    for step in steps:
        if step.id in step_ids:
            raise WizardConfigurationError(
                f"Duplicate step id '{step.id}'", context={"step": step.id}
            )
        step_ids.add(step.id)

        for field_descriptor in step.fields:
            owner = field_owner.get(field_descriptor.name)
            if owner is not None:
                raise WizardConfigurationError(
                    f"Duplicate field name '{field_descriptor.name}' "
                    f"in steps '{owner}' and '{step.id}'",
                    context={"field": field_descriptor.name, "steps": [owner, step.id]},
                )
            field_owner[field_descriptor.name] = step.id

            if field_descriptor.kind is FieldKind.SELECT and not field_descriptor.options:
                raise WizardConfigurationError(
                    f"Select field '{field_descriptor.name}' has no options",
                    context={"field": field_descriptor.name, "step": step.id},
                )


class WizardController:
    """Guarded navigation over an ordered list of steps.

    Attributes:
        steps: The wizard's steps, in navigation order
        hooks: Lifecycle hooks triggered on navigation and submission
        submit_label: Forward-button label on the last step
    """

    def __init__(
        self,
        steps: Iterable[StepDescriptor],
        on_submit: SubmitFn,
        initial_data: Mapping[str, Any] | None = None,
        *,
        submit_label: str = DEFAULT_SUBMIT_LABEL,
        hooks: WizardHooks | None = None,
    ):
        """Initialize the controller.

        Args:
            steps: Ordered step descriptors (at least one)
            on_submit: Callback receiving a copy of the accumulated data
                when the last step is advanced. May be sync or async and
                may raise.
            initial_data: Optional seed for the accumulated data. Values
                here take precedence over field defaults.
            submit_label: Forward-button label on the last step
            hooks: Optional lifecycle hooks

        Raises:
            WizardConfigurationError: If the steps are invalid or
                ``on_submit`` is not callable
        """
        self._steps = tuple(steps)
        check_steps(self._steps)
        if not callable(on_submit):
            raise WizardConfigurationError(
                "on_submit must be callable",
                context={"type": type(on_submit).__name__},
            )

        self._on_submit = on_submit
        self._initial_data = dict(initial_data or {})
        self.submit_label = submit_label
        self.hooks = hooks or WizardHooks()
        self._state = WizardState(data=self._seed_data())

    def _seed_data(self) -> dict[str, Any]:
        data = {
            f.name: f.default
            for step in self._steps
            for f in step.fields
            if f.default is not None
        }
        data.update(self._initial_data)
        return data

    # -- Read-only views -----------------------------------------------------

    @property
    def steps(self) -> tuple[StepDescriptor, ...]:
        return self._steps

    @property
    def step_count(self) -> int:
        return len(self._steps)

    @property
    def step_index(self) -> int:
        return self._state.step_index

    @property
    def current_step(self) -> StepDescriptor:
        return self._steps[self._state.step_index]

    @property
    def is_first_step(self) -> bool:
        return self._state.step_index == 0

    @property
    def is_last_step(self) -> bool:
        return self._state.step_index == len(self._steps) - 1

    @property
    def data(self) -> dict[str, Any]:
        """Copy of the accumulated data."""
        return dict(self._state.data)

    @property
    def field_errors(self) -> dict[str, str]:
        """Copy of the current field errors."""
        return dict(self._state.field_errors)

    @property
    def submitting(self) -> bool:
        return self._state.submitting

    @property
    def submit_count(self) -> int:
        return self._state.submit_count

    @property
    def last_error(self) -> BaseException | None:
        return self._state.last_error

    @property
    def progress(self) -> float:
        """Fraction of the wizard reached, ``(step_index + 1) / step_count``."""
        return (self._state.step_index + 1) / len(self._steps)

    @property
    def action_label(self) -> str:
        if self._state.submitting:
            return SUBMITTING_LABEL
        if self.is_last_step:
            return self.submit_label
        return NEXT_LABEL

    def get_state(self) -> WizardSnapshot:
        """Take a snapshot of the state for rendering."""
        return WizardSnapshot(
            step_index=self._state.step_index,
            step_id=self.current_step.id,
            step_count=len(self._steps),
            data=dict(self._state.data),
            field_errors=dict(self._state.field_errors),
            submitting=self._state.submitting,
            progress=self.progress,
            action_label=self.action_label,
        )

    # -- Field mutation ------------------------------------------------------

    def set_field(self, name: str, value: Any) -> None:
        """Store a field value and clear that field's error.

        No validation is run. The field need not belong to the current step.
        """
        self._state.data[name] = value
        self._state.field_errors.pop(name, None)

    # -- Validation ----------------------------------------------------------

    def validate_step(self, index: int | None = None) -> bool:
        """Validate a step and store its errors as the current field errors.

        Args:
            index: Step index to validate (defaults to the current step)

        Returns:
            True if every field of the step is valid

        Raises:
            IndexError: If ``index`` is out of range
        """
        step = self._step_at(self._state.step_index if index is None else index)
        result = validate_step(step, self._state.data)
        self._state.field_errors = dict(result.errors)
        return result.is_valid

    def can_click_step(self, index: int) -> bool:
        """Whether the step indicator for ``index`` is interactive.

        Completed steps are always revisitable. The current step is
        interactive only while it validates; clicking it advances. Future
        steps are inert. Does not change the field errors.
        """
        current = self._state.step_index
        if 0 <= index < current:
            return True
        if index == current:
            return validate_step(self.current_step, self._state.data).is_valid
        return False

    def _step_at(self, index: int) -> StepDescriptor:
        if not 0 <= index < len(self._steps):
            raise IndexError(
                f"Step index {index} out of range for wizard with {len(self._steps)} steps"
            )
        return self._steps[index]

    # -- Navigation ----------------------------------------------------------

    async def advance(self) -> AdvanceOutcome:
        """Move forward one step, or submit from the last step.

        Returns:
            The outcome of the attempt

        Raises:
            Exception: Whatever the submit callback raised. ``submitting``
                is reset and ``step_index``/``data`` are left untouched. A
                failing ``on_submit`` hook after a successful submit is
                logged and does not raise.
        """
        step = self.current_step
        if self._state.submitting:
            logger.warning("Ignoring advance on step '%s': submit already in flight", step.id)
            return AdvanceOutcome.IGNORED

        if not self.validate_step():
            logger.debug(
                "Advance blocked on step '%s': %s", step.id, sorted(self._state.field_errors)
            )
            await self.hooks.trigger_validation_failed(
                step.id, self._state.field_errors, self.data
            )
            return AdvanceOutcome.BLOCKED

        if not self.is_last_step:
            await self._move_to(self._state.step_index + 1)
            return AdvanceOutcome.ADVANCED

        await self._submit(step)
        return AdvanceOutcome.SUBMITTED

    async def retreat(self) -> bool:
        """Move back one step without validating.

        Returns:
            True if the step changed, False on the first step
        """
        if self._state.step_index <= 0:
            return False
        await self._move_to(self._state.step_index - 1)
        return True

    async def jump_to(self, target: int) -> bool:
        """Navigate directly to ``target``.

        Any earlier step is reachable unconditionally. The next step is
        reachable only through a successful ``advance()``. Every other
        target, including the current step, is ignored.

        Returns:
            True if the step changed
        """
        current = self._state.step_index
        if 0 <= target < current:
            await self._move_to(target)
            return True
        if target == current + 1 and target < len(self._steps):
            return await self.advance() is AdvanceOutcome.ADVANCED
        logger.debug("Ignoring jump from step %d to %d", current, target)
        return False

    async def click_step(self, index: int) -> AdvanceOutcome | bool:
        """Handle a click on the step indicator for ``index``.

        A completed step is jumped to; the current step (when valid)
        advances, which submits from the last step. Inert indicators do
        nothing.

        Returns:
            The advance outcome when the current step was clicked, otherwise
            whether the step changed
        """
        if not self.can_click_step(index):
            return False
        if index == self._state.step_index:
            return await self.advance()
        return await self.jump_to(index)

    def reset(self) -> bool:
        """Return to the first step with freshly seeded data.

        Returns:
            False (and does nothing) while a submit is in flight
        """
        if self._state.submitting:
            logger.warning("Ignoring reset: submit already in flight")
            return False
        self._state = WizardState(data=self._seed_data())
        return True

    async def _move_to(self, index: int) -> None:
        old_index = self._state.step_index
        self._state.step_index = index
        self._state.field_errors = {}
        step_id = self._steps[index].id
        logger.debug("Wizard moved from step %d to %d ('%s')", old_index, index, step_id)
        await self.hooks.trigger_step_change(old_index, index, step_id, self.data)

    async def _submit(self, step: StepDescriptor) -> None:
        state = self._state
        payload = dict(state.data)
        state.submitting = True
        state.last_error = None
        logger.info("Submitting wizard from step '%s' with %d field(s)", step.id, len(payload))

        try:
            result = self._on_submit(payload)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            state.last_error = e
            await self.hooks.trigger_error(step.id, payload, e)
            raise
        finally:
            state.submitting = False

        state.submit_count += 1
        logger.info("Wizard submitted from step '%s'", step.id)
        try:
            await self.hooks.trigger_submit(step.id, payload)
        except Exception:
            # submit already succeeded; listener failures are logged only
            logger.exception("Submit hook failed after submitting from step '%s'", step.id)

    def __repr__(self) -> str:
        return (
            f"WizardController(step={self._state.step_index + 1}/{len(self._steps)}, "
            f"submitting={self._state.submitting})"
        )
