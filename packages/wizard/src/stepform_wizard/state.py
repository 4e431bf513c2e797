"""Wizard state and the read-only snapshot handed to presentation layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

NEXT_LABEL = "Next"
SUBMITTING_LABEL = "Submitting..."
DEFAULT_SUBMIT_LABEL = "Submit"


@dataclass
class WizardState:
    """Mutable wizard state, owned exclusively by a ``WizardController``.

    Attributes:
        step_index: Index of the current step, ``0 <= step_index < step_count``
        data: Accumulated field values from all steps; never reset per step
        field_errors: Errors from the most recent step validation. An entry
            is removed when its field's value changes.
        submitting: True only while the terminal submit is in flight
        submit_count: Number of successful submissions
        last_error: The most recent submit failure, cleared when the next
            submit starts
    """

    step_index: int = 0
    data: dict[str, Any] = field(default_factory=dict)
    field_errors: dict[str, str] = field(default_factory=dict)
    submitting: bool = False
    submit_count: int = 0
    last_error: BaseException | None = None


@dataclass(frozen=True)
class WizardSnapshot:
    """Point-in-time copy of the wizard state plus derived values.

    Attributes:
        step_index: Index of the current step
        step_id: Id of the current step
        step_count: Total number of steps
        data: Copy of the accumulated data
        field_errors: Copy of the current field errors
        submitting: Whether a submit is in flight
        progress: ``(step_index + 1) / step_count``
        action_label: Label for the forward button
    """

    step_index: int
    step_id: str
    step_count: int
    data: dict[str, Any]
    field_errors: dict[str, str]
    submitting: bool
    progress: float
    action_label: str

    @property
    def is_first_step(self) -> bool:
        return self.step_index == 0

    @property
    def is_last_step(self) -> bool:
        return self.step_index == self.step_count - 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "step_index": self.step_index,
            "step_id": self.step_id,
            "step_count": self.step_count,
            "data": dict(self.data),
            "field_errors": dict(self.field_errors),
            "submitting": self.submitting,
            "progress": self.progress,
            "is_first_step": self.is_first_step,
            "is_last_step": self.is_last_step,
            "action_label": self.action_label,
        }
