"""Pytest configuration and shared fixtures for stepform_wizard tests."""

import sys
from pathlib import Path

import pytest

# Add src dirs and the tests directory (for wizard_helpers) to path for testing
PACKAGES_DIR = Path(__file__).parent.parent.parent
for path in (
    PACKAGES_DIR / "common" / "src",
    PACKAGES_DIR / "wizard" / "src",
    Path(__file__).parent,
):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from stepform_wizard import (  # noqa: E402
    FieldDescriptor,
    FieldKind,
    FieldOption,
    StepDescriptor,
)
from stepform_wizard.validators import (  # noqa: E402
    EmailValidator,
    MatchesFieldValidator,
    MinLengthValidator,
)
from wizard_helpers import RecordingSubmit  # noqa: E402


@pytest.fixture
def email_password_steps() -> list[StepDescriptor]:
    """Two steps: a required email, then a required 8-character password."""
    return [
        StepDescriptor(
            id="account",
            title="Create your account",
            fields=(
                FieldDescriptor(
                    name="email",
                    label="Email",
                    kind=FieldKind.EMAIL,
                    required=True,
                    validate=EmailValidator(),
                ),
            ),
        ),
        StepDescriptor(
            id="password",
            title="Choose a password",
            fields=(
                FieldDescriptor(
                    name="password",
                    label="Password",
                    kind=FieldKind.PASSWORD,
                    required=True,
                    validate=MinLengthValidator(8, "Password must be at least 8 characters"),
                ),
            ),
        ),
    ]


@pytest.fixture
def register_steps() -> list[StepDescriptor]:
    """Three steps mirroring a sign-up flow with a cross-field check."""
    return [
        StepDescriptor(
            id="info",
            title="Create your account",
            description="Enter your details to get started",
            fields=(
                FieldDescriptor(
                    name="email",
                    label="Email",
                    kind=FieldKind.EMAIL,
                    required=True,
                    validate=EmailValidator(),
                    placeholder="you@example.com",
                ),
                FieldDescriptor(name="full_name", label="Full Name", required=True),
            ),
        ),
        StepDescriptor(
            id="password",
            title="Choose a password",
            fields=(
                FieldDescriptor(
                    name="password",
                    label="Password",
                    kind=FieldKind.PASSWORD,
                    required=True,
                    validate=MinLengthValidator(8),
                ),
                FieldDescriptor(
                    name="confirm_password",
                    label="Confirm Password",
                    kind=FieldKind.PASSWORD,
                    required=True,
                    validate=MatchesFieldValidator("password", "Passwords do not match"),
                ),
            ),
        ),
        StepDescriptor(
            id="preferences",
            title="Preferences",
            fields=(
                FieldDescriptor(
                    name="plan",
                    label="Plan",
                    kind=FieldKind.SELECT,
                    options=(FieldOption("Free", "free"), FieldOption("Pro", "pro")),
                    default="free",
                ),
                FieldDescriptor(name="newsletter", label="Newsletter", kind=FieldKind.CHECKBOX),
            ),
        ),
    ]


@pytest.fixture
def submit() -> RecordingSubmit:
    return RecordingSubmit()
