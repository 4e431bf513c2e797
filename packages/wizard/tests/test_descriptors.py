"""Tests for step and field descriptors."""

from dataclasses import FrozenInstanceError

import pytest

from stepform_common import Serializable, serialize
from stepform_wizard import FieldDescriptor, FieldKind, FieldOption, StepDescriptor
from stepform_wizard.validators import MinLengthValidator
from wizard_helpers import no_spaces


class TestFieldDescriptor:

    def test_defaults(self) -> None:
        field = FieldDescriptor(name="title", label="Title")

        assert field.kind is FieldKind.TEXT
        assert field.required is False
        assert field.options == ()
        assert field.validate is None

    def test_kind_accepts_string(self) -> None:
        field = FieldDescriptor(name="when", label="When", kind="date")

        assert field.kind is FieldKind.DATE

    def test_invalid_kind_rejected(self) -> None:
        with pytest.raises(ValueError):
            FieldDescriptor(name="x", label="X", kind="slider")

    def test_options_normalized_to_tuple(self) -> None:
        field = FieldDescriptor(
            name="priority",
            label="Priority",
            kind=FieldKind.SELECT,
            options=[FieldOption("Low", "LOW"), FieldOption("High", "HIGH")],
        )

        assert isinstance(field.options, tuple)
        assert [o.value for o in field.options] == ["LOW", "HIGH"]

    def test_is_immutable(self) -> None:
        field = FieldDescriptor(name="title", label="Title")

        with pytest.raises(FrozenInstanceError):
            field.required = True  # type: ignore[misc]

    def test_to_dict_names_builtin_validator_by_kind(self) -> None:
        field = FieldDescriptor(
            name="password",
            label="Password",
            kind=FieldKind.PASSWORD,
            required=True,
            validate=MinLengthValidator(8),
            placeholder="Min 8 characters",
        )

        assert field.to_dict() == {
            "name": "password",
            "label": "Password",
            "kind": "password",
            "required": True,
            "options": [],
            "validate": "min_length",
            "placeholder": "Min 8 characters",
            "default": None,
        }

    def test_to_dict_names_function_by_reference(self) -> None:
        field = FieldDescriptor(name="username", label="Username", validate=no_spaces)

        assert field.to_dict()["validate"] == "wizard_helpers:no_spaces"


class TestStepDescriptor:

    @pytest.fixture
    def step(self) -> StepDescriptor:
        return StepDescriptor(
            id="basic",
            title="Task Details",
            description="What do you need to accomplish?",
            fields=[
                FieldDescriptor(name="title", label="Title", required=True),
                FieldDescriptor(name="description", label="Description", kind=FieldKind.TEXTAREA),
            ],
        )

    def test_field_names_in_order(self, step) -> None:
        assert step.field_names == ["title", "description"]

    def test_fields_normalized_to_tuple(self, step) -> None:
        assert isinstance(step.fields, tuple)

    def test_get_field(self, step) -> None:
        assert step.get_field("title").label == "Title"
        assert step.get_field("missing") is None

    def test_serializable(self, step) -> None:
        assert isinstance(step, Serializable)

        data = serialize(step)

        assert data["id"] == "basic"
        assert data["description"] == "What do you need to accomplish?"
        assert [f["name"] for f in data["fields"]] == ["title", "description"]
