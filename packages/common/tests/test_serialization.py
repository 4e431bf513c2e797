"""Tests for the serialization protocol and utilities."""

from dataclasses import dataclass

import pytest

from stepform_common.exceptions import SerializationError
from stepform_common.serialization import Serializable, callable_name, serialize


@dataclass
class Option:
    """Simple serializable class for testing."""
    label: str
    value: str

    def to_dict(self):
        return {"label": self.label, "value": self.value}


class NotADict:
    def to_dict(self):
        return ["label", "value"]


class Broken:
    def to_dict(self):
        raise KeyError("missing")


def strong_password(value, data):
    return None


class TestSerializableProtocol:
    """Test the Serializable protocol."""

    def test_class_with_to_dict_is_serializable(self):
        assert isinstance(Option("Low", "LOW"), Serializable)

    def test_plain_object_is_not_serializable(self):
        assert not isinstance(object(), Serializable)


class TestSerialize:
    """Test serialize()."""

    def test_serialize(self):
        assert serialize(Option("Low", "LOW")) == {"label": "Low", "value": "LOW"}

    def test_missing_to_dict(self):
        with pytest.raises(SerializationError, match="missing to_dict method") as exc_info:
            serialize(42)
        assert exc_info.value.context["type"] == "int"

    def test_to_dict_must_return_dict(self):
        with pytest.raises(SerializationError, match="must return a dict"):
            serialize(NotADict())

    def test_to_dict_failure_wrapped(self):
        with pytest.raises(SerializationError, match="Failed to serialize Broken") as exc_info:
            serialize(Broken())
        assert isinstance(exc_info.value.__cause__, KeyError)


class TestCallableName:
    """Test callable_name()."""

    def test_none(self):
        assert callable_name(None) is None

    def test_function(self):
        assert callable_name(strong_password).endswith("test_serialization:strong_password")

    def test_builtin(self):
        assert callable_name(len) == "builtins:len"

    def test_rule_kind_preferred(self):
        class Rule:
            rule = {"kind": "min_length", "message": "Too short"}

            def __call__(self, value, data):
                return None

        assert callable_name(Rule()) == "min_length"

    def test_callable_instance_without_rule(self):
        class Check:
            def __call__(self, value, data):
                return None

        assert callable_name(Check()) == "Check"
