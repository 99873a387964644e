r"""Test code for `.type_descriptor`\ ."""

from typing import Any, Optional

from pydantic import BaseModel

from affordance_model import TypeDescriptor


class Order(BaseModel):
    id: int
    note: Optional[str] = None


def test_any():
    """The default descriptor is unknown, and allows any value."""
    assert TypeDescriptor.ANY.is_unknown
    assert TypeDescriptor() == TypeDescriptor.ANY
    assert TypeDescriptor.of(Any).is_unknown
    assert TypeDescriptor.ANY.json_schema() == {}


def test_equality():
    """Descriptors are equal if they wrap the same type."""
    assert TypeDescriptor.of(int) == TypeDescriptor.of(int)
    assert hash(TypeDescriptor.of(int)) == hash(TypeDescriptor.of(int))
    assert TypeDescriptor.of(int) != TypeDescriptor.of(str)
    assert TypeDescriptor.of(list[int]) == TypeDescriptor.of(list[int])
    assert not TypeDescriptor.of(int).is_unknown


def test_json_schema():
    """JSON Schema is generated by pydantic."""
    assert TypeDescriptor.of(int).json_schema()["type"] == "integer"
    assert TypeDescriptor.of(str).json_schema()["type"] == "string"
    array = TypeDescriptor.of(list[int]).json_schema()
    assert array["type"] == "array"
    assert array["items"]["type"] == "integer"
    model = TypeDescriptor.of(Order).json_schema()
    assert model["type"] == "object"
    assert model["required"] == ["id"]


def test_repr():
    """The repr names the wrapped type."""
    assert repr(TypeDescriptor.of(Order)) == "TypeDescriptor(Order)"
