r"""Test code for `.property_metadata`\ ."""

from pydantic import ValidationError
import pytest

from affordance_model import (
    ConfigurableProperty,
    FormProperty,
    Named,
    PropertyMetadata,
    TypeDescriptor,
)
from affordance_model.exceptions import InvalidArgumentError


def test_defaults():
    """Only the name is required, everything else is unconstrained."""
    prop = PropertyMetadata(name="title")
    assert prop.name == "title"
    assert prop.required is False
    assert prop.read_only is False
    assert prop.pattern is None
    assert prop.type == TypeDescriptor.ANY
    assert prop.type.is_unknown


@pytest.mark.parametrize("name", ["title", "x", "first_name", "with space"])
def test_has_name(name):
    """A property has exactly its own name, and no other."""
    prop = PropertyMetadata(name=name)
    assert prop.has_name(name)
    assert not prop.has_name(name + "_other")
    assert not prop.has_name(name.upper() + "X")


@pytest.mark.parametrize("name", ["", None])
def test_has_name_rejects_empty_names(name):
    """An empty or missing name is a contract violation."""
    prop = PropertyMetadata(name="title")
    with pytest.raises(InvalidArgumentError):
        prop.has_name(name)
    # InvalidArgumentError should be usable as a plain ValueError
    with pytest.raises(ValueError):
        prop.has_name(name)


def test_empty_name_is_invalid():
    """Property metadata must have a name."""
    with pytest.raises(ValidationError):
        PropertyMetadata(name="")


def test_invalid_pattern():
    """Patterns must be valid regular expressions."""
    assert PropertyMetadata(name="a", pattern=r"^\d+$").pattern == r"^\d+$"
    with pytest.raises(ValidationError, match="regular expression"):
        PropertyMetadata(name="a", pattern="[unclosed")


def test_immutable():
    """Property metadata can't be changed after it's created."""
    prop = PropertyMetadata(name="title")
    with pytest.raises(ValidationError):
        prop.required = True


def test_equality_and_hash():
    """Equality is structural, and overrides are distinct values."""
    a = PropertyMetadata(name="title", required=True)
    b = PropertyMetadata(name="title", required=True)
    override = PropertyMetadata(name="title", required=True, read_only=True)
    assert a == b
    assert hash(a) == hash(b)
    assert a != override
    assert len({a, b, override}) == 2


def test_derive():
    """Deriving metadata changes a copy, not the original."""
    base = PropertyMetadata(name="id", type=TypeDescriptor.of(int))
    derived = base.derive(read_only=True, pattern=r"\d+")
    assert derived.name == "id"
    assert derived.read_only
    assert derived.pattern == r"\d+"
    assert derived.type == TypeDescriptor.of(int)
    assert not base.read_only
    assert base.pattern is None
    # "changing" the name to the same value is fine
    assert base.derive(name="id") == base


def test_derive_cannot_rename():
    """Deriving would make a different property if the name changed."""
    with pytest.raises(InvalidArgumentError):
        PropertyMetadata(name="id").derive(name="identifier")


def test_derive_validates():
    """Derived metadata is validated like new metadata."""
    with pytest.raises(ValidationError):
        PropertyMetadata(name="id").derive(pattern="(")


def test_protocols():
    """FormProperty is named and configurable, metadata is only named."""
    form_property = FormProperty(name="title")
    assert isinstance(form_property, Named)
    assert isinstance(form_property, ConfigurableProperty)
    assert isinstance(PropertyMetadata(name="title"), Named)
    assert not isinstance(PropertyMetadata(name="title"), ConfigurableProperty)


@pytest.mark.parametrize("changes", [{"readonly": True}, {"requird": True}])
def test_derive_rejects_unknown_constraints(changes):
    """A misspelled constraint fails rather than returning an unchanged copy."""
    with pytest.raises(ValidationError):
        PropertyMetadata(name="title").derive(**changes)


def test_unknown_fields_rejected():
    """Metadata and form properties don't accept unknown fields."""
    with pytest.raises(ValidationError):
        PropertyMetadata(name="title", readonly=True)
    with pytest.raises(ValidationError):
        FormProperty(name="title", pattern=r"\w+")


def test_type_descriptor_default():
    """Metadata can be built without a type, and uses the unknown type."""
    assert TypeDescriptor().is_unknown
    assert PropertyMetadata(name="title").type == TypeDescriptor()
