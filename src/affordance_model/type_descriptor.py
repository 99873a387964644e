"""Semantic type handles for payload properties.

Each `.PropertyMetadata` carries a `.TypeDescriptor` that says what kind of
value the property holds. The affordance model itself treats this as an
opaque handle: it is only compared for equality. Renderers may call
`.TypeDescriptor.json_schema` to describe the type in their own format.
"""

from __future__ import annotations
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, TypeAdapter
from typing_extensions import Self

JSONSchema = dict[str, Any]  # A type to represent JSONSchema


class TypeDescriptor(BaseModel):
    """An immutable, hashable handle around a Python type."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    python_type: object = Any
    """The Python type (or type annotation) being described."""

    ANY: ClassVar[TypeDescriptor]
    """The descriptor used when no type can be determined."""

    @classmethod
    def of(cls, python_type: Any) -> Self:
        """Create a descriptor for a Python type.

        :param python_type: any type or type annotation, e.g. ``int`` or
            ``list[str]``.

        :return: a descriptor wrapping ``python_type``.
        """
        return cls(python_type=python_type)

    @property
    def is_unknown(self) -> bool:
        """Whether this descriptor stands for "any value"."""
        return self.python_type is Any

    def json_schema(self) -> JSONSchema:
        """Describe the type as JSON Schema.

        This uses `pydantic.TypeAdapter`, so it works for built-in types,
        `pydantic.BaseModel` subclasses and most annotations pydantic
        understands.

        :return: a JSON Schema dictionary. For an unknown type this is
            ``{}``, which allows any value.
        """
        if self.is_unknown:
            return {}
        return TypeAdapter(self.python_type).json_schema()

    def __repr__(self) -> str:
        """Show the wrapped type compactly."""
        name = getattr(self.python_type, "__qualname__", repr(self.python_type))
        return f"TypeDescriptor({name})"


TypeDescriptor.ANY = TypeDescriptor()
