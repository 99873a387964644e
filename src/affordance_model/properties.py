r"""Property objects that renderers build from payload metadata.

`.FormProperty` is a ready-made `.ConfigurableProperty`\ , describing one
input of a form in a hypermedia document. Renderers can use it directly
with `.InputPayloadMetadata.create_properties`\ :

.. code-block:: python

    properties = affordance.input.create_properties(
        FormProperty.from_metadata,
        lambda prop, metadata: prop.with_prompt(metadata.name.title()),
    )

Renderers with their own property types only need to provide a ``name``
and an ``apply`` method, as described by `.ConfigurableProperty`\ .
"""

from __future__ import annotations
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Self

from .property_metadata import PropertyMetadata
from .type_descriptor import TypeDescriptor


class FormProperty(BaseModel):
    """A single input of a form, as shown to a client."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    """The name of the input. This matches the name of the property."""

    required: bool = False
    read_only: bool = False
    regex: Optional[str] = None
    type: TypeDescriptor = TypeDescriptor.ANY

    prompt: Optional[str] = None
    """A human-readable label for the input."""

    value: Any = None
    """A value to pre-fill the input with."""

    @classmethod
    def from_metadata(cls, metadata: PropertyMetadata) -> Self:
        """Create a form property named after some metadata.

        Only the name is copied: constraints are added by `.apply`\\ , so
        this may be used as the ``creator`` for
        `.InputPayloadMetadata.create_properties`\\ .

        :param metadata: the metadata of the property.

        :return: an unconstrained form property with the same name.
        """
        return cls(name=metadata.name)

    def apply(self, metadata: PropertyMetadata) -> Self:
        """Copy the constraints of some metadata onto this property.

        :param metadata: the metadata to apply.

        :return: a new `.FormProperty` with the same name, prompt and value.
        """
        return self.model_copy(
            update={
                "required": metadata.required,
                "read_only": metadata.read_only,
                "regex": metadata.pattern,
                "type": metadata.type,
            }
        )

    def with_prompt(self, prompt: Optional[str]) -> Self:
        """Set the human-readable label.

        :param prompt: the new label.

        :return: a copy of this property with the given prompt.
        """
        return self.model_copy(update={"prompt": prompt})

    def with_value(self, value: Any) -> Self:
        """Set the value the input is pre-filled with.

        :param value: the new value.

        :return: a copy of this property with the given value.
        """
        return self.model_copy(update={"value": value})
