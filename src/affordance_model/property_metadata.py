r"""Metadata describing a single property of a payload.

A payload (the body of a request or response) is described as a sequence of
`.PropertyMetadata` values. Each one gives the name of a property and the
constraints on it: whether it is required, whether it is read-only, an
optional regular expression it must match, and its type.

The name is the join key used everywhere in this package: objects with the
same name are treated as describing the same logical property, which is what
allows affordance-specific metadata to be layered over a shape derived from
a domain type.

This module also defines the protocols that renderer-side property objects
implement so that metadata can be folded into them. See
`.InputPayloadMetadata.create_properties`\ .
"""

from __future__ import annotations
import re
from typing import Any, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing_extensions import Self

from .exceptions import InvalidArgumentError
from .type_descriptor import TypeDescriptor


@runtime_checkable
class Named(Protocol):
    """A component with a stable, non-empty name."""

    @property
    def name(self) -> str:
        """The name used to match this component with metadata."""
        ...


@runtime_checkable
class PropertyMetadataConfigured(Protocol):
    """Something that can have `.PropertyMetadata` applied to it."""

    def apply(self, metadata: PropertyMetadata) -> Self:
        """Fold the constraints in ``metadata`` into a copy of this object.

        Implementations must not mutate ``self``: base objects are shared
        between many affordances.

        :param metadata: the metadata to apply. Never ``None``.

        :return: an object of the same type, with the same name.
        """
        ...


@runtime_checkable
class ConfigurableProperty(Named, PropertyMetadataConfigured, Protocol):
    r"""A named object that can have `.PropertyMetadata` applied.

    This is the type of object produced by the ``creator`` passed to
    `.InputPayloadMetadata.create_properties`\ . `.FormProperty` is a
    ready-made implementation.
    """


def check_pattern(pattern: Optional[str]) -> Optional[str]:
    """Check a pattern is a valid regular expression.

    :param pattern: the pattern, or ``None`` if unconstrained.

    :return: the pattern, unchanged.

    :raises ValueError: if the pattern does not compile.
    """
    if pattern is not None:
        try:
            re.compile(pattern)
        except re.error as e:
            raise ValueError(
                f"{pattern!r} is not a valid regular expression: {e}"
            ) from e
    return pattern


class PropertyMetadata(BaseModel):
    """Metadata about one property of a payload.

    Instances are immutable and hashable. Two instances with the same name but
    different constraints are not equal: the second is an override of the
    first, rather than a duplicate.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    """The name of the property. Never empty."""

    required: bool = False
    """Whether the property must be present in every submission or representation."""

    read_only: bool = False
    """Whether the property must not be supplied in requests that modify state."""

    pattern: Optional[str] = None
    """A regular expression values must match, or ``None`` if unconstrained."""

    type: TypeDescriptor = TypeDescriptor.ANY
    """The type of the property, `.TypeDescriptor.ANY` if it's not known."""

    pattern_is_valid = field_validator("pattern")(check_pattern)

    def has_name(self, name: Optional[str]) -> bool:
        """Whether the property has the given name.

        :param name: the name to compare with. Must not be empty.

        :return: ``True`` if ``name`` matches exactly.

        :raises InvalidArgumentError: if ``name`` is ``None`` or empty.
        """
        if not name:
            raise InvalidArgumentError("Name must not be None or empty!")
        return self.name == name

    def derive(self, **changes: Any) -> Self:
        r"""Create a customised copy of this metadata.

        This is how a generic description of a property is adjusted for one
        affordance, e.g. marking a field read-only for a particular action.
        The original is left unchanged.

        :param \**changes: new values for ``required``\ , ``read_only``\ ,
            ``pattern`` or ``type``\ .

        :return: a new `.PropertyMetadata` with the same name.

        :raises InvalidArgumentError: if an attempt is made to change the name,
            as that would make the copy describe a different property.
        """
        if "name" in changes and changes["name"] != self.name:
            raise InvalidArgumentError(
                f"Can't rename property {self.name!r} while deriving metadata."
            )
        return self.model_validate({**dict(self), **changes})
