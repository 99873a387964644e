r"""Metadata describing the payloads of affordances.

A payload is the body of a request or response. It is described by a
`.PayloadMetadata`\ , which produces a sequence of `.PropertyMetadata`
values, one per property in the body.

Request bodies are described by `.InputPayloadMetadata`\ , which adds the
ability to project its metadata onto renderer-specific property objects.
This is how an affordance can take a generic shape (usually derived from a
domain type) and adjust it for one particular interaction, e.g. marking a
field read-only for an update form, without changing the shape that other
affordances share.

There are three input variants:

* `.DelegatingInputPayloadMetadata` wraps a plain `.PayloadMetadata` and adds
  no customisation. `.InputPayloadMetadata.from_metadata` uses it to adapt
  any `.PayloadMetadata` for use where input metadata is required.
* `.CustomizedInputPayloadMetadata` layers property overrides and I18n codes
  over a base `.PayloadMetadata`\ .
* `.InputPayloadMetadata.NONE` is used for affordances with no request body.

All of these are immutable, so they may be shared freely between threads.
Each call to ``stream()`` returns a fresh iterator.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator, Sequence
import logging
from typing import Any, ClassVar, Optional, TypeVar

from .config import DEFAULT_I18N_CONFIG, I18nConfig
from .exceptions import InvalidArgumentError, UnknownPropertyError
from .property_metadata import ConfigurableProperty, Named, PropertyMetadata

_LOGGER = logging.getLogger(__name__)

PropertyT = TypeVar("PropertyT", bound=ConfigurableProperty)
"""A renderer-side property type, which can have metadata applied."""

NamedT = TypeVar("NamedT", bound=Named)
"""Any named object."""


class PayloadMetadata(ABC):
    """Metadata about the properties of a payload.

    Subclasses need only implement `.stream`. Lookup by name is implemented
    here, in terms of `.stream`.
    """

    NONE: ClassVar[PayloadMetadata]
    """Metadata for a payload with no properties."""

    @abstractmethod
    def stream(self) -> Iterator[PropertyMetadata]:
        """Iterate over all the properties in the payload.

        Every call returns a new iterator, so this may be called repeatedly
        (and from several threads) to traverse the properties again.

        :return: an iterator over `.PropertyMetadata` in payload order.
        """

    def get_property_metadata(self, name: str) -> Optional[PropertyMetadata]:
        """Find the metadata of a property by name.

        :param name: the name of the property.

        :return: the first property with a matching name, or ``None``.
        """
        for prop in self.stream():
            if prop.has_name(name):
                return prop
        return None

    def __iter__(self) -> Iterator[PropertyMetadata]:
        """Iterate over the properties, equivalent to `.stream`."""
        return self.stream()


class _NoPayloadMetadata(PayloadMetadata):
    """Empty `.PayloadMetadata`. Use the singleton `.PayloadMetadata.NONE`."""

    def stream(self) -> Iterator[PropertyMetadata]:
        """Iterate over no properties.

        :return: an empty iterator.
        """
        return iter(())

    # There must only ever be one instance, as it's compared by identity.
    def __copy__(self) -> _NoPayloadMetadata:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _NoPayloadMetadata:
        return self

    def __repr__(self) -> str:
        return "PayloadMetadata.NONE"


PayloadMetadata.NONE = _NoPayloadMetadata()


class StaticPayloadMetadata(PayloadMetadata):
    """Payload metadata over a fixed sequence of properties.

    This is the usual way to hand an already-introspected payload shape to
    the affordance model. Properties are kept in the order given. Names are
    expected to be unique, but if they're not the first property with a given
    name wins on lookup.
    """

    def __init__(self, properties: Iterable[PropertyMetadata] = ()) -> None:
        """Create payload metadata from a sequence of properties.

        :param properties: the properties of the payload, in order.
        """
        self._properties: tuple[PropertyMetadata, ...] = tuple(properties)

    @property
    def properties(self) -> tuple[PropertyMetadata, ...]:
        """The properties of the payload."""
        return self._properties

    def stream(self) -> Iterator[PropertyMetadata]:
        """Iterate over the properties.

        :return: an iterator over `.PropertyMetadata` in the order given.
        """
        return iter(self._properties)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, StaticPayloadMetadata):
            return NotImplemented
        return self._properties == other._properties

    def __hash__(self) -> int:
        return hash(self._properties)

    def __repr__(self) -> str:
        names = ", ".join(p.name for p in self._properties)
        return f"StaticPayloadMetadata({names})"


class InputPayloadMetadata(PayloadMetadata):
    r"""Metadata about the payload of incoming requests.

    On top of `.PayloadMetadata`\ , this can apply its metadata to
    renderer-side property objects with `.create_properties` and
    `.apply_to`\ , and it provides I18n codes for labelling the payload.
    """

    NONE: ClassVar[InputPayloadMetadata]
    """Input metadata for requests with no body."""

    @staticmethod
    def from_metadata(metadata: PayloadMetadata) -> InputPayloadMetadata:
        """Adapt any `.PayloadMetadata` to `.InputPayloadMetadata`.

        :param metadata: the payload metadata.

        :return: ``metadata`` itself if it is already an `.InputPayloadMetadata`,
            otherwise a `.DelegatingInputPayloadMetadata` wrapping it.
        """
        if isinstance(metadata, InputPayloadMetadata):
            return metadata
        return DelegatingInputPayloadMetadata.of(metadata)

    def create_properties(
        self,
        creator: Callable[[PropertyMetadata], PropertyT],
        customizer: Callable[[PropertyT, PropertyMetadata], PropertyT],
    ) -> list[PropertyT]:
        """Create a list of property objects described by this metadata.

        For each property in `.stream`, ``creator`` is called to make a
        property object named after it. The metadata with that name is then
        looked up with `.get_property_metadata`: if it's found, it is applied
        to the property object, and the result is passed to ``customizer``
        along with the metadata. If it's not found, the creator's output is
        used as it is.

        :param creator: makes a property object from a `.PropertyMetadata`.
            It must always return an object, never ``None``.
        :param customizer: adjusts a property object after metadata has been
            applied. Return the object unchanged if no adjustment is needed.

        :return: one property object per property, in payload order.

        :raises InvalidArgumentError: if ``creator`` or ``customizer`` is ``None``.
        """
        if creator is None:
            raise InvalidArgumentError("Creator must not be None!")
        if customizer is None:
            raise InvalidArgumentError("Customizer must not be None!")

        def configure(target: PropertyT) -> PropertyT:
            metadata = self.get_property_metadata(target.name)
            if metadata is None:
                _LOGGER.debug(f"No metadata found for property {target.name!r}.")
                return target
            return customizer(target.apply(metadata), metadata)

        properties = [configure(creator(prop)) for prop in self.stream()]
        _LOGGER.debug(f"Created {len(properties)} properties from {self!r}.")
        return properties

    def apply_to(self, target: PropertyT) -> PropertyT:
        """Apply the metadata for a single property object.

        :param target: a property object. Its name is used to find metadata.

        :return: ``target`` with the matching metadata applied, or ``target``
            itself if there is no property with that name.
        """
        metadata = self.get_property_metadata(target.name)
        if metadata is None:
            return target
        return target.apply(metadata)

    @abstractmethod
    def customize(
        self, target: NamedT, customizer: Callable[[PropertyMetadata], NamedT]
    ) -> NamedT:
        """Customise a named object using this metadata.

        :param target: the object to customise.
        :param customizer: creates a replacement for ``target`` from the
            metadata of the property with the same name.

        :return: the customised object, or ``target`` if nothing applies.
        """

    @property
    @abstractmethod
    def i18n_codes(self) -> list[str]:
        """Codes to look up a human-readable name for the payload.

        The most specific code is first.
        """


class DelegatingInputPayloadMetadata(InputPayloadMetadata):
    """Input metadata that wraps a `.PayloadMetadata` without customising.

    This provides the properties of the wrapped metadata, but `.apply_to`
    and `.customize` return their targets unchanged, and there are no I18n
    codes.
    """

    def __init__(self, metadata: PayloadMetadata) -> None:
        """Wrap some payload metadata.

        :param metadata: the metadata providing properties.
        """
        self._metadata = metadata

    @classmethod
    def of(cls, metadata: PayloadMetadata) -> DelegatingInputPayloadMetadata:
        """Wrap some payload metadata.

        :param metadata: the metadata providing properties.

        :return: a new `.DelegatingInputPayloadMetadata`.
        """
        return cls(metadata)

    @property
    def metadata(self) -> PayloadMetadata:
        """The wrapped metadata."""
        return self._metadata

    def stream(self) -> Iterator[PropertyMetadata]:
        """Iterate over the properties of the wrapped metadata.

        :return: a fresh iterator from the wrapped metadata.
        """
        return self._metadata.stream()

    def apply_to(self, target: PropertyT) -> PropertyT:
        """Return the target unchanged.

        :param target: a property object.

        :return: ``target``.
        """
        return target

    def customize(
        self, target: NamedT, customizer: Callable[[PropertyMetadata], NamedT]
    ) -> NamedT:
        """Return the target unchanged.

        :param target: the object to customise.
        :param customizer: ignored.

        :return: ``target``.
        """
        return target

    @property
    def i18n_codes(self) -> list[str]:
        """An empty list: there's nothing to label."""
        return []

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DelegatingInputPayloadMetadata):
            return NotImplemented
        return self._metadata == other._metadata

    def __hash__(self) -> int:
        return hash((DelegatingInputPayloadMetadata, self._metadata))

    def __repr__(self) -> str:
        return f"DelegatingInputPayloadMetadata(metadata={self._metadata!r})"


InputPayloadMetadata.NONE = InputPayloadMetadata.from_metadata(PayloadMetadata.NONE)


class CustomizedInputPayloadMetadata(InputPayloadMetadata):
    r"""Input metadata that overrides some properties of a base payload.

    The base `.PayloadMetadata` usually describes a domain type, and is shared
    between several affordances. Overrides are `.PropertyMetadata` values that
    replace the base property of the same name for this affordance only.

    .. code-block:: python

        base = StaticPayloadMetadata(
            [PropertyMetadata(name="id"), PropertyMetadata(name="title")]
        )
        update = CustomizedInputPayloadMetadata(base).derive_property(
            "id", read_only=True
        )
        assert update.get_property_metadata("id").read_only
        assert not base.get_property_metadata("id").read_only

    Overrides that don't match a base property are added after the base
    properties. Every method returning a changed instance leaves the
    original alone.
    """

    def __init__(
        self,
        base: PayloadMetadata,
        overrides: Iterable[PropertyMetadata] = (),
        i18n_codes: Sequence[str] = (),
    ) -> None:
        r"""Layer overrides over some base metadata.

        :param base: the metadata being customised.
        :param overrides: properties to use instead of the base properties
            with the same names. Later overrides replace earlier ones with
            the same name.
        :param i18n_codes: codes to label the payload, most specific first.
            `.i18n_codes_for` will generate these from a type.
        """
        self._base = base
        merged: dict[str, PropertyMetadata] = {}
        for prop in overrides:
            merged[prop.name] = prop
        self._overrides: tuple[PropertyMetadata, ...] = tuple(merged.values())
        self._i18n_codes: tuple[str, ...] = tuple(i18n_codes)

    @property
    def base(self) -> PayloadMetadata:
        """The metadata being customised."""
        return self._base

    @property
    def overrides(self) -> tuple[PropertyMetadata, ...]:
        """The overriding properties."""
        return self._overrides

    def stream(self) -> Iterator[PropertyMetadata]:
        """Iterate over the base properties, with overrides applied.

        :yield: base properties in order (replaced by an override where one
            has the same name), followed by any overrides that didn't match.
        """
        remaining = {prop.name: prop for prop in self._overrides}
        for prop in self._base.stream():
            yield remaining.pop(prop.name, prop)
        yield from remaining.values()

    def customize(
        self, target: NamedT, customizer: Callable[[PropertyMetadata], NamedT]
    ) -> NamedT:
        """Replace the target using the metadata with the same name.

        :param target: the object to customise.
        :param customizer: called with the matching metadata, if there is any.

        :return: the result of ``customizer``, or ``target`` if no property
            has the same name.
        """
        metadata = self.get_property_metadata(target.name)
        if metadata is None:
            return target
        return customizer(metadata)

    @property
    def i18n_codes(self) -> list[str]:
        """The configured I18n codes, most specific first."""
        return list(self._i18n_codes)

    def with_override(self, prop: PropertyMetadata) -> CustomizedInputPayloadMetadata:
        """Add or replace an override.

        :param prop: the overriding property metadata.

        :return: a new instance including the override.
        """
        return CustomizedInputPayloadMetadata(
            self._base, (*self._overrides, prop), self._i18n_codes
        )

    def derive_property(
        self, name: str, **changes: Any
    ) -> CustomizedInputPayloadMetadata:
        r"""Override a property with a customised copy of its current metadata.

        :param name: the name of the property to customise.
        :param \**changes: the constraints to change, as for
            `.PropertyMetadata.derive`\ .

        :return: a new instance with the property overridden.

        :raises UnknownPropertyError: if there's no property called ``name``.
        """
        current = self.get_property_metadata(name)
        if current is None:
            raise UnknownPropertyError(f"There is no property called {name!r}.")
        return self.with_override(current.derive(**changes))

    def with_i18n_codes(self, codes: Sequence[str]) -> CustomizedInputPayloadMetadata:
        """Use different I18n codes.

        :param codes: codes to label the payload, most specific first.

        :return: a new instance with the given codes.
        """
        return CustomizedInputPayloadMetadata(self._base, self._overrides, codes)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CustomizedInputPayloadMetadata):
            return NotImplemented
        return (
            self._base == other._base
            and self._overrides == other._overrides
            and self._i18n_codes == other._i18n_codes
        )

    def __hash__(self) -> int:
        return hash((self._base, self._overrides, self._i18n_codes))

    def __repr__(self) -> str:
        return (
            f"CustomizedInputPayloadMetadata(base={self._base!r}, "
            f"overrides={[p.name for p in self._overrides]})"
        )


def i18n_codes_for(
    payload_type: type, config: Optional[I18nConfig] = None
) -> list[str]:
    """Generate I18n codes to label a payload of the given type.

    :param payload_type: the type whose instances make up the payload.
    :param config: how to format the codes. Defaults to `.DEFAULT_I18N_CONFIG`.

    :return: the codes, most specific first: the qualified name (if enabled)
        then the plain name of the type, each followed by the configured
        suffix.
    """
    config = config or DEFAULT_I18N_CONFIG
    codes = []
    if config.include_qualified_name:
        codes.append(
            f"{payload_type.__module__}.{payload_type.__qualname__}{config.suffix}"
        )
    codes.append(f"{payload_type.__qualname__}{config.suffix}")
    return codes
