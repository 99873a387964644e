r"""The affordance model: a description of one possible interaction.

An `.AffordanceModel` brings together everything a client needs to know to
perform one action on a resource: a name, the `.Link` to the target, the
`.HttpMethod`\ , the shape of the request body, any query parameters, and
the shape of the response body.

Affordance models are immutable values. Equality and hashing cover exactly
the six fields above, so renderers can de-duplicate the affordances of a
resource by putting them in a `set` or using them as `dict` keys. Renderers
that need extra, format-specific state should hold an `.AffordanceModel`
rather than subclass it, so that state never affects equality.
"""

from __future__ import annotations
from collections.abc import Iterable
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import InvalidArgumentError
from .http import HttpMethod
from .link import Link
from .payload import InputPayloadMetadata, PayloadMetadata
from .property_metadata import check_pattern


class QueryParameter(BaseModel):
    """A query parameter accepted by an affordance.

    This mirrors `.PropertyMetadata`\\ , for affordances that carry state in
    the query string rather than the request body.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    """The name of the parameter."""

    required: bool = False
    """Whether the parameter must be supplied."""

    pattern: Optional[str] = None
    """A regular expression values must match, or ``None`` if unconstrained."""

    pattern_is_valid = field_validator("pattern")(check_pattern)


class AffordanceModel(BaseModel):
    """Collection of attributes needed to render any form of hypermedia."""

    model_config = ConfigDict(
        frozen=True, extra="forbid", arbitrary_types_allowed=True
    )

    name: str = Field(min_length=1)
    """Name of the action, e.g. ``createOrder``."""

    link: Link
    """The target resource. This may be templated."""

    http_method: HttpMethod
    """Request method. For multiple methods, use several affordance models."""

    input: InputPayloadMetadata = InputPayloadMetadata.NONE
    """The request body, `.InputPayloadMetadata.NONE` if there is none."""

    query_parameters: tuple[QueryParameter, ...] = ()
    """Query parameters used to interrogate the resource, in order."""

    output: PayloadMetadata = PayloadMetadata.NONE
    """The response body, `.PayloadMetadata.NONE` if there is none."""

    @field_validator("input", mode="before")
    @classmethod
    def adapt_input(cls, value: Any) -> Any:
        """Allow any `.PayloadMetadata` to be used as the input.

        :param value: the value supplied for ``input``.

        :return: ``value`` adapted with `.InputPayloadMetadata.from_metadata` if
            it is plain `.PayloadMetadata`, otherwise unchanged (in which case
            it will fail validation unless it's already input metadata).
        """
        if isinstance(value, PayloadMetadata):
            return InputPayloadMetadata.from_metadata(value)
        return value

    @property
    def uri(self) -> str:
        """The address of the target, with no template parameters supplied.

        :raises UnresolvedTemplateVariableError: if the link has required
            template variables. Use ``link.expand`` to supply them.
        """
        return self.link.expand()

    def has_http_method(self, method: Optional[HttpMethod]) -> bool:
        """Whether this affordance uses the given HTTP method.

        :param method: the method to compare with. Must not be ``None``.

        :return: ``True`` if the methods are the same.

        :raises InvalidArgumentError: if ``method`` is ``None``.
        """
        if method is None:
            raise InvalidArgumentError("HttpMethod must not be None!")
        return self.http_method == method

    def points_to_target_of(self, link: Optional[Link]) -> bool:
        """Whether this affordance targets the same address as a link.

        Both links are expanded with no parameters, and the resulting
        addresses compared exactly.

        :param link: the link to compare with. Must not be ``None``.

        :return: ``True`` if the addresses are identical.

        :raises InvalidArgumentError: if ``link`` is ``None``.
        """
        if link is None:
            raise InvalidArgumentError("Link must not be None!")
        return self.uri == link.expand()


def affordances_targeting(
    models: Iterable[AffordanceModel], link: Link
) -> list[AffordanceModel]:
    """Select the affordances that point to the target of a link.

    :param models: the affordances to filter.
    :param link: the link whose target we're interested in.

    :return: the matching affordances, in their original order.
    """
    return [model for model in models if model.points_to_target_of(link)]


def group_by_target(
    models: Iterable[AffordanceModel],
) -> dict[str, list[AffordanceModel]]:
    """Group affordances by the address they target.

    This is useful when building one representation per resource: every
    affordance in a group belongs with the same resource.

    :param models: the affordances to group.

    :return: a dictionary mapping each expanded address to its affordances.
        Both addresses and affordances keep the order they were first seen in.
    """
    groups: dict[str, list[AffordanceModel]] = {}
    for model in models:
        groups.setdefault(model.uri, []).append(model)
    return groups
