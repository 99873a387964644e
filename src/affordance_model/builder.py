r"""A fluent way to construct affordance models.

`.AffordanceModel` may be constructed directly, but it is often clearer to
describe affordances step by step, starting from the link they target:

.. code-block:: python

    models = (
        afford(Link(href="/orders", rel="orders"), HttpMethod.POST)
        .with_input(order_metadata)
        .with_output(order_metadata)
        .and_afford(HttpMethod.GET)
        .with_query_parameters([QueryParameter(name="page")])
        .to_models()
    )

Every method returns a new builder, so a partly configured builder may be
reused as a template for several affordances.
"""

from __future__ import annotations
from collections.abc import Iterable
import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict
from typing_extensions import Self

from .affordance import AffordanceModel, QueryParameter
from .http import HttpMethod
from .link import Link
from .payload import InputPayloadMetadata, PayloadMetadata

_LOGGER = logging.getLogger(__name__)


def default_name(link: Link, method: HttpMethod) -> str:
    """Generate a name for an affordance that wasn't given one.

    :param link: the target of the affordance.
    :param method: the HTTP method of the affordance.

    :return: the lower-case method, followed by the capitalised link
        relation unless that's ``self``\\ . For example, ``POST`` to a link
        with relation ``orders`` is named ``postOrders``\\ .
    """
    name = method.value.lower()
    if link.rel != "self":
        name += link.rel[:1].upper() + link.rel[1:]
    return name


class AffordanceBuilder(BaseModel):
    """An immutable, partly configured affordance."""

    model_config = ConfigDict(
        frozen=True, extra="forbid", arbitrary_types_allowed=True
    )

    link: Link
    http_method: HttpMethod = HttpMethod.GET
    name: Optional[str] = None
    input: PayloadMetadata = InputPayloadMetadata.NONE
    query_parameters: tuple[QueryParameter, ...] = ()
    output: PayloadMetadata = PayloadMetadata.NONE
    previous: tuple[AffordanceModel, ...] = ()
    """Affordances built before `.and_afford` was called."""

    def with_name(self, name: str) -> Self:
        """Name the affordance.

        :param name: the name of the action.

        :return: a new builder.
        """
        return self.model_copy(update={"name": name})

    def with_input(self, metadata: PayloadMetadata) -> Self:
        """Describe the request body.

        :param metadata: the input metadata. Plain `.PayloadMetadata` is
            adapted when the affordance is built.

        :return: a new builder.
        """
        return self.model_copy(update={"input": metadata})

    def with_output(self, metadata: PayloadMetadata) -> Self:
        """Describe the response body.

        :param metadata: the output metadata.

        :return: a new builder.
        """
        return self.model_copy(update={"output": metadata})

    def with_query_parameters(self, parameters: Iterable[QueryParameter]) -> Self:
        """Replace the query parameters.

        :param parameters: the query parameters, in order.

        :return: a new builder.
        """
        return self.model_copy(update={"query_parameters": tuple(parameters)})

    def add_query_parameters(self, *parameters: QueryParameter) -> Self:
        r"""Add query parameters after any already configured.

        :param \*parameters: the query parameters to add.

        :return: a new builder.
        """
        return self.with_query_parameters((*self.query_parameters, *parameters))

    def build(self) -> AffordanceModel:
        """Create the affordance model configured by this builder.

        :return: a new `.AffordanceModel`\\ .
        """
        model = AffordanceModel(
            name=(
                self.name
                if self.name is not None
                else default_name(self.link, self.http_method)
            ),
            link=self.link,
            http_method=self.http_method,
            input=self.input,
            query_parameters=self.query_parameters,
            output=self.output,
        )
        _LOGGER.debug(
            f"Built affordance {model.name!r} ({model.http_method.value} "
            f"{model.link.href})."
        )
        return model

    def and_afford(self, method: HttpMethod) -> AffordanceBuilder:
        """Finish this affordance and start another on the same link.

        :param method: the HTTP method of the next affordance.

        :return: a new builder targeting the same link, which remembers this
            affordance.
        """
        return AffordanceBuilder(
            link=self.link, http_method=method, previous=self.to_models()
        )

    def to_models(self) -> tuple[AffordanceModel, ...]:
        """Build this affordance and return it with any built before it.

        :return: all affordances described by this chain of builders, in the
            order they were described.
        """
        return (*self.previous, self.build())


def afford(link: Link, method: HttpMethod = HttpMethod.GET) -> AffordanceBuilder:
    """Start describing an affordance.

    :param link: the target of the affordance.
    :param method: the HTTP method. Defaults to ``GET``.

    :return: a builder, which may be configured and then built.
    """
    return AffordanceBuilder(link=link, http_method=method)
