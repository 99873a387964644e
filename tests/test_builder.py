r"""Test code for `.builder`\ ."""

import logging

from pydantic import ValidationError
import pytest

from affordance_model import (
    AffordanceModel,
    HttpMethod,
    InputPayloadMetadata,
    Link,
    PayloadMetadata,
    PropertyMetadata,
    QueryParameter,
    StaticPayloadMetadata,
    afford,
)
from affordance_model.builder import default_name

ORDERS = Link(href="/orders", rel="orders")
ORDER = StaticPayloadMetadata([PropertyMetadata(name="title", required=True)])


@pytest.mark.parametrize(
    ("link", "method", "expected"),
    [
        (ORDERS, HttpMethod.POST, "postOrders"),
        (Link(href="/orders"), HttpMethod.GET, "get"),
        (Link(href="/a", rel="lineItems"), HttpMethod.DELETE, "deleteLineItems"),
    ],
)
def test_default_name(link, method, expected):
    """Unnamed affordances are named after their method and link relation."""
    assert default_name(link, method) == expected
    assert afford(link, method).build().name == expected


def test_build():
    """The builder produces the same model as the constructor."""
    page = QueryParameter(name="page")
    built = (
        afford(ORDERS, HttpMethod.POST)
        .with_name("createOrder")
        .with_input(ORDER)
        .with_output(ORDER)
        .with_query_parameters([page])
        .build()
    )
    assert built == AffordanceModel(
        name="createOrder",
        link=ORDERS,
        http_method=HttpMethod.POST,
        input=InputPayloadMetadata.from_metadata(ORDER),
        query_parameters=(page,),
        output=ORDER,
    )


def test_defaults():
    """A bare builder makes a GET with no payloads."""
    built = afford(ORDERS).build()
    assert built.http_method is HttpMethod.GET
    assert built.input == InputPayloadMetadata.NONE
    assert built.output is PayloadMetadata.NONE


def test_builders_are_immutable():
    """Builders can be reused as templates."""
    template = afford(ORDERS, HttpMethod.GET).add_query_parameters(
        QueryParameter(name="page")
    )
    paged = template.add_query_parameters(QueryParameter(name="size"))
    assert [p.name for p in template.build().query_parameters] == ["page"]
    assert [p.name for p in paged.build().query_parameters] == ["page", "size"]


def test_and_afford():
    """Several affordances may be described on one link."""
    models = (
        afford(ORDERS, HttpMethod.POST)
        .with_input(ORDER)
        .and_afford(HttpMethod.GET)
        .with_output(ORDER)
        .and_afford(HttpMethod.DELETE)
        .to_models()
    )
    assert [m.name for m in models] == ["postOrders", "getOrders", "deleteOrders"]
    assert all(m.link == ORDERS for m in models)
    assert models[0].input == InputPayloadMetadata.from_metadata(ORDER)
    assert models[1].input == InputPayloadMetadata.NONE
    assert models[1].output == ORDER


def test_build_logs(caplog):
    """Building an affordance is logged at debug level."""
    with caplog.at_level(logging.DEBUG, logger="affordance_model.builder"):
        afford(ORDERS, HttpMethod.POST).build()
    assert "postOrders" in caplog.text


def test_empty_name_is_not_replaced():
    """An explicitly empty name is invalid, rather than replaced by the default."""
    with pytest.raises(ValidationError):
        afford(ORDERS).with_name("").build()
