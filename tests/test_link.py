r"""Test code for `.link`\ ."""

import pytest
from pydantic import ValidationError

from affordance_model import Link
from affordance_model.exceptions import (
    InvalidArgumentError,
    UnresolvedTemplateVariableError,
)


def test_plain_link():
    """A link with no template expands to its href."""
    link = Link(href="/orders")
    assert link.rel == "self"
    assert not link.is_templated
    assert link.variables == []
    assert link.expand() == "/orders"


def test_variables():
    """Variables are listed once each, in order of appearance."""
    link = Link(href="/orders/{id}/items/{item}{?page,size}{&id}")
    assert link.is_templated
    assert link.variables == ["id", "item", "page", "size"]


@pytest.mark.parametrize(
    ("href", "args", "kwargs", "expected"),
    [
        ("/orders/{id}", (42,), {}, "/orders/42"),
        ("/orders/{id}", (), {"id": 42}, "/orders/42"),
        ("/orders/{id}", (1,), {"id": 2}, "/orders/2"),
        ("/a/{x,y}", (1, 2), {}, "/a/1,2"),
        ("/search{?q}", (), {}, "/search"),
        ("/search{?q}", ("fish & chips",), {}, "/search?q=fish%20%26%20chips"),
        ("/search{?q,page}", (), {"page": 2}, "/search?page=2"),
        ("/search{?q,page}", ("x", 2), {}, "/search?q=x&page=2"),
        ("/search?q=x{&page}", (), {"page": 3}, "/search?q=x&page=3"),
        ("/search{?tags}", (), {"tags": ["a", "b"]}, "/search?tags=a,b"),
        ("/files/{path}", ("a/b",), {}, "/files/a%2Fb"),
    ],
)
def test_expand(href, args, kwargs, expected):
    """Templates are expanded as in RFC 6570, for the supported expressions."""
    assert Link(href=href).expand(*args, **kwargs) == expected


def test_missing_path_variable():
    """Path variables must be supplied."""
    link = Link(href="/orders/{id}")
    with pytest.raises(UnresolvedTemplateVariableError, match="id"):
        link.expand()
    with pytest.raises(KeyError):
        link.expand(other=1)


def test_too_many_positional_values():
    """It's an error to pass more values than there are variables."""
    with pytest.raises(InvalidArgumentError):
        Link(href="/orders/{id}").expand(1, 2)


def test_link_is_a_value():
    """Links are immutable, hashable and compared by value."""
    link = Link(href="/orders", rel="orders")
    assert link == Link(href="/orders", rel="orders")
    assert hash(link) == hash(Link(href="/orders", rel="orders"))
    assert link != Link(href="/orders")
    with pytest.raises(ValidationError):
        link.href = "/other"
    with pytest.raises(ValidationError):
        Link(href="")


@pytest.mark.parametrize(
    "href", ["/a{+path}", "/a{#frag}", "/a{.ext}", "/a{/seg}", "/a{;p}"]
)
def test_unsupported_operators(href):
    """Operators other than simple and query expansion are rejected clearly."""
    link = Link(href=href)
    assert link.is_templated
    with pytest.raises(InvalidArgumentError, match="unsupported operator"):
        link.variables
    with pytest.raises(InvalidArgumentError, match="unsupported operator"):
        link.expand(path="x", frag="x", ext="x", seg="x", p="x")


def test_unknown_field_rejected():
    """Misspelled fields are errors, not silently dropped."""
    with pytest.raises(ValidationError):
        Link(href="/orders", relation="orders")
