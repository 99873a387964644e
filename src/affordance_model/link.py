r"""Links to the resources targeted by affordances.

A `.Link` holds an ``href`` that may be a URI template, with variables in
braces as in :rfc:`6570`\ . Two kinds of expression are supported:

* Simple expressions like ``{id}`` or ``{x,y}`` form part of the path. These
  variables are required when the link is expanded.
* Form-style query expressions like ``{?page,size}`` and continuations like
  ``{&sort}`` add query parameters. These are optional and are left out if
  no value is given.

.. code-block:: python

    link = Link(href="/orders/{id}{?expand}")
    assert link.expand(42) == "/orders/42"
    assert link.expand(id=42, expand="items") == "/orders/42?expand=items"
"""

from __future__ import annotations
from collections.abc import Sequence
import logging
import re
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import InvalidArgumentError, UnresolvedTemplateVariableError

_LOGGER = logging.getLogger(__name__)

EXPRESSION_REGEX = re.compile(r"\{([+#./;?&=,!@|]?)([^{}]+)\}")
"""Matches a template expression, capturing its operator and variable list."""

QUERY_OPERATORS = ("?", "&")
SUPPORTED_OPERATORS = ("", *QUERY_OPERATORS)


def _parse_expression(match: re.Match[str]) -> tuple[str, list[str]]:
    """Split a template expression into its operator and variable names.

    :param match: a match of `.EXPRESSION_REGEX`\\ .

    :return: the operator (empty for simple expressions) and variable names.

    :raises InvalidArgumentError: if the expression uses an operator other
        than simple, form-style query or query continuation expansion.
    """
    operator, variable_list = match.groups()
    if operator not in SUPPORTED_OPERATORS:
        raise InvalidArgumentError(
            f"Template expression {match.group(0)!r} uses the unsupported "
            f"operator {operator!r}."
        )
    return operator, [v.strip() for v in variable_list.split(",") if v.strip()]


def _encode(value: Any) -> str:
    """Percent-encode a value, joining sequences with commas.

    :param value: a scalar or a sequence of scalars.

    :return: the encoded string.
    """
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return ",".join(quote(str(v), safe="") for v in value)
    return quote(str(value), safe="")


class Link(BaseModel):
    """A reference to a resource, which may be a URI template."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    href: str = Field(min_length=1)
    """The address of the resource, possibly containing template variables."""

    rel: str = Field(default="self", min_length=1)
    """The relation of the target resource to the current one."""

    @property
    def variables(self) -> list[str]:
        """The names of all template variables, in order of appearance.

        :raises InvalidArgumentError: if the template uses an unsupported
            operator, such as reserved expansion (``{+path}``\\ ).
        """
        names: list[str] = []
        for match in EXPRESSION_REGEX.finditer(self.href):
            for name in _parse_expression(match)[1]:
                if name not in names:
                    names.append(name)
        return names

    @property
    def is_templated(self) -> bool:
        """Whether the ``href`` contains any template expressions."""
        return EXPRESSION_REGEX.search(self.href) is not None

    def expand(self, *args: Any, **kwargs: Any) -> str:
        r"""Expand the template into a concrete address.

        :param \*args: values for the template variables, in the order given
            by `.variables`\ .
        :param \**kwargs: values for template variables by name. These take
            priority over positional values.

        :return: the expanded address. If the link is not templated, this is
            the ``href`` unchanged.

        :raises InvalidArgumentError: if more positional values are supplied
            than there are variables, or if the template uses an
            unsupported operator.
        :raises UnresolvedTemplateVariableError: if no value is given for a
            variable in a simple (path) expression.
        """
        names = self.variables
        if len(args) > len(names):
            raise InvalidArgumentError(
                f"{len(args)} values given, but {self.href!r} has only "
                f"{len(names)} variables."
            )
        values: dict[str, Any] = dict(zip(names, args))
        values.update(kwargs)

        def expand_expression(match: re.Match[str]) -> str:
            operator, variables = _parse_expression(match)
            if operator in QUERY_OPERATORS:
                pairs = [
                    f"{name}={_encode(values[name])}"
                    for name in variables
                    if values.get(name) is not None
                ]
                if not pairs:
                    return ""
                return operator + "&".join(pairs)
            missing = [name for name in variables if values.get(name) is None]
            if missing:
                raise UnresolvedTemplateVariableError(
                    f"No value given for template variable(s) {missing} in "
                    f"{self.href!r}."
                )
            return ",".join(_encode(values[name]) for name in variables)

        expanded = EXPRESSION_REGEX.sub(expand_expression, self.href)
        if expanded != self.href:
            _LOGGER.debug(f"Expanded {self.href!r} to {expanded!r}.")
        return expanded
