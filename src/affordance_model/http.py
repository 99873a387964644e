"""HTTP request methods used by affordances."""

from enum import Enum


class HttpMethod(str, Enum):
    """The HTTP verb of an affordance.

    Only identity comparison is used by this package, so there is no
    attempt to model the semantics of each method.
    """

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
