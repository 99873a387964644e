"""A submodule for custom affordance-model Exceptions."""


class InvalidArgumentError(ValueError):
    """A required argument was missing or empty.

    This is raised when a caller breaks the contract of a method, for example
    by passing ``None`` to `.AffordanceModel.has_http_method` or an empty
    string to `.PropertyMetadata.has_name`. It indicates a programming error
    in the calling code, so it should not be caught and retried.
    """


class UnresolvedTemplateVariableError(KeyError):
    """A link template could not be expanded.

    `.Link` hrefs may contain template variables like ``{id}``. These must
    be supplied when the link is expanded. This error is raised if a
    required variable was not given, which usually means a templated link
    was used where a concrete address was expected, for example by
    `.AffordanceModel.uri`.
    """


class UnknownPropertyError(KeyError):
    """No property with the requested name exists.

    Raised by `.CustomizedInputPayloadMetadata.derive_property` when asked to
    customise a property that is not present in the underlying payload.
    """
