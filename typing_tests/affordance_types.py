"""Check that property objects and affordances type check with mypy.

This module is not run: it is checked with ``mypy typing_tests``. What's
important is that:

1. `.FormProperty` and other classes with a ``name`` and an ``apply``
    method are accepted wherever a `.ConfigurableProperty` is needed.
2. `.InputPayloadMetadata.create_properties` returns a list of whatever the
    creator makes.
3. The builder and affordance model expose precisely typed attributes.
"""

from typing_extensions import Self, assert_type

import affordance_model as am


class Holder:
    """A property type that is not a pydantic model."""

    def __init__(self, name: str) -> None:
        self.name = name

    def apply(self, metadata: am.PropertyMetadata) -> Self:
        return self


metadata = am.InputPayloadMetadata.from_metadata(
    am.StaticPayloadMetadata([am.PropertyMetadata(name="title")])
)

form_properties = metadata.create_properties(
    am.FormProperty.from_metadata, lambda prop, _: prop
)
assert_type(form_properties, list[am.FormProperty])

holders = metadata.create_properties(lambda m: Holder(m.name), lambda h, _: h)
assert_type(holders, list[Holder])

assert_type(metadata.apply_to(am.FormProperty(name="title")), am.FormProperty)
assert_type(metadata.i18n_codes, list[str])

model = am.afford(am.Link(href="/orders"), am.HttpMethod.POST).build()
assert_type(model, am.AffordanceModel)
assert_type(model.uri, str)
assert_type(model.input, am.InputPayloadMetadata)
assert_type(model.query_parameters, tuple[am.QueryParameter, ...])
assert_type(model.has_http_method(am.HttpMethod.GET), bool)
