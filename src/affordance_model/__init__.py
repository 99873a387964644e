r"""Affordance Model.

This is the top level module for the affordance model, a library describing
the actions a client may take against a resource in a hypermedia API. An
`.AffordanceModel` combines a name, a target `.Link`\ , an `.HttpMethod`\ ,
metadata about the request and response payloads, and query parameters.
Renderers turn collections of these into a concrete hypermedia format.

This module contains a number of convenience imports and is intended to be
imported using:

.. code-block:: python

    import affordance_model as am

Symbols in the top-level module mostly exist elsewhere in the package, but
should be imported from here as a preference, to ensure code does not break
if modules are rearranged.
"""

from .affordance import (
    AffordanceModel,
    QueryParameter,
    affordances_targeting,
    group_by_target,
)
from .builder import AffordanceBuilder, afford
from .config import I18nConfig
from .http import HttpMethod
from .link import Link
from .payload import (
    CustomizedInputPayloadMetadata,
    DelegatingInputPayloadMetadata,
    InputPayloadMetadata,
    PayloadMetadata,
    StaticPayloadMetadata,
    i18n_codes_for,
)
from .properties import FormProperty
from .property_metadata import (
    ConfigurableProperty,
    Named,
    PropertyMetadata,
    PropertyMetadataConfigured,
)
from .type_descriptor import TypeDescriptor

# The symbols in __all__ are part of our public API.
# They are imported when using `import affordance_model as am`.
__all__ = [
    "AffordanceModel",
    "QueryParameter",
    "affordances_targeting",
    "group_by_target",
    "AffordanceBuilder",
    "afford",
    "I18nConfig",
    "HttpMethod",
    "Link",
    "CustomizedInputPayloadMetadata",
    "DelegatingInputPayloadMetadata",
    "InputPayloadMetadata",
    "PayloadMetadata",
    "StaticPayloadMetadata",
    "i18n_codes_for",
    "FormProperty",
    "ConfigurableProperty",
    "Named",
    "PropertyMetadata",
    "PropertyMetadataConfigured",
    "TypeDescriptor",
]
