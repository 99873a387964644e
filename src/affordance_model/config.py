r"""Pydantic models holding configuration for payload metadata.

Input payloads expose a list of I18n codes, which a renderer may look up in
a message source to find a human-readable label for a form. The way these
codes are built from a payload type is configured with `.I18nConfig`\ ,
which may be constructed directly or loaded from a dictionary or JSON file
with ``I18nConfig.model_validate``.
"""

from pydantic import BaseModel, ConfigDict, Field


class I18nConfig(BaseModel):
    r"""Settings controlling how I18n codes are generated for payloads."""

    model_config = ConfigDict(frozen=True)

    suffix: str = Field(
        default="._title",
        min_length=1,
        description=(
            """The string appended to each type name to make an I18n code.

            The default gives codes like ``Order._title``\\ .
            """
        ),
    )

    include_qualified_name: bool = Field(
        default=True,
        description=(
            """Whether to include a code based on the fully qualified type name.

            If this is set, the qualified code (``module.Type`` plus the suffix)
            is listed first, as it is the most specific. The code based on the
            bare type name is always included.
            """
        ),
    )


DEFAULT_I18N_CONFIG = I18nConfig()
"""The configuration used when none is supplied."""
