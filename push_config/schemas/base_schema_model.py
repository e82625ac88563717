"""Base pydantic model for centralized configuration of schema definitions."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchemaModel(BaseModel):
    """Base pydantic model shared by every push config schema.

    Fields are exposed under camelCase aliases (``pageSize``, ``nextPageToken``)
    to match the A2A protocol, while still accepting snake_case names.
    String values are kept as given; task ids, config ids and page tokens
    are opaque.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )
