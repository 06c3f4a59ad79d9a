"""
Shared schema base classes.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelRequest(BaseModel):
    """Request body accepting camelCase keys (snake_case also accepted)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ORMResponse(BaseModel):
    """Response row read from an ORM object."""

    model_config = ConfigDict(from_attributes=True)
