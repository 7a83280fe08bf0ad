"""Shared base for API schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema that reads and writes camelCase keys and also accepts snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CamelResponse(CamelModel):
    """Response schema built from ORM objects."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )
