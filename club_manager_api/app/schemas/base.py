"""Shared pydantic base model."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase field names.

    Stored documents and request bodies use camelCase (``eventId``,
    ``totalPrice``); Python code uses the snake_case attribute names.
    Both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
