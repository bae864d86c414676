"""Shared pydantic base for interchange schemas."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serialises with camelCase keys; accepts camelCase or snake_case on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
