"""
Shared pydantic configuration for workout domain values.

Domain values are immutable once built and serialise with camelCase keys,
which is the shape the web client reads. They can still be constructed with
snake_case field names from Python code.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DomainModel(BaseModel):
    """Frozen base model with camelCase aliases."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
