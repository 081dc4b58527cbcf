"""
Shared base model for API schemas.

Attributes are declared in snake_case; ``to_camel`` produces the JSON
aliases used on the wire.  ``populate_by_name`` lets services build
models with the Python names and lets clients post either spelling.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
