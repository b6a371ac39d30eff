from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """snake_case attributes, camelCase JSON (accepts either on input)."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
