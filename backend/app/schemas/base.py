"""Schema Base - camelCase JSON on the wire, snake_case attributes in Python.

Design Decisions:
    - alias_generator=to_camel + populate_by_name: clients send "courseId" or "course_id",
      responses always use camelCase (FastAPI serializes response_model by alias)
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every request/response schema."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    message: str
