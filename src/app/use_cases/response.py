"""
Response Envelope

Every endpoint answers {code, message, ...fields} with camelCase keys.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiResponse(BaseModel):
    """Base of all response DTOs"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    code: int = 200
    message: str = "ok"


class ResourceResponse(ApiResponse):
    """Payload of the protected demo resources, tagged with the caller"""

    operator: str
    data: Any = None
