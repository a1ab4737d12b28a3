"""
Shared API models.

The wire format keeps the camelCase field names the counter displays
consume (``menuId``, ``lineTotal``, ``createdAt``), while Python code works
with snake_case attributes.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialised with camelCase aliases"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict:
        """JSON-ready dict using the wire field names."""
        return self.model_dump(mode="json", by_alias=True)


class ErrorResponse(BaseModel):
    """Body of every error response"""

    error: str = Field(description="Human-readable error message")
    error_code: Optional[str] = Field(None, description="Error code for programmatic handling")
    path: Optional[str] = Field(None, description="Request path that failed")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Order must contain at least one item",
                "error_code": "VALIDATION_ERROR",
                "path": "/api/orders",
            }
        }
    )
