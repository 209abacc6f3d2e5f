"""Error response models."""

from typing import List
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned by the centralized error handlers."""
    success: bool = Field(default=False, description="Always false for errors")
    message: str = Field(..., description="Human-readable error message")
    errors: List[str] = Field(default_factory=list, description="Additional error details")

    class Config:
        json_schema_extra = {
            "example": {
                "success": False,
                "message": "Resource not found",
                "errors": []
            }
        }
