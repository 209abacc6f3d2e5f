"""Data models for the backend API."""

from pydantic import BaseModel, Field


class ServiceInfo(BaseModel):
    """Service description returned by the root endpoint."""
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    status: str = Field(..., description="Running state")

    class Config:
        json_schema_extra = {
            "example": {
                "service": "backend-api",
                "version": "1.0.0",
                "status": "running"
            }
        }
