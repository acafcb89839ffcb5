"""
Health Response DTO
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(description="'ok' when the service and database are usable, else 'degraded'")
    database: str = Field(description="'ok' or a short description of the database problem")
    issues: list[str] = Field(default_factory=list, description="Schema issues found at startup")
