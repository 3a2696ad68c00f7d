"""Request and response schemas for the Tasks API"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from app.features.tasks.domain import Task


class DeleteTaskResponse(BaseModel):
    """Response model for task deletion"""
    status: Literal["ok"] = "ok"
    deleted_task: Task = Field(alias="deletedTask")

    class Config:
        populate_by_name = True


class ValidationErrorDetail(BaseModel):
    """Detail payload of a 400 response"""
    error: str
    fields: List[str] = []


class HealthResponse(BaseModel):
    """Health check response"""
    status: Literal["healthy", "degraded"]
    service: str
    tasks: Optional[int] = None
