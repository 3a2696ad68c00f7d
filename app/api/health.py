"""Health check endpoint"""

from fastapi import APIRouter, Depends

from app.features.tasks.api import get_task_repository
from app.features.tasks.repository import JsonTaskRepository
from app.features.tasks.schemas import HealthResponse

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(repository: JsonTaskRepository = Depends(get_task_repository)):
    """
    Basic health check endpoint.

    Reports "degraded" instead of failing when the tasks file cannot be read,
    so the process itself is still seen as alive.
    """
    result = await repository.list_all()
    if not result.ok:
        return {"status": "degraded", "service": "task-board", "tasks": None}

    return {
        "status": "healthy",
        "service": "task-board",
        "tasks": len(result.value),
    }
