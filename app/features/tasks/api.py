"""Tasks API endpoints"""

import logging
from typing import Any, Dict, List, NoReturn

from fastapi import APIRouter, Depends, HTTPException, Request, status

from app.features.tasks.domain import Task
from app.features.tasks.errors import (
    Err,
    NotFound,
    StorageReadError,
    StorageWriteError,
    ValidationError,
)
from app.features.tasks.repository import JsonTaskRepository
from app.features.tasks.schemas import DeleteTaskResponse, ValidationErrorDetail

logger = logging.getLogger(__name__)


router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def get_task_repository(request: Request) -> JsonTaskRepository:
    """Repository created at startup and kept on the application state"""
    return request.app.state.task_repository


async def read_task_fields(request: Request) -> Dict[str, Any]:
    """Parse the request body, which must be a JSON object"""
    try:
        body = await request.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="Request body must be a JSON object")
    return body


def raise_for_error(result: Err) -> NoReturn:
    """Translate a repository error into the matching HTTP response"""
    error = result.error
    if isinstance(error, ValidationError):
        raise HTTPException(
            status_code=400,
            detail=ValidationErrorDetail(error=error.reason, fields=error.fields).model_dump(),
        )
    if isinstance(error, NotFound):
        raise HTTPException(status_code=404, detail="Task not found")
    if isinstance(error, StorageReadError):
        logger.error(f"Task storage read failed: {error.message}")
        raise HTTPException(status_code=500, detail="Failed to read tasks")
    if isinstance(error, StorageWriteError):
        logger.error(f"Task storage write failed: {error.message}")
        raise HTTPException(status_code=500, detail="Failed to save tasks")
    raise HTTPException(status_code=500, detail="Unexpected task error")


@router.get("", response_model=List[Task])
async def list_tasks(repository: JsonTaskRepository = Depends(get_task_repository)):
    """List all tasks in stored order"""
    result = await repository.list_all()
    if not result.ok:
        raise_for_error(result)
    return result.value


@router.get("/{task_id}", response_model=Task)
async def get_task(task_id: str, repository: JsonTaskRepository = Depends(get_task_repository)):
    """Get a single task by ID"""
    result = await repository.get_by_id(task_id)
    if not result.ok:
        raise_for_error(result)
    return result.value


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
async def create_task(
    fields: Dict[str, Any] = Depends(read_task_fields),
    repository: JsonTaskRepository = Depends(get_task_repository),
):
    """
    Create a new task.

    All of title, employee, startDate, endDate and description are required
    and startDate must not be after endDate.

    Raises:
        400: Missing or invalid fields
        500: Tasks file could not be read or written
    """
    result = await repository.create(fields)
    if not result.ok:
        raise_for_error(result)

    logger.info(f"Created task {result.value.id} for {result.value.employee}")
    return result.value


@router.put("/{task_id}", response_model=Task)
async def update_task(
    task_id: str,
    fields: Dict[str, Any] = Depends(read_task_fields),
    repository: JsonTaskRepository = Depends(get_task_repository),
):
    """
    Replace all fields of an existing task.

    Partial updates are not supported; every required field must be sent
    again. The task keeps its id and its position in the list.

    Raises:
        400: Missing or invalid fields
        404: Task not found
        500: Tasks file could not be read or written
    """
    result = await repository.update(task_id, fields)
    if not result.ok:
        raise_for_error(result)

    logger.info(f"Updated task {task_id}")
    return result.value


@router.delete("/{task_id}", response_model=DeleteTaskResponse)
async def delete_task(task_id: str, repository: JsonTaskRepository = Depends(get_task_repository)):
    """Delete a task and return the removed record"""
    result = await repository.delete(task_id)
    if not result.ok:
        raise_for_error(result)

    logger.info(f"Deleted task {task_id}")
    return DeleteTaskResponse(deleted_task=result.value)
