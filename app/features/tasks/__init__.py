"""Tasks feature module"""

from app.features.tasks.api import router
from app.features.tasks.repository import JsonTaskRepository
from app.features.tasks.domain import Task, TaskFields
from app.features.tasks.errors import (
    Err,
    NotFound,
    Ok,
    Result,
    StorageReadError,
    StorageWriteError,
    TaskError,
    ValidationError,
)
from app.features.tasks.validation import validate_task_fields

__all__ = [
    "router",
    "JsonTaskRepository",
    "Task",
    "TaskFields",
    "Err",
    "NotFound",
    "Ok",
    "Result",
    "StorageReadError",
    "StorageWriteError",
    "TaskError",
    "ValidationError",
    "validate_task_fields",
]
