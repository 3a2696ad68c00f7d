"""Error variants and result wrappers for task repository operations"""

from dataclasses import dataclass, field
from typing import Generic, List, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationError:
    """Client supplied task data violates a field rule"""
    reason: str
    fields: List[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        if not self.fields:
            return self.reason
        return f"{self.reason}: {', '.join(self.fields)}"


@dataclass(frozen=True)
class NotFound:
    """No task with the requested id exists"""
    task_id: str

    @property
    def message(self) -> str:
        return f"Task {self.task_id} not found"


@dataclass(frozen=True)
class StorageReadError:
    """Backing file could not be read or parsed"""
    path: str
    reason: str

    @property
    def message(self) -> str:
        return f"Failed to read {self.path}: {self.reason}"


@dataclass(frozen=True)
class StorageWriteError:
    """Backing file could not be written"""
    path: str
    reason: str

    @property
    def message(self) -> str:
        return f"Failed to write {self.path}: {self.reason}"


TaskError = Union[ValidationError, NotFound, StorageReadError, StorageWriteError]


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: TaskError

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
