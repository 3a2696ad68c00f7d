"""JSON file repository for tasks"""

import asyncio
import contextlib
import json
import os
import shutil
import tempfile
import uuid
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from app.features.tasks.domain import Task
from app.features.tasks.errors import (
    Err,
    NotFound,
    Ok,
    Result,
    StorageReadError,
    StorageWriteError,
)
from app.features.tasks.validation import validate_task_fields


def _new_task_id() -> str:
    return str(uuid.uuid4())


class JsonTaskRepository:
    """
    Repository owning the task collection stored as a JSON array on disk.

    Every operation loads the whole file fresh, and mutating operations write
    the whole collection back before returning. Failures are returned as
    Err(...) values instead of being raised.

    With lock_writes enabled, create/update/delete hold an asyncio lock across
    their load-mutate-persist sequence so that concurrent requests served by
    the same instance cannot overwrite each other's changes. Separate
    instances or processes sharing one file are not coordinated.
    """

    def __init__(
        self,
        storage_path: Union[str, Path],
        *,
        lock_writes: bool = True,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self._path = Path(storage_path)
        self._id_factory = id_factory or _new_task_id
        self._write_lock: Optional[asyncio.Lock] = asyncio.Lock() if lock_writes else None

    @property
    def storage_path(self) -> Path:
        return self._path

    # ---- persistence ----

    def _read_collection(self) -> Result[List[Task]]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as e:
            return Err(StorageReadError(str(self._path), str(e)))

        try:
            data = json.loads(raw)
        except ValueError as e:
            return Err(StorageReadError(str(self._path), f"invalid JSON: {e}"))

        if not isinstance(data, list):
            return Err(StorageReadError(str(self._path), "expected a JSON array of tasks"))

        try:
            return Ok([Task.model_validate(item) for item in data])
        except PydanticValidationError as e:
            return Err(StorageReadError(str(self._path), f"malformed task entry: {e}"))

    def _write_collection(self, tasks: List[Task]) -> Result[List[Task]]:
        # Unique sibling file per write; the original is only ever replaced whole
        payload = json.dumps([task.to_json() for task in tasks], indent=2, ensure_ascii=False)
        tmp_path: Optional[Path] = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            tmp_path = Path(tmp_name)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            with contextlib.suppress(OSError):
                shutil.copymode(self._path, tmp_path)
            os.replace(tmp_path, self._path)
        except OSError as e:
            if tmp_path is not None:
                with contextlib.suppress(OSError):
                    tmp_path.unlink()
            return Err(StorageWriteError(str(self._path), str(e)))
        return Ok(tasks)

    async def _load(self) -> Result[List[Task]]:
        return await asyncio.to_thread(self._read_collection)

    async def _persist(self, tasks: List[Task]) -> Result[List[Task]]:
        return await asyncio.to_thread(self._write_collection, tasks)

    @contextlib.asynccontextmanager
    async def _mutation(self):
        if self._write_lock is None:
            yield
            return
        async with self._write_lock:
            yield

    @staticmethod
    def _index_of(tasks: List[Task], task_id: str) -> Optional[int]:
        for index, task in enumerate(tasks):
            if task.id == task_id:
                return index
        return None

    # ---- public API ----

    async def list_all(self) -> Result[List[Task]]:
        """Return every task in stored order"""
        return await self._load()

    async def get_by_id(self, task_id: str) -> Result[Task]:
        """Find a single task by exact id match"""
        loaded = await self._load()
        if not loaded.ok:
            return loaded

        index = self._index_of(loaded.value, task_id)
        if index is None:
            return Err(NotFound(task_id))
        return Ok(loaded.value[index])

    async def create(self, fields: Mapping[str, Any]) -> Result[Task]:
        """
        Validate fields, append a new task with a generated id and persist.

        Returns:
            Ok(Task) with the created task, or Err(ValidationError |
            StorageReadError | StorageWriteError)
        """
        validated = validate_task_fields(fields)
        if not validated.ok:
            return validated

        async with self._mutation():
            loaded = await self._load()
            if not loaded.ok:
                return loaded

            task = Task.from_fields(self._id_factory(), validated.value)
            saved = await self._persist([*loaded.value, task])
            if not saved.ok:
                return saved
            return Ok(task)

    async def update(self, task_id: str, fields: Mapping[str, Any]) -> Result[Task]:
        """
        Replace every field of an existing task, keeping its id and position.

        Validation runs before the collection is read, so invalid data is
        reported even for an unknown id.
        """
        validated = validate_task_fields(fields)
        if not validated.ok:
            return validated

        async with self._mutation():
            loaded = await self._load()
            if not loaded.ok:
                return loaded

            tasks = list(loaded.value)
            index = self._index_of(tasks, task_id)
            if index is None:
                return Err(NotFound(task_id))

            task = Task.from_fields(tasks[index].id, validated.value)
            tasks[index] = task
            saved = await self._persist(tasks)
            if not saved.ok:
                return saved
            return Ok(task)

    async def delete(self, task_id: str) -> Result[Task]:
        """Remove one task by id and return it as it was before removal"""
        async with self._mutation():
            loaded = await self._load()
            if not loaded.ok:
                return loaded

            tasks = list(loaded.value)
            index = self._index_of(tasks, task_id)
            if index is None:
                return Err(NotFound(task_id))

            deleted = tasks.pop(index)
            saved = await self._persist(tasks)
            if not saved.ok:
                return saved
            return Ok(deleted)
