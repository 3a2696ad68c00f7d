"""Task domain models"""
from pydantic import BaseModel, Field


class TaskFields(BaseModel):
    """User editable task fields, required on create and update"""
    title: str
    employee: str
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    description: str

    class Config:
        populate_by_name = True


class Task(BaseModel):
    """Complete task record as stored in the tasks file"""
    id: str
    title: str
    employee: str
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    description: str

    class Config:
        populate_by_name = True

    @classmethod
    def from_fields(cls, task_id: str, fields: TaskFields) -> "Task":
        """Build a task from validated fields and an identifier"""
        return cls(id=task_id, **fields.model_dump())

    def to_json(self) -> dict:
        """Serialize with the camelCase keys used on disk and on the wire"""
        return self.model_dump(by_alias=True)
