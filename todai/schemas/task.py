"""Task API schemas.

Request bodies accept any JSON value per field: type and range rules live
in todai.application.services.task_validator so the server and the
console form share one implementation. Only keys present in the body
are forwarded (model_dump(exclude_unset=True)), which is how an update
tells "absent" from an explicit null.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from todai.domain.enums import TaskStatus


class TaskCreateRequest(BaseModel):
    """Request body for POST /tasks."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: Any = Field(default=None, description="Required, 1-200 characters after trimming")
    description: Any = Field(default=None, description="Up to 2000 characters after trimming")
    status: Any = Field(default=None, description="todo | in-progress | done (default todo)")
    priority: Any = Field(default=None, description="Integer 1-9 (1 = most important) or null")
    due_date: Any = Field(
        default=None,
        alias="dueDate",
        description="Unix seconds at UTC midnight (date-only) or null",
    )

    def to_payload(self) -> dict[str, Any]:
        """Present fields only, keyed by wire name."""
        return self.model_dump(exclude_unset=True, by_alias=True)


class TaskUpdateRequest(TaskCreateRequest):
    """Request body for PUT /tasks/{id} (partial; null clears priority/dueDate)."""


class TaskResponse(BaseModel):
    """Task on the wire; priority and dueDate are omitted when unset."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    status: TaskStatus
    priority: int | None = None
    due_date: int | None = Field(default=None, serialization_alias="dueDate")
    created_at: int = Field(serialization_alias="createdAt")
    updated_at: int = Field(serialization_alias="updatedAt")


class TaskDeleteResponse(BaseModel):
    """Confirmation body for DELETE /tasks/{id}."""

    message: str = "Task deleted successfully"
    id: str
