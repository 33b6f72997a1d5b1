"""Task API: list, get, create, update, delete."""

from typing import Annotated

from fastapi import APIRouter, Depends

from todai.api.dependencies import get_task_service
from todai.application.use_cases.tasks import TaskService
from todai.schemas.task import (
    TaskCreateRequest,
    TaskDeleteResponse,
    TaskResponse,
    TaskUpdateRequest,
)

router = APIRouter()

TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]

_ERRORS = {
    400: {"description": "Validation failed"},
    404: {"description": "Task not found"},
    500: {"description": "Storage failure"},
}


@router.get(
    "",
    response_model=list[TaskResponse],
    response_model_exclude_none=True,
    responses={500: _ERRORS[500]},
)
async def list_tasks(service: TaskServiceDep):
    """List all tasks, newest first."""
    tasks = await service.list_tasks()
    return [TaskResponse.model_validate(t) for t in tasks]


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    response_model_exclude_none=True,
    responses={404: _ERRORS[404], 500: _ERRORS[500]},
)
async def get_task(task_id: str, service: TaskServiceDep):
    """Get task by id."""
    return TaskResponse.model_validate(await service.get_task(task_id))


@router.post(
    "",
    response_model=TaskResponse,
    response_model_exclude_none=True,
    status_code=201,
    responses={400: _ERRORS[400], 500: _ERRORS[500]},
)
async def create_task(body: TaskCreateRequest, service: TaskServiceDep):
    """Create a task (title required; status defaults to todo)."""
    created = await service.create_task(body.to_payload())
    return TaskResponse.model_validate(created)


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    response_model_exclude_none=True,
    responses=_ERRORS,
)
async def update_task(task_id: str, body: TaskUpdateRequest, service: TaskServiceDep):
    """Update a task (partial: absent fields unchanged, null clears priority/dueDate)."""
    updated = await service.update_task(task_id, body.to_payload())
    return TaskResponse.model_validate(updated)


@router.delete(
    "/{task_id}",
    response_model=TaskDeleteResponse,
    responses={404: _ERRORS[404], 500: _ERRORS[500]},
)
async def delete_task(task_id: str, service: TaskServiceDep):
    """Delete a task."""
    deleted_id = await service.delete_task(task_id)
    return TaskDeleteResponse(id=deleted_id)
