"""Routes handling task CRUD operations."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import AdminUserDependency, CurrentUserDependency, TaskUseCaseDependency
from ...models import Task
from ...schemas import MessageResponse, TaskRead, TaskWrite

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _map_task(task: Task) -> TaskRead:
    return TaskRead.model_validate(task)


@router.get("", response_model=list[TaskRead], summary="List all tasks")
async def get_tasks(
    usecase: TaskUseCaseDependency,
    _: CurrentUserDependency,
) -> list[TaskRead]:
    tasks = await usecase.get_tasks()
    return [_map_task(task) for task in tasks]


@router.get("/{task_id}", response_model=TaskRead, summary="Retrieve a task by id")
async def get_task_by_id(
    task_id: str,
    usecase: TaskUseCaseDependency,
    _: CurrentUserDependency,
) -> TaskRead:
    task = await usecase.get_task_by_id(task_id)
    return _map_task(task)


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
async def create_task(
    payload: TaskWrite,
    usecase: TaskUseCaseDependency,
    _: AdminUserDependency,
) -> TaskRead:
    task = await usecase.create_task(Task(title=payload.title, description=payload.description))
    return _map_task(task)


@router.put("/{task_id}", response_model=TaskRead, summary="Replace an existing task")
async def update_task(
    task_id: str,
    payload: TaskWrite,
    usecase: TaskUseCaseDependency,
    _: AdminUserDependency,
) -> TaskRead:
    task = await usecase.update_task(task_id, Task(title=payload.title, description=payload.description))
    return _map_task(task)


@router.delete("/{task_id}", response_model=MessageResponse, summary="Delete a task")
async def delete_task(
    task_id: str,
    usecase: TaskUseCaseDependency,
    _: AdminUserDependency,
) -> MessageResponse:
    await usecase.delete_task(task_id)
    return MessageResponse(message="Task deleted successfully")
