"""Task use case: thin delegation to the task repository."""

from __future__ import annotations

import logging

from ..interfaces import TaskRepositoryProtocol
from ..models import Task

logger = logging.getLogger(__name__)


class TaskUseCase:
    """Expose task CRUD to the HTTP layer.

    Every call is forwarded to the repository as-is; results and errors are
    returned to the caller unchanged.
    """

    def __init__(self, repository: TaskRepositoryProtocol) -> None:
        self._repository = repository

    async def get_tasks(self) -> list[Task]:
        return await self._repository.get_tasks()

    async def get_task_by_id(self, task_id: str) -> Task:
        return await self._repository.get_task_by_id(task_id)

    async def create_task(self, task: Task) -> Task:
        created = await self._repository.create_task(task)
        logger.info("Task created", extra={"task_id": created.id})
        return created

    async def update_task(self, task_id: str, task: Task) -> Task:
        updated = await self._repository.update_task(task_id, task)
        logger.info("Task updated", extra={"task_id": task_id})
        return updated

    async def delete_task(self, task_id: str) -> None:
        await self._repository.delete_task(task_id)
        logger.info("Task deleted", extra={"task_id": task_id})


__all__ = ["TaskUseCase"]
