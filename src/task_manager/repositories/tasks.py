"""Repository for task documents."""

from __future__ import annotations

from ..db.documents import TaskDocument
from ..models import Task
from .base import BaseRepository, translate_driver_errors


class TaskRepository(BaseRepository[TaskDocument]):
    """MongoDB persistence for ``Task`` entities."""

    entity_name = "Task"

    def __init__(self) -> None:
        super().__init__(TaskDocument)

    async def get_tasks(self) -> list[Task]:
        with translate_driver_errors("list tasks"):
            documents = await TaskDocument.find_all().to_list()
        return [document.to_domain() for document in documents]

    async def get_task_by_id(self, task_id: str) -> Task:
        document = await self._get_document(task_id)
        return document.to_domain()

    async def create_task(self, task: Task) -> Task:
        document = TaskDocument(title=task.title, description=task.description)
        with translate_driver_errors("create task"):
            await document.insert()
        return document.to_domain()

    async def update_task(self, task_id: str, task: Task) -> Task:
        """Overwrite the title and description of an existing task."""
        document = await self._get_document(task_id)
        document.title = task.title
        document.description = task.description
        with translate_driver_errors("update task"):
            await document.save()
        return document.to_domain()

    async def delete_task(self, task_id: str) -> None:
        document = await self._get_document(task_id)
        with translate_driver_errors("delete task"):
            await document.delete()


__all__ = ["TaskRepository"]
