"""Seed command creating the admin account and sample tasks."""

from __future__ import annotations

import asyncio
import logging

from ..core.config import Settings, get_settings
from ..core.logging import configure_logging
from ..core.security import JWTService, PasswordService
from ..errors import DuplicateRecordError
from ..models import Task, User, UserRole
from ..repositories import TaskRepository, UserRepository
from ..usecases import TaskUseCase, UserUseCase
from .mongo import close_document_store, init_document_store

logger = logging.getLogger(__name__)

SAMPLE_TASKS = (
    Task(title="Set up local environment", description="Install dependencies and run the application."),
    Task(title="Draft initial tasks", description="Outline work items to deliver the MVP."),
    Task(title="Celebrate first release", description="Ship the first release and celebrate the milestone."),
)


async def seed(settings: Settings) -> None:
    """Create the configured admin user and sample tasks when missing."""
    user_usecase = UserUseCase(
        UserRepository(),
        PasswordService.from_settings(settings),
        JWTService.from_settings(settings),
    )
    task_usecase = TaskUseCase(TaskRepository())

    try:
        await user_usecase.register(
            User(username=settings.admin_username, password=settings.admin_password, role=UserRole.ADMIN)
        )
    except DuplicateRecordError:
        logger.info("Admin user already present", extra={"username": settings.admin_username})

    if await task_usecase.get_tasks():
        return
    for task in SAMPLE_TASKS:
        await task_usecase.create_task(task)
    logger.info("Seeded sample tasks", extra={"count": len(SAMPLE_TASKS)})


async def _run_seed() -> None:
    settings = get_settings()
    await init_document_store()
    try:
        await seed(settings)
    finally:
        await close_document_store()


def main() -> None:
    """Entry-point hook for ``task-manager-seed``."""
    configure_logging(get_settings())
    asyncio.run(_run_seed())


if __name__ == "__main__":  # pragma: no cover - manual execution entry-point
    main()
