"""Task domain model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """A unit of work tracked by the service.

    ``id`` is ``None`` until the task has been stored; afterwards it holds the
    string form of the document identifier assigned by the repository.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str | None = None
    title: str = Field(default="", max_length=255)
    description: str = ""


__all__ = ["Task"]
