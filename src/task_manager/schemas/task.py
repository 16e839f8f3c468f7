"""Task-related Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

TASK_READ_EXAMPLE = {
    "id": "65f1c2a9e4b0a1d2c3b4a5f6",
    "title": "Draft product documentation",
    "description": "Outline sections for the public API guide.",
}


class TaskWrite(BaseModel):
    """Payload for creating a task or replacing an existing one."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "title": "Draft product documentation",
                "description": "Outline sections for the public API guide.",
            }
        },
    )

    title: str = Field(min_length=1, max_length=255)
    description: str = Field(default="")


class TaskRead(BaseModel):
    """Public representation of a task."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={"example": TASK_READ_EXAMPLE},
    )

    id: str
    title: str
    description: str = ""


__all__ = ["TaskRead", "TaskWrite"]
