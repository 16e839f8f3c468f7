"""HTTP layer for the task manager service."""
