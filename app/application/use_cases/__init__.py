"""Application use cases: one entry point per workflow."""

from app.application.use_cases.dashboard import GetAllTasksUseCase

__all__ = ["GetAllTasksUseCase"]
