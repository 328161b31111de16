"""Application layer: DTOs, interfaces, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories).
"""

from app.application.interfaces import IDashboardRepository
from app.application.use_cases import GetAllTasksUseCase

__all__ = ["GetAllTasksUseCase", "IDashboardRepository"]
