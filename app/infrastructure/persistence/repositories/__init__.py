"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.dashboard_repo import DashboardRepository

__all__ = ["DashboardRepository"]
