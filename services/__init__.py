"""Service layer — orchestrates the engines for a dashboard query."""
from .dashboard_service import DashboardService, DashboardSession

__all__ = ["DashboardService", "DashboardSession"]
