"""
Client and freelancer dashboard view-models.
"""

from fasttruck.dashboards.views import (
    ClientDashboard,
    Dashboard,
    FreelancerDashboard,
    Notice,
    dashboard_for,
)

__all__ = ["ClientDashboard", "Dashboard", "FreelancerDashboard", "Notice", "dashboard_for"]
