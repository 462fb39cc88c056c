"""View models for the project list, calendar and analytics tabs"""

from .app import Tab, TrackerApp
from .analytics import AnalyticsView
from .calendar_view import CalendarView
from .importer import ImportView
from .project_form import ProjectFormData
from .project_list import ProjectListView

__all__ = [
    "Tab",
    "TrackerApp",
    "AnalyticsView",
    "CalendarView",
    "ImportView",
    "ProjectFormData",
    "ProjectListView",
]
