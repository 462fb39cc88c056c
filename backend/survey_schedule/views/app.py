"""Tabbed application shell sharing one client and one cache"""

from enum import Enum
from typing import Optional, Union

from survey_schedule.client.api_client import ProjectApiClient
from survey_schedule.client.query_cache import QueryCache
from survey_schedule.views.analytics import AnalyticsView
from survey_schedule.views.calendar_view import CalendarView
from survey_schedule.views.importer import ImportView
from survey_schedule.views.project_list import ProjectListView


class Tab(str, Enum):
    PROJECTS = "projects"
    CALENDAR = "calendar"
    ANALYTICS = "analytics"


TAB_LABELS = {
    Tab.PROJECTS: "プロジェクト管理",
    Tab.CALENDAR: "カレンダー表示",
    Tab.ANALYTICS: "分析・集計",
}


class TrackerApp:
    """
    Owns the views. All of them read through the same QueryCache, so a
    write made from any tab is visible in every other tab on its next read.
    """

    def __init__(
        self,
        client: Optional[ProjectApiClient] = None,
        base_url: Optional[str] = None,
    ):
        self.client = client or ProjectApiClient(base_url=base_url)
        self.cache = QueryCache()
        self.active_tab = Tab.PROJECTS

        self.project_list = ProjectListView(self.client, self.cache)
        self.calendar = CalendarView(self.client, self.cache)
        self.analytics = AnalyticsView(self.client, self.cache)
        self.importer = ImportView(self.client, self.cache)

    async def __aenter__(self) -> "TrackerApp":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.client.close()

    def select_tab(self, tab: Union[Tab, str]) -> Tab:
        self.active_tab = Tab(tab)
        return self.active_tab

    @property
    def active_view(self) -> Union[ProjectListView, CalendarView, AnalyticsView]:
        return {
            Tab.PROJECTS: self.project_list,
            Tab.CALENDAR: self.calendar,
            Tab.ANALYTICS: self.analytics,
        }[self.active_tab]
