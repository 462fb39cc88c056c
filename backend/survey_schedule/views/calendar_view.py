"""Calendar tab: projects placed on a month or week grid"""

import calendar as month_calendar
from datetime import date, timedelta
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple
from pydantic import BaseModel, Field

from survey_schedule.client.api_client import ProjectApiClient
from survey_schedule.client.models import Project
from survey_schedule.client.query_cache import PROJECTS_KEY, QueryCache
from survey_schedule.models.project import ProjectStatus

DEFAULT_EVENT_COLOR = "#3174ad"

STATUS_COLORS: Dict[ProjectStatus, str] = {
    ProjectStatus.COMPLETED: "#10b981",
    ProjectStatus.SCHEDULED: "#3b82f6",
    ProjectStatus.QUOTED: "#f59e0b",
    ProjectStatus.NOT_QUOTED: "#6b7280",
    ProjectStatus.CANCELLED: "#ef4444",
}


class CalendarMode(str, Enum):
    MONTH = "month"
    WEEK = "week"


class NavigateAction(str, Enum):
    PREV = "prev"
    NEXT = "next"
    TODAY = "today"


class CalendarEvent(BaseModel):
    """A project's shoot interval; both ends are inclusive days"""

    id: int
    title: str
    start: date
    end: date
    status: ProjectStatus
    company_name: str
    site_name: str
    photographer: str
    equipment: List[str] = Field(default_factory=list)
    color: str = DEFAULT_EVENT_COLOR

    def overlaps(self, range_start: date, range_end: date) -> bool:
        return self.start <= range_end and self.end >= range_start

    def covers(self, day: date) -> bool:
        return self.start <= day <= self.end


class CalendarDay(BaseModel):
    day: date
    in_current_month: bool
    events: List[CalendarEvent] = Field(default_factory=list)


def event_color(status: ProjectStatus) -> str:
    return STATUS_COLORS.get(status, DEFAULT_EVENT_COLOR)


def build_events(projects: Iterable[Project]) -> List[CalendarEvent]:
    """Events for every project with both a start and an end date"""
    return [
        CalendarEvent(
            id=project.id,
            title=f"{project.company_name} - {project.site_name}",
            start=project.start_date,
            end=project.end_date,
            status=project.status,
            company_name=project.company_name,
            site_name=project.site_name,
            photographer=project.photographer or "",
            equipment=list(project.equipment),
            color=event_color(project.status),
        )
        for project in projects
        if project.start_date and project.end_date
    ]


def _week_start(day: date) -> date:
    # Weeks start on Sunday
    return day - timedelta(days=(day.weekday() + 1) % 7)


def _shift_month(day: date, months: int) -> date:
    month_index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(month_index, 12)
    last_day = month_calendar.monthrange(year, month + 1)[1]
    return date(year, month + 1, min(day.day, last_day))


class CalendarView:
    """Month/week calendar over the shared project cache"""

    def __init__(
        self,
        client: ProjectApiClient,
        cache: QueryCache,
        current_date: Optional[date] = None,
        mode: CalendarMode = CalendarMode.MONTH,
    ):
        self.client = client
        self.cache = cache
        self.current_date = current_date or date.today()
        self.mode = CalendarMode(mode)

    def set_mode(self, mode: CalendarMode) -> None:
        self.mode = CalendarMode(mode)

    def navigate(self, action: NavigateAction) -> date:
        action = NavigateAction(action)
        if action == NavigateAction.TODAY:
            self.current_date = date.today()
        elif self.mode == CalendarMode.MONTH:
            self.current_date = _shift_month(
                self.current_date, 1 if action == NavigateAction.NEXT else -1
            )
        else:
            step = timedelta(days=7)
            self.current_date += step if action == NavigateAction.NEXT else -step
        return self.current_date

    def visible_range(self) -> Tuple[date, date]:
        """
        First and last day shown. A month view covers whole weeks from the
        Sunday on or before the 1st to the Saturday on or after month end.
        """
        if self.mode == CalendarMode.WEEK:
            start = _week_start(self.current_date)
            return start, start + timedelta(days=6)

        first = self.current_date.replace(day=1)
        last = first.replace(day=month_calendar.monthrange(first.year, first.month)[1])
        return _week_start(first), _week_start(last) + timedelta(days=6)

    @property
    def label(self) -> str:
        if self.mode == CalendarMode.MONTH:
            return f"{self.current_date.year}年{self.current_date.month}月"
        start, end = self.visible_range()
        return f"{start.isoformat()} - {end.isoformat()}"

    async def events(self) -> List[CalendarEvent]:
        projects = await self.cache.fetch(PROJECTS_KEY, self.client.get_all)
        return build_events(projects)

    async def visible_events(self) -> List[CalendarEvent]:
        start, end = self.visible_range()
        return [event for event in await self.events() if event.overlaps(start, end)]

    async def grid(self) -> List[List[CalendarDay]]:
        """Weeks of days, each day listing the events it falls within"""
        start, end = self.visible_range()
        events = await self.visible_events()

        weeks: List[List[CalendarDay]] = []
        day = start
        while day <= end:
            week = []
            for _ in range(7):
                week.append(
                    CalendarDay(
                        day=day,
                        in_current_month=day.month == self.current_date.month,
                        events=[event for event in events if event.covers(day)],
                    )
                )
                day += timedelta(days=1)
            weeks.append(week)
        return weeks
