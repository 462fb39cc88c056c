"""Analytics tab: aggregates over the cached project collection"""

import csv
import io
from typing import Dict, Iterable, List
from pydantic import BaseModel, Field

from survey_schedule.client.api_client import ProjectApiClient
from survey_schedule.client.models import Project
from survey_schedule.client.query_cache import PROJECTS_KEY, QueryCache
from survey_schedule.models.project import ProjectStatus

# Equipment always listed in usage, even when unused
KNOWN_EQUIPMENT = ["FARO", "L2pro", "Pro3", "RTC", "BLK", "Pro2"]

# Smallest bar drawn for a non-zero count, in percent
MIN_BAR_PERCENTAGE = 5.0


class EquipmentUsage(BaseModel):
    name: str
    count: int
    percentage: float = 0.0


class StatusCount(BaseModel):
    status: ProjectStatus
    count: int
    percentage: float = 0.0


class MonthlyCount(BaseModel):
    year: int
    month: int
    count: int

    @property
    def label(self) -> str:
        return f"{self.year}年{self.month}月"


class AnalyticsSummary(BaseModel):
    """Everything the analytics tab renders"""

    total: int
    completed: int
    scheduled: int
    not_quoted: int
    equipment_usage: List[EquipmentUsage] = Field(default_factory=list)
    status_counts: List[StatusCount] = Field(default_factory=list)
    monthly_counts: List[MonthlyCount] = Field(default_factory=list)


def _bar_percentage(count: int, scale: int) -> float:
    if count <= 0 or scale <= 0:
        return 0.0
    return max(count / scale * 100, MIN_BAR_PERCENTAGE)


def equipment_usage_counts(projects: Iterable[Project]) -> Dict[str, int]:
    """
    Occurrences of each known equipment name across all projects.

    Every known name starts at zero; names outside KNOWN_EQUIPMENT are
    not counted.
    """
    usage = {name: 0 for name in KNOWN_EQUIPMENT}
    for project in projects:
        for name in project.equipment:
            if name in usage:
                usage[name] += 1
    return usage


def equipment_usage(projects: Iterable[Project]) -> List[EquipmentUsage]:
    """Usage sorted by count, busiest first; bars scale to the busiest"""
    usage = equipment_usage_counts(projects)
    highest = max(usage.values(), default=0)
    ranked = sorted(usage.items(), key=lambda item: item[1], reverse=True)
    return [
        EquipmentUsage(name=name, count=count, percentage=_bar_percentage(count, highest))
        for name, count in ranked
    ]


def status_counts(projects: Iterable[Project]) -> List[StatusCount]:
    """Projects per status present, in lifecycle order; bars scale to the total"""
    projects = list(projects)
    counts: Dict[ProjectStatus, int] = {}
    for project in projects:
        counts[project.status] = counts.get(project.status, 0) + 1

    return [
        StatusCount(
            status=status,
            count=counts[status],
            percentage=_bar_percentage(counts[status], len(projects)),
        )
        for status in ProjectStatus
        if status in counts
    ]


def monthly_counts(projects: Iterable[Project]) -> List[MonthlyCount]:
    """Projects per start month, oldest first; projects without a start date are skipped"""
    counts: Dict[tuple, int] = {}
    for project in projects:
        if project.start_date:
            key = (project.start_date.year, project.start_date.month)
            counts[key] = counts.get(key, 0) + 1

    return [
        MonthlyCount(year=year, month=month, count=count)
        for (year, month), count in sorted(counts.items())
    ]


def summarize(projects: Iterable[Project]) -> AnalyticsSummary:
    projects = list(projects)
    by_status = {entry.status: entry.count for entry in status_counts(projects)}
    return AnalyticsSummary(
        total=len(projects),
        completed=by_status.get(ProjectStatus.COMPLETED, 0),
        scheduled=by_status.get(ProjectStatus.SCHEDULED, 0),
        not_quoted=by_status.get(ProjectStatus.NOT_QUOTED, 0),
        equipment_usage=equipment_usage(projects),
        status_counts=status_counts(projects),
        monthly_counts=monthly_counts(projects),
    )


def export_csv(summary: AnalyticsSummary) -> str:
    """Flatten a summary into CSV rows of (section, key, count)"""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["section", "key", "count"])
    for entry in summary.equipment_usage:
        writer.writerow(["equipment", entry.name, entry.count])
    for entry in summary.status_counts:
        writer.writerow(["status", entry.status.value, entry.count])
    for entry in summary.monthly_counts:
        writer.writerow(["month", entry.label, entry.count])
    return buffer.getvalue()


class AnalyticsView:
    """Recomputes the summary from whatever the shared cache holds"""

    def __init__(self, client: ProjectApiClient, cache: QueryCache):
        self.client = client
        self.cache = cache

    async def summary(self) -> AnalyticsSummary:
        projects = await self.cache.fetch(PROJECTS_KEY, self.client.get_all)
        return summarize(projects)

    async def export_csv(self) -> str:
        return export_csv(await self.summary())
