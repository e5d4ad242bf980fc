"""
app/services/performance_service.py

Achieved-versus-target arithmetic.

Pure functions over pre-fetched rows; no database access happens here.
The caller loads reports and the target for a month and hands them in.

Formula
-------
progress = min(100, achieved / (target or 1) * 100)

A zero target is treated as 1 so that any activity shows up as progress
instead of raising. Progress is capped at 100 but not floored: negative
revenue corrections yield negative progress.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Final, Sequence

from db.repositories.types import ReportingPeriod

logger = logging.getLogger(__name__)

PROGRESS_CAP: Final[float] = 100.0

# report column -> target column
METRIC_TARGET_FIELDS: Final[dict[str, str]] = {
    "revenue": "sales_target_monthly",
    "calls": "call_target_monthly",
    "emails": "email_target_monthly",
    "whatsapp": "whatsapp_target_monthly",
    "social": "social_target_monthly",
}


def progress_percent(achieved: float, target: float | None) -> float:
    """
    Percentage of ``target`` reached by ``achieved``, capped at 100.
    """
    denominator = target or 1
    return min(PROGRESS_CAP, (achieved / denominator) * 100)


@dataclass(frozen=True)
class MetricProgress:
    metric: str
    achieved: float
    target: float
    progress: float


@dataclass(frozen=True)
class MonthlyPerformance:
    """
    One employee's month: a MetricProgress per tracked metric.
    """

    period: ReportingPeriod
    report_count: int
    metrics: tuple[MetricProgress, ...]

    def get(self, metric: str) -> MetricProgress:
        for item in self.metrics:
            if item.metric == metric:
                return item
        raise KeyError(metric)


class PerformanceService:
    """
    Stateless calculator turning reports and a target into progress figures.

    Usage::

        summary = PerformanceService().summarize_month(reports, target, period)
        summary.get("revenue").progress
    """

    def summarize_month(
        self,
        reports: Sequence[Any],
        target: Any | None,
        period: ReportingPeriod,
    ) -> MonthlyPerformance:
        """
        Sum the activity of ``reports`` dated inside ``period`` and compare
        each metric against ``target``.

        ``target`` may be ``None`` (no quota set); every target is then 0.
        Reports dated outside the period are ignored.
        """
        in_period = [report for report in reports if period.contains(report.date)]

        metrics: list[MetricProgress] = []
        for metric, target_field in METRIC_TARGET_FIELDS.items():
            achieved = sum((getattr(report, metric) or 0) for report in in_period)
            goal = (getattr(target, target_field) or 0) if target is not None else 0
            metrics.append(
                MetricProgress(
                    metric=metric,
                    achieved=achieved,
                    target=goal,
                    progress=progress_percent(achieved, goal),
                )
            )

        logger.debug(
            "Summarized period=%s reports=%d ignored=%d",
            period,
            len(in_period),
            len(reports) - len(in_period),
        )
        return MonthlyPerformance(
            period=period,
            report_count=len(in_period),
            metrics=tuple(metrics),
        )
