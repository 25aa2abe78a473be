"""Dashboard API — daily figures and period reports for the frontend."""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query

from barberhub.application.services.dashboard_service import get_current_date, get_dashboard_snapshot
from barberhub.application.services.report_service import (
    MAX_REPORT_DAYS,
    PeriodPreset,
    get_period_report,
    resolve_period,
    span_in_days,
)
from barberhub.core.exceptions import BusinessRuleViolationException
from barberhub.domain.schemas.common import DateStr
from barberhub.domain.schemas.dashboard import DashboardData, ReportData
from barberhub.infrastructure.store import BarbershopStore
from barberhub.interfaces.deps import get_store

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/api", tags=["Dashboard"])


@router.get("/dashboard", response_model=DashboardData)
def dashboard(store: BarbershopStore = Depends(get_store)):
    """Today's appointments, revenue and products sold, plus all-time rankings."""
    return get_dashboard_snapshot(store, get_current_date())


@router.get("/reports", response_model=ReportData)
def report(
    start_date: Optional[DateStr] = Query(None),
    end_date: Optional[DateStr] = Query(None),
    preset: PeriodPreset = "week",
    store: BarbershopStore = Depends(get_store),
):
    """Report for an explicit range, or for a preset when no range is given.

    ``week`` covers the last 7 days including today; ``month`` the whole
    current month.
    """
    if (start_date is None) != (end_date is None):
        raise BusinessRuleViolationException(
            "start_date e end_date devem ser informados juntos",
            {"start_date": start_date, "end_date": end_date},
        )

    if start_date is None:
        start, end = resolve_period(preset, get_current_date())
        start_date, end_date = start.isoformat(), end.isoformat()

    if start_date > end_date:
        raise BusinessRuleViolationException(
            "start_date deve ser anterior ou igual a end_date",
            {"start_date": start_date, "end_date": end_date},
        )

    if span_in_days(start_date, end_date) > MAX_REPORT_DAYS:
        raise BusinessRuleViolationException(
            f"O período do relatório não pode passar de {MAX_REPORT_DAYS} dias",
            {"start_date": start_date, "end_date": end_date, "max_days": MAX_REPORT_DAYS},
        )

    logger.info("Building report", start_date=start_date, end_date=end_date)
    return get_period_report(store, start_date, end_date)
