"""Report service — aggregated figures over an inclusive date range."""

import calendar
from collections import Counter, defaultdict
from datetime import date, timedelta
from typing import Literal, Tuple

from barberhub.application.services.detail_service import appointment_with_details, sale_with_details
from barberhub.domain.schemas.dashboard import (
    BarberReportRow,
    DailyRevenue,
    ProductQuantity,
    ReportData,
    ServiceCount,
)
from barberhub.infrastructure.store import BarbershopStore

PeriodPreset = Literal["today", "week", "month"]

TOP_PRODUCTS_LIMIT = 5

# Longest range a report may cover, in days (one leap year).
MAX_REPORT_DAYS = 366


def resolve_period(preset: PeriodPreset, today: date) -> Tuple[date, date]:
    """Map a report preset to its (start, end) dates."""
    if preset == "today":
        return today, today
    if preset == "week":
        return today - timedelta(days=6), today
    if preset == "month":
        last_day = calendar.monthrange(today.year, today.month)[1]
        return today.replace(day=1), today.replace(day=last_day)
    raise ValueError(f"Unknown report period: {preset}")


def span_in_days(start: str, end: str) -> int:
    """Number of days in the inclusive range ``start..end``."""
    return (date.fromisoformat(end) - date.fromisoformat(start)).days + 1


def _days_between(start: str, end: str) -> list[str]:
    current, last = date.fromisoformat(start), date.fromisoformat(end)
    days = []
    while current <= last:
        days.append(current.isoformat())
        current += timedelta(days=1)
    return days


def get_period_report(store: BarbershopStore, start_date: str, end_date: str) -> ReportData:
    """Build the report for ``start_date <= date <= end_date``.

    Dates are "YYYY-MM-DD" strings, compared as text. Only records inside
    the range are joined, so a dangling reference elsewhere does not fail
    the report.
    """
    appointments = [
        appointment_with_details(store, a) for a in store.appointments.list()
        if start_date <= a.date <= end_date
    ]
    sales = [
        sale_with_details(store, s) for s in store.sales.list()
        if start_date <= s.date <= end_date
    ]

    barber_performance = []
    for barber in store.barbers.list():
        booked = [a for a in appointments if a.barber_id == barber.id]
        revenue = sum(
            s.total_price for s in sales
            if s.appointment is not None and s.appointment.barber_id == barber.id
        )
        barber_performance.append(BarberReportRow(
            name=barber.name,
            appointments=len(booked),
            completed=sum(1 for a in booked if a.status == "completed"),
            revenue=revenue,
        ))
    barber_performance.sort(key=lambda row: row.completed, reverse=True)

    service_counts = Counter(a.service.name for a in appointments)
    service_popularity = [
        ServiceCount(name=name, count=count)
        for name, count in sorted(service_counts.items(), key=lambda item: item[1], reverse=True)
    ]

    product_quantities: dict[str, int] = defaultdict(int)
    for sale in sales:
        if sale.product is not None:
            product_quantities[sale.product.name] += sale.quantity
    top_products = [
        ProductQuantity(name=name, quantity=quantity)
        for name, quantity in sorted(product_quantities.items(), key=lambda item: item[1], reverse=True)
    ][:TOP_PRODUCTS_LIMIT]

    revenue_by_day = dict.fromkeys(_days_between(start_date, end_date), 0.0)
    for sale in sales:
        revenue_by_day[sale.date] = revenue_by_day.get(sale.date, 0.0) + sale.total_price

    return ReportData(
        start_date=start_date,
        end_date=end_date,
        total_revenue=sum(s.total_price for s in sales),
        total_appointments=len(appointments),
        completed_appointments=sum(1 for a in appointments if a.status == "completed"),
        product_sales=sum(1 for s in sales if s.product_id is not None),
        barber_performance=barber_performance,
        service_popularity=service_popularity,
        top_products=top_products,
        daily_revenue=[DailyRevenue(date=day, amount=amount) for day, amount in revenue_by_day.items()],
    )
