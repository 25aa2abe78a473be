"""Dashboard service — daily metrics for the home screen."""

import math
from collections import Counter
from datetime import date, datetime

import pytz

from barberhub.application.services.detail_service import appointments_by_date, sales_by_date
from barberhub.config import get_settings
from barberhub.domain.schemas.dashboard import BarberClients, DashboardData, ServiceShare
from barberhub.infrastructure.store import BarbershopStore


def get_current_date() -> date:
    """Get current date in the configured timezone."""
    tz = pytz.timezone(get_settings().TIMEZONE)
    return datetime.now(tz).date()


def round_half_up(value: float) -> int:
    """Round like a till does: 12.5 -> 13, not Python's banker's 12."""
    return int(math.floor(value + 0.5))


def get_dashboard_snapshot(store: BarbershopStore, today: date) -> DashboardData:
    """Compute the dashboard for ``today``.

    The "today" figures only look at records dated ``today``. Barber
    performance and top services are computed over every appointment ever
    booked, which is what the dashboard has always shown.
    """
    day = today.isoformat()
    todays_appointments = appointments_by_date(store, day)
    todays_sales = sales_by_date(store, day)

    today_revenue = sum(sale.total_price for sale in todays_sales)
    today_products_sold = sum(sale.quantity for sale in todays_sales if sale.product_id is not None)
    today_clients_served = sum(1 for a in todays_appointments if a.status == "completed")

    appointments = store.appointments.list()

    per_barber = Counter(a.barber_id for a in appointments)
    barber_performance = sorted(
        (BarberClients(name=b.name, clients=per_barber[b.id]) for b in store.barbers.list()),
        key=lambda row: row.clients,
        reverse=True,
    )

    per_service = Counter(a.service_id for a in appointments)
    total = len(appointments) or 1
    top_services = sorted(
        (
            ServiceShare(name=s.name, percentage=round_half_up(per_service[s.id] / total * 100))
            for s in store.services.list()
        ),
        key=lambda row: row.percentage,
        reverse=True,
    )

    return DashboardData(
        today_appointments=len(todays_appointments),
        today_clients_served=today_clients_served,
        today_revenue=today_revenue,
        today_products_sold=today_products_sold,
        barber_performance=barber_performance,
        top_services=top_services,
    )
