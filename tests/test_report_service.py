"""Tests for period reports and report presets."""

from datetime import date

import pytest

from barberhub.application.services.report_service import get_period_report, resolve_period, span_in_days
from barberhub.core.exceptions import DanglingReferenceException


@pytest.fixture
def week(shop, make_appointment, make_sale):
    """A small week of activity around the ``shop`` fixture."""
    store = shop["store"]
    other = store.barbers.create({
        "name": "Felipe Costa", "position": "Barbeiro", "phone": "1", "email": "f@x.com", "status": "active",
    })
    beard = store.services.create({"name": "Barba", "duration": 30, "price": 30.0, "status": "active"})
    pomade = store.products.create({"name": "Pomada", "price": 35.0, "stock": 20, "status": "active"})
    oil = store.products.create({"name": "Óleo", "price": 45.0, "stock": 15, "status": "active"})

    first = make_appointment(date="2024-05-14", status="completed")
    second = make_appointment(date="2024-05-16", barber_id=other.id, service_id=beard.id, status="completed")
    make_appointment(date="2024-05-20", barber_id=other.id, service_id=beard.id, status="scheduled")
    make_appointment(date="2024-05-21", status="completed")  # outside the range

    make_sale(date="2024-05-14", appointment_id=first.id, total_price=40.0)
    make_sale(date="2024-05-16", appointment_id=second.id, total_price=30.0)
    make_sale(date="2024-05-16", product_id=pomade.id, quantity=2, total_price=70.0)
    make_sale(date="2024-05-20", product_id=oil.id, quantity=1, total_price=45.0)
    make_sale(date="2024-05-13", product_id=oil.id, quantity=9, total_price=405.0)  # outside the range
    return store


class TestPeriodReport:
    """get_period_report over 2024-05-14 .. 2024-05-20."""

    def test_totals(self, week) -> None:
        """Totals only include records inside the inclusive range."""
        report = get_period_report(week, "2024-05-14", "2024-05-20")

        assert report.total_revenue == 185.0
        assert report.total_appointments == 3
        assert report.completed_appointments == 2
        assert report.product_sales == 2

    def test_barber_breakdown(self, week) -> None:
        """Revenue is attributed through the appointment a sale pays for."""
        report = get_period_report(week, "2024-05-14", "2024-05-20")

        rows = [(r.name, r.appointments, r.completed, r.revenue) for r in report.barber_performance]
        assert rows == [
            ("Marcos Oliveira", 1, 1, 40.0),
            ("Felipe Costa", 2, 1, 30.0),
        ]

    def test_service_popularity(self, week) -> None:
        report = get_period_report(week, "2024-05-14", "2024-05-20")
        assert [(s.name, s.count) for s in report.service_popularity] == [("Barba", 2), ("Corte Degradê", 1)]

    def test_top_products_by_quantity(self, week) -> None:
        report = get_period_report(week, "2024-05-14", "2024-05-20")
        assert [(p.name, p.quantity) for p in report.top_products] == [("Pomada", 2), ("Óleo", 1)]

    def test_daily_revenue_is_zero_filled(self, week) -> None:
        """Every day of the range appears, even without sales."""
        report = get_period_report(week, "2024-05-14", "2024-05-20")

        assert [d.date for d in report.daily_revenue] == [
            "2024-05-14", "2024-05-15", "2024-05-16", "2024-05-17",
            "2024-05-18", "2024-05-19", "2024-05-20",
        ]
        assert [d.amount for d in report.daily_revenue] == [40.0, 0.0, 100.0, 0.0, 0.0, 0.0, 45.0]

    def test_single_day_range(self, week) -> None:
        """start == end is a valid, inclusive range."""
        report = get_period_report(week, "2024-05-16", "2024-05-16")
        assert report.total_appointments == 1
        assert report.total_revenue == 100.0

    def test_top_products_keeps_five(self, store, make_sale) -> None:
        """Only the five best sellers are listed."""
        for n in range(1, 8):
            product = store.products.create({"name": f"P{n}", "price": 1.0, "stock": 100, "status": "active"})
            make_sale(product_id=product.id, quantity=n, total_price=float(n))

        report = get_period_report(store, "2024-05-20", "2024-05-20")

        assert [p.name for p in report.top_products] == ["P7", "P6", "P5", "P4", "P3"]

    def test_empty_store(self, store) -> None:
        report = get_period_report(store, "2024-05-01", "2024-05-02")
        assert report.total_revenue == 0
        assert report.barber_performance == []
        assert [d.amount for d in report.daily_revenue] == [0.0, 0.0]

    def test_dangling_record_outside_range_is_skipped(self, week) -> None:
        """Only records inside the range are joined."""
        gone = week.clients.create({"name": "Cliente Antigo", "phone": "000"})
        week.appointments.create({
            "client_id": gone.id, "barber_id": 1, "service_id": 1,
            "date": "2024-04-01", "time": "09:00", "status": "completed",
        })
        week.clients.delete(gone.id)

        report = get_period_report(week, "2024-05-14", "2024-05-20")
        assert report.total_appointments == 3

        with pytest.raises(DanglingReferenceException):
            get_period_report(week, "2024-04-01", "2024-05-20")


@pytest.mark.parametrize(
    "start, end, expected",
    [("2024-05-20", "2024-05-20", 1), ("2024-05-14", "2024-05-20", 7), ("2024-01-01", "2024-12-31", 366)],
)
def test_span_in_days(start, end, expected) -> None:
    assert span_in_days(start, end) == expected


class TestResolvePeriod:
    """Report presets."""

    def test_today(self) -> None:
        assert resolve_period("today", date(2024, 5, 20)) == (date(2024, 5, 20), date(2024, 5, 20))

    def test_week_is_last_seven_days(self) -> None:
        assert resolve_period("week", date(2024, 5, 20)) == (date(2024, 5, 14), date(2024, 5, 20))

    def test_month_covers_whole_month(self) -> None:
        """February of a leap year ends on the 29th."""
        assert resolve_period("month", date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))

    def test_unknown_preset(self) -> None:
        with pytest.raises(ValueError):
            resolve_period("year", date(2024, 5, 20))
