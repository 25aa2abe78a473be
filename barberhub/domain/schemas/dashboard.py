"""Pydantic schemas for the dashboard and period reports."""

from pydantic import BaseModel


class BarberClients(BaseModel):
    name: str
    clients: int


class ServiceShare(BaseModel):
    name: str
    percentage: int


class DashboardData(BaseModel):
    today_appointments: int
    today_clients_served: int
    today_revenue: float
    today_products_sold: int
    # All-time figures, not limited to today
    barber_performance: list[BarberClients]
    top_services: list[ServiceShare]


class BarberReportRow(BaseModel):
    name: str
    appointments: int
    completed: int
    revenue: float


class ServiceCount(BaseModel):
    name: str
    count: int


class ProductQuantity(BaseModel):
    name: str
    quantity: int


class DailyRevenue(BaseModel):
    date: str
    amount: float


class ReportData(BaseModel):
    start_date: str
    end_date: str
    total_revenue: float
    total_appointments: int
    completed_appointments: int
    product_sales: int
    barber_performance: list[BarberReportRow]
    service_popularity: list[ServiceCount]
    top_products: list[ProductQuantity]
    daily_revenue: list[DailyRevenue]
