"""Shared field types for the barbershop schemas."""

from datetime import date
from typing import Annotated, Literal

from pydantic import AfterValidator, Field


def check_calendar_date(value: str) -> str:
    """Reject strings shaped like a date that name no real day (2024-06-31)."""
    date.fromisoformat(value)
    return value


def reject_null(value):
    """Patch fields that are required on the record may be omitted, not nulled."""
    if value is None:
        raise ValueError("Field cannot be null")
    return value


# Dates and times travel as text; "YYYY-MM-DD" compares correctly as a string.
DateStr = Annotated[
    str,
    Field(pattern=r"^\d{4}-\d{2}-\d{2}$", examples=["2024-05-20"]),
    AfterValidator(check_calendar_date),
]
TimeStr = Annotated[str, Field(pattern=r"^([01]\d|2[0-3]):[0-5]\d$", examples=["14:30"])]

ActiveStatus = Literal["active", "inactive"]
AppointmentStatus = Literal["scheduled", "confirmed", "waiting", "completed", "cancelled"]
PaymentMethod = Literal["credit", "debit", "cash", "pix"]
