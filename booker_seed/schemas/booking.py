from __future__ import annotations

from datetime import date, datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    username: str = "admin"
    password: str = "password123"


class BookingDates(BaseModel):
    model_config = ConfigDict(frozen=True)

    checkin: date
    checkout: date


class BookingTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    firstname: str
    lastname: str
    totalprice: int
    depositpaid: bool
    bookingdates: BookingDates
    additionalneeds: str = ""

    @property
    def guest_name(self) -> str:
        return f"{self.firstname} {self.lastname}".strip()


class CreatedBooking(BaseModel):
    bookingid: int
    booking: BookingTemplate


class SeedResult(BaseModel):
    bookings: list[CreatedBooking] = []
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def booking_ids(self) -> list[int]:
        return [b.bookingid for b in self.bookings]

    def to_artifact(self) -> dict:
        """Shape written to disk: ``{"bookingIds": [...], "timestamp": "..."}``."""
        return {
            "bookingIds": self.booking_ids,
            "timestamp": _iso_utc(self.timestamp),
        }


class SeededIds(BaseModel):
    """Artifact contents as read back by downstream test processes."""

    model_config = ConfigDict(populate_by_name=True)

    booking_ids: list[int] = Field(alias="bookingIds")
    timestamp: datetime


def _iso_utc(ts: datetime) -> str:
    # 2025-01-15T10:00:00.000Z
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    ts = ts.astimezone(timezone.utc)
    return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")
