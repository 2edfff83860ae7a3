"""
NexParcel Backend — Statistics Service
========================================

What:  Counters for the landing page and the bookings-per-day chart for the
       admin dashboard.
Who:   Called by GET /home-stats, /statistics and /stats.

Chart bucketing:
    Each booking's `booking_date` is reduced to a calendar day and rendered
    as M/D/YYYY (no zero padding, e.g. "1/2/2024"). Days appear in the order
    they are first met while scanning bookings in insertion order; the
    labels are NOT sorted.

    booking_date value                 → day used
    "2024-01-02"                       → 2024-01-02
    "2024-01-02T23:30:00"              → 2024-01-02 (naive: taken as is)
    "2024-01-02T23:30:00.000Z"         → converted to STATS_TIMEZONE first
    missing / unparseable              → "Invalid Date" bucket
"""

import logging
from collections import OrderedDict
from datetime import date, datetime, timezone, tzinfo
from typing import Iterable, Optional
from zoneinfo import ZoneInfo

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from nexparcel.config import settings
from nexparcel.exceptions import DatabaseError
from nexparcel.models.booking import STATUS_DELIVERED, Booking
from nexparcel.models.user import User
from nexparcel.schemas.statistics import BookingChart, HomeStats, StatsResponse

logger = logging.getLogger(__name__)

INVALID_DATE_LABEL = "Invalid Date"


def stats_zone(name: str) -> tzinfo:
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def booking_day(value: Optional[str], tz: Optional[tzinfo] = None) -> Optional[date]:
    """Calendar day of a booking_date string, or None if it does not parse."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is not None and tz is not None:
        parsed = parsed.astimezone(tz)
    return parsed.date()


def day_label(day: Optional[date]) -> str:
    """Short en-US date label: 1/2/2024."""
    if day is None:
        return INVALID_DATE_LABEL
    return f"{day.month}/{day.day}/{day.year}"


def bucket_by_day(booking_dates: Iterable[Optional[str]], tz: Optional[tzinfo] = None) -> BookingChart:
    """
    Count bookings per calendar day.

    Args:
        booking_dates: booking_date values in insertion order
        tz: zone for offset-aware timestamps (None keeps their own offset)

    Returns:
        BookingChart with labels in first-encountered order and matching counts
    """
    buckets: "OrderedDict[str, int]" = OrderedDict()
    for value in booking_dates:
        label = day_label(booking_day(value, tz))
        buckets[label] = buckets.get(label, 0) + 1
    return BookingChart(
        bar_chart_data=list(buckets.keys()),
        bar_chart_series_data=list(buckets.values()),
    )


class StatisticsService:
    """Read-only aggregates over bookings and users."""

    async def home_stats(self, db: AsyncSession) -> HomeStats:
        """Total bookings, delivered bookings, registered users."""
        try:
            booked = (await db.execute(select(func.count()).select_from(Booking))).scalar_one()
            delivered = (
                await db.execute(
                    select(func.count()).select_from(Booking).where(Booking.status == STATUS_DELIVERED)
                )
            ).scalar_one()
            users = (await db.execute(select(func.count()).select_from(User))).scalar_one()
        except SQLAlchemyError as e:
            logger.error("Database error computing home stats: %s", str(e))
            raise DatabaseError()

        return HomeStats(booked_parcel=booked, parcel_delivered=delivered, users=users)

    async def booking_chart(self, db: AsyncSession) -> BookingChart:
        """Bookings per calendar day of booking_date (see module docstring)."""
        try:
            result = await db.execute(
                select(Booking.booking_date).order_by(Booking.created_at, Booking.id)
            )
            booking_dates = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error building booking chart: %s", str(e))
            raise DatabaseError()

        return bucket_by_day(booking_dates, stats_zone(settings.stats_timezone))

    async def full_stats(self, db: AsyncSession) -> StatsResponse:
        return StatsResponse(
            summary=await self.home_stats(db),
            chart=await self.booking_chart(db),
        )


statistics_service = StatisticsService()
