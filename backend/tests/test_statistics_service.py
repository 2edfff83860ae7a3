"""
NexParcel Backend — Statistics Tests
======================================

What we test:
    ✅ booking_date parsing: date only, naive and offset-aware timestamps
    ✅ M/D/YYYY labels without zero padding
    ✅ Buckets keep first-encountered order and count same-day bookings together
    ✅ Unparseable or missing dates land in the "Invalid Date" bucket
    ✅ Home counters (booked, delivered, users)
"""

from datetime import date, timedelta, timezone

import pytest

from nexparcel.services.booking_service import BookingService
from nexparcel.services.statistics_service import (
    INVALID_DATE_LABEL,
    StatisticsService,
    booking_day,
    bucket_by_day,
    day_label,
    stats_zone,
)
from nexparcel.services.user_service import UserService


class TestBookingDay:

    def test_date_only(self):
        assert booking_day("2024-01-02") == date(2024, 1, 2)

    def test_naive_timestamp_keeps_its_day(self):
        assert booking_day("2024-01-02T23:30:00", timezone.utc) == date(2024, 1, 2)

    def test_utc_suffix(self):
        assert booking_day("2024-01-02T23:30:00.000Z", timezone.utc) == date(2024, 1, 2)

    def test_offset_is_converted_to_stats_zone(self):
        dhaka = timezone(timedelta(hours=6))
        assert booking_day("2024-01-02T20:00:00Z", dhaka) == date(2024, 1, 3)

    def test_garbage(self):
        assert booking_day("next tuesday") is None
        assert booking_day("") is None
        assert booking_day(None) is None

    def test_utc_zone_needs_no_tz_database(self):
        assert stats_zone("UTC") is timezone.utc
        assert stats_zone("utc") is timezone.utc


class TestDayLabel:

    def test_no_zero_padding(self):
        assert day_label(date(2024, 1, 2)) == "1/2/2024"
        assert day_label(date(2024, 12, 25)) == "12/25/2024"

    def test_missing_day(self):
        assert day_label(None) == INVALID_DATE_LABEL


class TestBucketByDay:

    def test_same_day_bookings_share_a_bucket(self):
        chart = bucket_by_day(
            ["2024-03-01T09:00:00", "2024-03-01T18:45:00", "2024-03-02"],
            timezone.utc,
        )

        assert chart.bar_chart_data == ["3/1/2024", "3/2/2024"]
        assert chart.bar_chart_series_data == [2, 1]

    def test_labels_in_first_encountered_order(self):
        chart = bucket_by_day(["2024-03-05", "2024-03-01", "2024-03-05"], timezone.utc)

        assert chart.bar_chart_data == ["3/5/2024", "3/1/2024"]
        assert chart.bar_chart_series_data == [2, 1]

    def test_invalid_dates_are_counted(self):
        chart = bucket_by_day(["oops", None, "2024-03-01"], timezone.utc)

        assert chart.bar_chart_data == [INVALID_DATE_LABEL, "3/1/2024"]
        assert chart.bar_chart_series_data == [2, 1]

    def test_empty(self):
        chart = bucket_by_day([])

        assert chart.bar_chart_data == []
        assert chart.bar_chart_series_data == []

    def test_serialized_with_client_keys(self):
        chart = bucket_by_day(["2024-03-01"])

        assert chart.model_dump(by_alias=True) == {
            "barChartData": ["3/1/2024"],
            "barChartSeriesData": [1],
        }


class TestStatisticsService:

    def setup_method(self):
        self.service = StatisticsService()

    @pytest.mark.asyncio
    async def test_home_stats(self, db_session):
        bookings = BookingService()
        users = UserService()
        await users.create_user(db_session, {"email": "a@mail.com"})
        await users.create_user(db_session, {"email": "b@mail.com"})
        await bookings.create_booking(db_session, {"email": "a@mail.com", "status": "pending"})
        await bookings.create_booking(db_session, {"email": "a@mail.com", "status": "delivered"})
        await bookings.create_booking(db_session, {"email": "b@mail.com", "status": "delivered"})

        stats = await self.service.home_stats(db_session)

        assert stats.booked_parcel == 3
        assert stats.parcel_delivered == 2
        assert stats.users == 2

    @pytest.mark.asyncio
    async def test_chart_reads_bookings_in_insertion_order(self, db_session):
        bookings = BookingService()
        for value in ("2024-03-02T08:00:00", "2024-03-01T08:00:00", "2024-03-02T20:00:00"):
            await bookings.create_booking(db_session, {"booking_date": value})

        chart = await self.service.booking_chart(db_session)

        assert chart.bar_chart_data == ["3/2/2024", "3/1/2024"]
        assert chart.bar_chart_series_data == [2, 1]

    @pytest.mark.asyncio
    async def test_full_stats(self, db_session):
        await BookingService().create_booking(db_session, {"booking_date": "2024-03-01", "status": "delivered"})

        stats = await self.service.full_stats(db_session)

        assert stats.summary.parcel_delivered == 1
        assert stats.chart.bar_chart_series_data == [1]
