"""
NexParcel Backend — Statistics Schemas
========================================

What:  Shapes returned by /home-stats, /statistics and /stats.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class HomeStats(BaseModel):
    """Public counters shown on the landing page."""
    model_config = ConfigDict(populate_by_name=True)

    booked_parcel: int = Field(alias="bookedParcel", description="Total bookings")
    parcel_delivered: int = Field(alias="parcelDelivered", description="Bookings with status 'delivered'")
    users: int = Field(description="Registered users")


class BookingChart(BaseModel):
    """
    Bookings per calendar day, as two parallel arrays for the bar chart.

    barChartData[i] is a date label (M/D/YYYY), barChartSeriesData[i] the
    number of bookings placed that day. Order is first-encountered, not sorted.
    """
    model_config = ConfigDict(populate_by_name=True)

    bar_chart_data: List[str] = Field(alias="barChartData")
    bar_chart_series_data: List[int] = Field(alias="barChartSeriesData")


class StatsResponse(BaseModel):
    """Body of GET /stats: summary and chart together."""
    summary: HomeStats
    chart: BookingChart
