"""
NexParcel Backend — Statistics Route Handlers
===============================================

What:  Landing-page counters and the admin dashboard chart.

Access (see nexparcel.auth.policy):
    GET /home-stats   public
    GET /statistics   Admin
    GET /stats        Admin
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from nexparcel.database import get_db_session
from nexparcel.routes import POLICY
from nexparcel.schemas.statistics import BookingChart, HomeStats, StatsResponse
from nexparcel.services.statistics_service import statistics_service

router = APIRouter(tags=["Statistics"], dependencies=POLICY)


@router.get("/home-stats", response_model=HomeStats, summary="Booked, delivered and user counts")
async def home_stats(db: AsyncSession = Depends(get_db_session)) -> HomeStats:
    return await statistics_service.home_stats(db)


@router.get("/statistics", response_model=BookingChart, summary="Bookings per day (bar chart)")
async def booking_chart(db: AsyncSession = Depends(get_db_session)) -> BookingChart:
    return await statistics_service.booking_chart(db)


@router.get("/stats", response_model=StatsResponse, summary="Counters and chart together")
async def full_stats(db: AsyncSession = Depends(get_db_session)) -> StatsResponse:
    return await statistics_service.full_stats(db)
