"""
NexParcel Backend — Booking Route Handlers
============================================

What:  Parcel bookings for requesters, admins, and delivery men.

Access (see nexparcel.auth.policy):
    POST   /bookings                  signed-in user
    GET    /bookings/{email}          signed-in user (?filter=<status>)
    GET    /bookings                  Admin (?fromDate=&toDate=)
    GET    /booking/{id}              signed-in user
    PUT    /bookings/{id}             signed-in user
    PATCH  /bookings/{id}             signed-in user
    DELETE /bookings/{id}             signed-in user
    GET    /delivery-lists/{id}       Delivery Men
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from nexparcel.database import get_db_session
from nexparcel.routes import POLICY
from nexparcel.schemas.booking import BookingDocument
from nexparcel.schemas.common import DeleteResult, ErrorResponse, InsertResult, UpdateResult
from nexparcel.services.booking_service import booking_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Bookings"], dependencies=POLICY)

_ID_ERRORS = {
    400: {"description": "Malformed booking id", "model": ErrorResponse},
    404: {"description": "Booking not found", "model": ErrorResponse},
}


@router.post("/bookings", response_model=InsertResult, summary="Book a parcel")
async def create_booking(
    payload: BookingDocument,
    db: AsyncSession = Depends(get_db_session),
) -> InsertResult:
    return await booking_service.create_booking(db, payload.model_dump(exclude_unset=True))


@router.get("/bookings/{email}", summary="Bookings placed by a user")
async def list_my_bookings(
    email: str,
    status: Optional[str] = Query(default=None, alias="filter", description="Only this status"),
    db: AsyncSession = Depends(get_db_session),
) -> List[Dict[str, Any]]:
    return await booking_service.list_for_requester(db, email, status=status)


@router.get("/bookings", summary="All bookings (admin)")
async def list_bookings(
    from_date: Optional[str] = Query(default=None, alias="fromDate", description="Inclusive, YYYY-MM-DD"),
    to_date: Optional[str] = Query(default=None, alias="toDate", description="Inclusive, YYYY-MM-DD"),
    db: AsyncSession = Depends(get_db_session),
) -> List[Dict[str, Any]]:
    """Range filter applies to requested_delivery_date."""
    return await booking_service.list_all(db, from_date=from_date, to_date=to_date)


@router.get("/booking/{booking_id}", responses=_ID_ERRORS, summary="Get one booking")
async def get_booking(booking_id: str, db: AsyncSession = Depends(get_db_session)) -> Dict[str, Any]:
    return await booking_service.get_booking(db, booking_id)


@router.put(
    "/bookings/{booking_id}",
    response_model=UpdateResult,
    responses=_ID_ERRORS,
    summary="Update a booking",
)
@router.patch(
    "/bookings/{booking_id}",
    response_model=UpdateResult,
    responses=_ID_ERRORS,
    summary="Update a booking",
)
async def update_booking(
    booking_id: str,
    payload: BookingDocument,
    db: AsyncSession = Depends(get_db_session),
) -> UpdateResult:
    """Both verbs merge the provided fields; unknown ids are not created."""
    return await booking_service.update_booking(db, booking_id, payload.model_dump(exclude_unset=True))


@router.delete(
    "/bookings/{booking_id}",
    response_model=DeleteResult,
    responses={400: _ID_ERRORS[400]},
    summary="Delete a booking",
)
async def delete_booking(booking_id: str, db: AsyncSession = Depends(get_db_session)) -> DeleteResult:
    return await booking_service.delete_booking(db, booking_id)


@router.get("/delivery-lists/{deliverymen_id}", summary="Bookings assigned to a delivery man")
async def list_deliveries(
    deliverymen_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> List[Dict[str, Any]]:
    return await booking_service.list_for_delivery_man(db, deliverymen_id)
