"""
NexParcel Backend — Booking Service
=====================================

What:  Booking documents: create, point lookup, merge update, delete, and
       the three list views (requester, admin, delivery man).
Who:   Called by the booking routes; read by StatisticsService.

Identifier handling:
    Ids are 32-char hex UUIDs. A malformed id raises ValidationError (400)
    before any query runs; a well-formed unknown id raises NotFoundError (404)
    for lookups and updates, and yields deletedCount=0 for deletes.

Update policy:
    Strict match. PUT and PATCH both merge the provided fields into an
    existing booking and never create one for an unknown id.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from nexparcel.exceptions import DatabaseError, NotFoundError, ValidationError
from nexparcel.models.booking import Booking
from nexparcel.models.document import parse_object_id
from nexparcel.schemas.common import DeleteResult, InsertResult, UpdateResult

logger = logging.getLogger(__name__)


def _booking_id(value: str) -> str:
    try:
        return parse_object_id(value)
    except ValueError:
        raise ValidationError(message="Invalid id format", field="id", context={"id": value})


class BookingService:
    """Business logic for parcel bookings."""

    async def create_booking(self, db: AsyncSession, document: Mapping[str, Any]) -> InsertResult:
        """Insert the booking as posted. No schema is enforced."""
        booking = Booking.from_document(document)
        try:
            db.add(booking)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error creating booking: %s", str(e))
            raise DatabaseError(context={"email": document.get("email")})

        logger.info("Booking %s created for %s", booking.id, booking.email)
        return InsertResult(inserted_id=booking.id)

    async def list_for_requester(
        self, db: AsyncSession, email: str, status: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Bookings placed by `email`, optionally only those with `status`."""
        query = select(Booking).where(Booking.email == email)
        if status:
            query = query.where(Booking.status == status)
        return await self._fetch(db, query)

    async def list_all(
        self,
        db: AsyncSession,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Every booking, optionally restricted to an inclusive range of
        requested delivery dates.

        The comparison is on the stored strings, so both bounds and the
        stored values must share a sortable format (YYYY-MM-DD).
        """
        query = select(Booking)
        if from_date:
            query = query.where(Booking.requested_delivery_date >= from_date)
        if to_date:
            query = query.where(Booking.requested_delivery_date <= to_date)
        return await self._fetch(db, query)

    async def list_for_delivery_man(self, db: AsyncSession, deliverymen_id: str) -> List[Dict[str, Any]]:
        """Bookings assigned to the delivery man with this user id."""
        return await self._fetch(db, select(Booking).where(Booking.deliverymen_id == deliverymen_id))

    async def get_booking(self, db: AsyncSession, booking_id: str) -> Dict[str, Any]:
        """
        Raises:
            ValidationError: malformed id
            NotFoundError: no booking with this id
        """
        return (await self._load(db, booking_id)).to_document()

    async def update_booking(
        self, db: AsyncSession, booking_id: str, fields: Mapping[str, Any]
    ) -> UpdateResult:
        """
        Merge `fields` into an existing booking (status changes, delivery
        man assignment, edits by the requester).

        Raises:
            ValidationError: malformed id
            NotFoundError: no booking with this id
        """
        booking = await self._load(db, booking_id)
        modified = booking.merge(fields)
        try:
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error updating booking %s: %s", booking_id, str(e))
            raise DatabaseError(context={"booking_id": booking_id})

        if "status" in fields:
            logger.info("Booking %s status -> %r", booking.id, booking.status)
        return UpdateResult(matched_count=1, modified_count=int(modified))

    async def delete_booking(self, db: AsyncSession, booking_id: str) -> DeleteResult:
        """Remove a booking. An unknown id deletes nothing."""
        key = _booking_id(booking_id)
        try:
            result = await db.execute(delete(Booking).where(Booking.id == key))
        except SQLAlchemyError as e:
            logger.error("Database error deleting booking %s: %s", booking_id, str(e))
            raise DatabaseError(context={"booking_id": booking_id})

        if result.rowcount:
            logger.info("Booking %s deleted", key)
        return DeleteResult(deleted_count=result.rowcount)

    async def _load(self, db: AsyncSession, booking_id: str) -> Booking:
        key = _booking_id(booking_id)
        try:
            result = await db.execute(select(Booking).where(Booking.id == key))
            booking = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching booking %s: %s", booking_id, str(e))
            raise DatabaseError(context={"booking_id": booking_id})
        if booking is None:
            raise NotFoundError(resource="booking", resource_id=booking_id)
        return booking

    async def _fetch(self, db: AsyncSession, query) -> List[Dict[str, Any]]:
        # Insertion order, like a collection scan
        query = query.order_by(Booking.created_at, Booking.id)
        try:
            result = await db.execute(query)
        except SQLAlchemyError as e:
            logger.error("Database error listing bookings: %s", str(e))
            raise DatabaseError()
        return [booking.to_document() for booking in result.scalars().all()]


# Singleton instance
booking_service = BookingService()
