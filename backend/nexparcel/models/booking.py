"""
NexParcel Backend — Booking Model
===================================

What:  ORM model for the `bookings` table (parcel-delivery requests).
How:   Document table; the fields the API filters on are promoted to
       indexed string columns, the rest of the booking (parcel type,
       weight, receiver, address, price, coordinates ...) lives in `data`.

Lifecycle:
    1. Created by the requester (status usually "pending")
    2. Admin assigns a delivery man (deliverymen_id, status "on the way")
    3. Delivery man marks it "delivered" (or requester "cancelled")
    4. May be deleted by id at any point

Query Patterns:
    - Requester's bookings:  WHERE email = :email [AND status = :status]
    - Admin range filter:    WHERE requested_delivery_date BETWEEN :from AND :to
                             (string comparison; dates are YYYY-MM-DD)
    - Delivery list:         WHERE deliverymen_id = :id
    - Home stats:            WHERE status = 'delivered'
"""

from typing import Any

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from nexparcel.database import Base
from nexparcel.models.document import DocumentMixin

STATUS_DELIVERED = "delivered"


class Booking(DocumentMixin, Base):
    """A parcel-delivery request."""

    __tablename__ = "bookings"
    __promoted__ = (
        "email",
        "status",
        "booking_date",
        "requested_delivery_date",
        "deliverymen_id",
    )

    email: Mapped[str | None] = mapped_column(
        String(320), nullable=True, index=True, comment="Requester email"
    )
    status: Mapped[str | None] = mapped_column(
        String(50), nullable=True, index=True, comment="Free text, e.g. pending, delivered"
    )
    booking_date: Mapped[str | None] = mapped_column(
        String(64), nullable=True, comment="When the booking was placed (ISO 8601 string)"
    )
    requested_delivery_date: Mapped[str | None] = mapped_column(
        String(64), nullable=True, index=True, comment="Requested delivery date (sortable string)"
    )
    deliverymen_id: Mapped[str | None] = mapped_column(
        String(64), nullable=True, index=True, comment="Assigned delivery man's user id"
    )

    def coerce(self, key: str, value: Any) -> Any:
        # Promoted booking fields are all compared as strings
        if value is None:
            return None
        return str(value)

    def __repr__(self) -> str:
        return f"<Booking(id={self.id!r}, email={self.email!r}, status={self.status!r})>"
