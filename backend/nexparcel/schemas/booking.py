"""
NexParcel Backend — Booking Schemas
=====================================

What:  Booking documents. The store applies no schema beyond "a JSON
       object"; the fields below are the ones the API itself reads.

Typical booking posted by the web client:
    {
        "name": "Ann", "email": "ann@mail.com", "phone": "...",
        "parcel_type": "Documents", "parcel_weight": 2,
        "receiver_name": "...", "receiver_phone": "...",
        "delivery_address": "...", "latitude": 23.8, "longitude": 90.4,
        "price": 100, "status": "pending",
        "booking_date": "2024-01-02T10:15:00.000Z",
        "requested_delivery_date": "2024-01-05"
    }
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class BookingDocument(BaseModel):
    """
    Body of POST /bookings and PUT|PATCH /bookings/{id}.

    Values are not type-checked. The fields below are stored as strings
    (a numeric deliverymen_id 7 is kept and matched as "7").
    """
    model_config = ConfigDict(extra="allow")

    email: Any = None
    status: Any = None
    booking_date: Any = None
    requested_delivery_date: Any = None
    deliverymen_id: Any = None
