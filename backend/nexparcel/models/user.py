"""
NexParcel Backend — User Model
================================

What:  ORM model for the `users` table (account documents).
How:   Document table with `email`, `role` and `no_of_delivered_parcel`
       promoted to columns; everything else the client sends (name, photo,
       phone, ...) lives in `data`.

Roles:
    "Admin"         : manages users, sees every booking and the statistics
    "Delivery Men"  : sees assigned deliveries, bumps the delivered counter
    None            : regular customer (the client never sets a role)

Query Patterns:
    - Lookup by email (auth gate, profile):    unique index on email
    - List delivery men:                       index on role
"""

from typing import Any, Mapping

from sqlalchemy import Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from nexparcel.database import Base
from nexparcel.exceptions import ValidationError
from nexparcel.models.document import DocumentMixin

ROLE_ADMIN = "Admin"
ROLE_DELIVERY_MEN = "Delivery Men"


class User(DocumentMixin, Base):
    """A registered account. Never deleted."""

    __tablename__ = "users"
    __promoted__ = ("email", "role", "no_of_delivered_parcel")

    # Unique: the store itself rejects a second account for the same email
    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        unique=True,
        index=True,
        comment="Natural key for identity and role lookups",
    )

    role: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
        index=True,
        comment="Admin | Delivery Men | NULL (customer)",
    )

    no_of_delivered_parcel: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
        comment="Parcels delivered by this user (Delivery Men only)",
    )

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "User":
        user = super().from_document(document)
        if user.no_of_delivered_parcel is None:
            user.no_of_delivered_parcel = 0
        return user

    def coerce(self, key: str, value: Any) -> Any:
        if key == "no_of_delivered_parcel":
            try:
                return int(value or 0)
            except (TypeError, ValueError):
                raise ValidationError(
                    message="no_of_delivered_parcel must be a whole number",
                    field=key,
                    context={"value": repr(value)},
                )
        if key == "email" and (value is None or not str(value).strip()):
            # Email is the natural key; it can change but never be cleared
            raise ValidationError(message="email must not be empty", field=key)
        if value is None:
            return None
        return str(value)

    def __repr__(self) -> str:
        return f"<User(email={self.email!r}, role={self.role!r})>"
