"""
NexParcel Backend — Document Table Mixin
==========================================

What:  Shared columns and behavior for tables that store free-form documents.
How:   The caller's document lives in a JSON `data` column. Keys the API
       filters on are "promoted" to real, indexed columns so queries stay
       plain SQL. `to_document()` reassembles the original shape.
Who:   Mixed into User, Booking, and Review.

Document shape:
    {"_id": "<32 hex chars>", ...promoted columns..., ...data keys...}

    Promoted keys are never duplicated inside `data`; a document written
    with {"email": "a@b.c", "name": "Ann"} on a table promoting "email"
    stores email in its column and {"name": "Ann"} as data.

    A promoted key written as an explicit null is remembered in `data` as
    null, so it reads back as `"status": null`. A promoted key that was
    never written is absent from the document.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, Mapping, Tuple

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column


def new_object_id() -> str:
    """Generate an opaque document identifier (UUID4 as 32 hex chars)."""
    return uuid.uuid4().hex


def parse_object_id(value: str) -> str:
    """
    Normalize a client-supplied identifier.

    Accepts hex with or without hyphens. Raises ValueError when the value
    is not a UUID; callers translate that into a 400 response.
    """
    return uuid.UUID(str(value)).hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentMixin:
    """
    Columns every document table carries.

    Attributes:
        id:          Opaque generated identifier, exposed as `_id`
        data:        Non-promoted document fields (JSON)
        created_at:  Insertion time; defines natural (insertion) order
    """

    # Keys stored in dedicated columns instead of `data`
    __promoted__: ClassVar[Tuple[str, ...]] = ()

    id: Mapped[str] = mapped_column(
        String(32),
        primary_key=True,
        default=new_object_id,
        comment="Opaque document identifier (UUID4 hex)",
    )

    data: Mapped[Dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        comment="Caller-supplied document fields not promoted to columns",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        index=True,
        comment="Insertion timestamp (UTC)",
    )

    @classmethod
    def from_document(cls, document: Mapping[str, Any]):
        """Build a new row from a caller-supplied document. `_id` is ignored."""
        row = cls(id=new_object_id(), data={}, created_at=utcnow())
        row.merge(document)
        return row

    def coerce(self, key: str, value: Any) -> Any:
        """Convert a promoted value to its column type. Identity by default."""
        return value

    def merge(self, fields: Mapping[str, Any]) -> bool:
        """
        Set every provided field, leaving the others untouched.

        Returns True if at least one stored value changed.
        """
        changed = False
        stored = dict(self.data or {})
        extra = dict(stored)
        for key, value in fields.items():
            if key == "_id":
                continue
            if key in self.__promoted__:
                value = self.coerce(key, value)
                if getattr(self, key) != value:
                    setattr(self, key, value)
                    changed = True
                if value is None and key not in extra:
                    extra[key] = None
                    changed = True
                elif value is not None:
                    extra.pop(key, None)
            elif key not in extra or extra[key] != value:
                extra[key] = value
                changed = True
        if extra != stored:
            # Reassign so the JSON column is flagged dirty
            self.data = extra
        return changed

    def to_document(self) -> Dict[str, Any]:
        """Reassemble the stored document as `{"_id": ..., **fields}`."""
        document: Dict[str, Any] = {"_id": self.id}
        document.update(self.data or {})
        for key in self.__promoted__:
            value = getattr(self, key)
            if value is not None:
                document[key] = value
        return document
