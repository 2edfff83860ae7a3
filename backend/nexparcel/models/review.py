"""
NexParcel Backend — Review Model
==================================

What:  ORM model for the `reviews` table. Free-form documents written by
       customers after a delivery; inserted only, never read back by the API.
"""

from nexparcel.database import Base
from nexparcel.models.document import DocumentMixin


class Review(DocumentMixin, Base):
    __tablename__ = "reviews"
