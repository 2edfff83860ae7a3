# Models package init
"""
NexParcel Backend — ORM Models
================================

What:  Tables backing the three document collections.
How:   Importing this package registers every table on `Base.metadata`
       (used by Alembic and `Database.create_all()`).

Model Inventory:
    - User:     users collection (email is the natural key)
    - Booking:  bookings collection (opaque hex id)
    - Review:   reviews collection (free-form, insert only)
"""

from nexparcel.models.booking import Booking
from nexparcel.models.review import Review
from nexparcel.models.user import User

__all__ = ["Booking", "Review", "User"]
