"""
NexParcel Backend — Authorization Policy
==========================================

What:  Which caller may reach which route, declared in one table.
How:   Keys are (HTTP method, route path template) exactly as registered
       with FastAPI; values are the access level required. Routes missing
       from the table are public.

Access levels:
    AUTHENTICATED  : any valid token
    ADMIN          : valid token whose user has role "Admin"
    DELIVERY_MEN   : valid token whose user has role "Delivery Men"

Public routes (not listed): GET /, GET /health, POST /jwt, POST /users,
GET /deliverymen, GET /home-stats.
"""

from enum import Enum
from typing import Dict, Optional, Tuple

from nexparcel.models.user import ROLE_ADMIN, ROLE_DELIVERY_MEN


class Access(str, Enum):
    AUTHENTICATED = "authenticated"
    ADMIN = ROLE_ADMIN
    DELIVERY_MEN = ROLE_DELIVERY_MEN

    @property
    def required_role(self) -> Optional[str]:
        """Role the caller's user document must carry, if any."""
        if self is Access.AUTHENTICATED:
            return None
        return self.value


ROUTE_POLICY: Dict[Tuple[str, str], Access] = {
    # Users
    ("GET", "/users"): Access.ADMIN,
    ("GET", "/user/{email}"): Access.AUTHENTICATED,
    ("PATCH", "/users/{email}"): Access.ADMIN,
    ("PUT", "/user/{email}"): Access.DELIVERY_MEN,
    # Bookings
    ("POST", "/bookings"): Access.AUTHENTICATED,
    ("GET", "/bookings/{email}"): Access.AUTHENTICATED,
    ("GET", "/bookings"): Access.ADMIN,
    ("GET", "/booking/{booking_id}"): Access.AUTHENTICATED,
    ("PUT", "/bookings/{booking_id}"): Access.AUTHENTICATED,
    ("PATCH", "/bookings/{booking_id}"): Access.AUTHENTICATED,
    ("DELETE", "/bookings/{booking_id}"): Access.AUTHENTICATED,
    ("GET", "/delivery-lists/{deliverymen_id}"): Access.DELIVERY_MEN,
    # Reviews
    ("POST", "/reviews"): Access.AUTHENTICATED,
    # Statistics
    ("GET", "/statistics"): Access.ADMIN,
    ("GET", "/stats"): Access.ADMIN,
    # Payments
    ("POST", "/create-payment-intent"): Access.AUTHENTICATED,
}


def required_access(method: str, path: str) -> Optional[Access]:
    """Access level for a route, or None if the route is public."""
    # HEAD is served by the GET handler
    if method.upper() == "HEAD":
        method = "GET"
    return ROUTE_POLICY.get((method.upper(), path))
