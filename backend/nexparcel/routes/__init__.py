# Routes package init
"""
NexParcel Backend — API Routes Package
========================================

What:  HTTP route handlers. Handlers are thin: extract request data, call a
       service, return its result.

Route Inventory:
    - health.py:      GET  /                        (banner)
                      GET  /health                  (service health check)
    - auth.py:        POST /jwt                     (issue access token)
    - users.py:       POST /users, GET /users, GET /user/{email},
                      GET /deliverymen, PATCH /users/{email}, PUT /user/{email}
    - bookings.py:    POST /bookings, GET /bookings/{email}, GET /bookings,
                      GET /booking/{id}, PUT|PATCH|DELETE /bookings/{id},
                      GET /delivery-lists/{id}
    - reviews.py:     POST /reviews
    - statistics.py:  GET /home-stats, GET /statistics, GET /stats
    - payments.py:    POST /create-payment-intent

Access control:
    Domain routers declare `dependencies=POLICY` so nexparcel.auth.gate
    enforces nexparcel.auth.policy.ROUTE_POLICY. Handlers never check
    roles themselves.
"""

from fastapi import Depends

from nexparcel.auth.gate import enforce_policy

POLICY = [Depends(enforce_policy)]
