# Schemas package init
"""
NexParcel Backend — Pydantic Request/Response Schemas
=======================================================

What:  The API contract between the NexParcel web client and the backend.
How:   FastAPI validates request bodies against these models and serializes
       responses through them (camelCase aliases where the client expects them).

Schema Inventory:
    - common.py:      write acknowledgements, errors, health
    - auth.py:        POST /jwt
    - user.py:        user documents and the paginated list
    - booking.py:     booking documents
    - review.py:      review documents
    - statistics.py:  home summary and booking chart
    - payment.py:     payment-intent request/response
"""
