"""
NexParcel Backend — Application Package Initializer
====================================================

What: Marks the `nexparcel` directory as a Python package.
Who:  Used by uvicorn (`nexparcel.main:app`), Alembic, and pytest.

Architecture Note:
    The backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │     Routes + Authorization Policy   │  ← HTTP concerns, access control
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Users, bookings, stats, payments
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Document tables + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Injected async SQLAlchemy handle
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
