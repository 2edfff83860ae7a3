"""
NexParcel Backend — Shared Response Schemas
=============================================

What:  Write acknowledgements, error and health responses shared by all routes.

Write acknowledgements keep the shape the web client already consumes:
    insert  → {"acknowledged": true, "insertedId": "..."}
    update  → {"acknowledged": true, "matchedCount": 1, "modifiedCount": 1, "upsertedId": null}
    delete  → {"acknowledged": true, "deletedCount": 1}
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Acknowledgement(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = Field(default=True, description="Write was accepted by the store")


class InsertResult(_Acknowledgement):
    """Returned by POST /users, /bookings, /reviews."""
    inserted_id: str = Field(alias="insertedId", description="Generated document id")


class UpdateResult(_Acknowledgement):
    """
    Returned by PATCH /users/{email}, PUT /user/{email}, PUT|PATCH /bookings/{id}.

    Updates never insert, so upsertedId is always null. It is kept for
    clients that read it.
    """
    matched_count: int = Field(alias="matchedCount", description="Documents matched by the filter")
    modified_count: int = Field(alias="modifiedCount", description="Documents whose fields changed")
    upserted_id: Optional[str] = Field(default=None, alias="upsertedId")


class DeleteResult(_Acknowledgement):
    """Returned by DELETE /bookings/{id}."""
    deleted_count: int = Field(alias="deletedCount", description="Documents removed")


class MessageResponse(BaseModel):
    """Plain message object, e.g. the duplicate-signup notice."""
    message: str


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "forbidden",
            "message": "forbidden access",
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, degraded, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    payments: str = Field(description="Payment provider: configured, not_configured")
    uptime_seconds: float = Field(description="Seconds since service started")
