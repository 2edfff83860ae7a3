"""
NexParcel Backend — User Route Handlers
=========================================

What:  Signup, admin user management, delivery-men listing, and the
       delivered-parcel counter.

Access (see nexparcel.auth.policy):
    POST  /users            public (signup)
    GET   /users            Admin
    GET   /user/{email}     any signed-in user
    GET   /deliverymen      public
    PATCH /users/{email}    Admin (make Admin / Delivery Men)
    PUT   /user/{email}     Delivery Men (one more parcel delivered)
"""

import logging
from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from nexparcel.database import get_db_session
from nexparcel.routes import POLICY
from nexparcel.schemas.common import ErrorResponse, InsertResult, MessageResponse, UpdateResult
from nexparcel.schemas.user import UserCreate, UserListResponse
from nexparcel.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Users"], dependencies=POLICY)


@router.post(
    "/users",
    response_model=Union[InsertResult, MessageResponse],
    responses={409: {"description": "Concurrent duplicate signup", "model": ErrorResponse}},
    summary="Register a user (no-op for a known email)",
)
async def create_user(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db_session),
) -> Union[InsertResult, MessageResponse]:
    return await user_service.create_user(db, payload.model_dump())


@router.get(
    "/users",
    response_model=UserListResponse,
    summary="List users, optionally one page at a time",
)
async def list_users(
    page: Optional[int] = Query(default=None, ge=1, description="1-indexed page number"),
    size: Optional[int] = Query(default=None, ge=1, le=1000, description="Users per page"),
    db: AsyncSession = Depends(get_db_session),
) -> UserListResponse:
    """`count` is the total number of users regardless of paging."""
    return await user_service.list_users(db, page=page, size=size)


@router.get(
    "/user/{email}",
    responses={404: {"model": ErrorResponse}},
    summary="Get a user by email",
)
async def get_user(email: str, db: AsyncSession = Depends(get_db_session)) -> Dict[str, Any]:
    return await user_service.get_user(db, email)


@router.get("/deliverymen", summary="List all delivery men")
async def list_delivery_men(db: AsyncSession = Depends(get_db_session)) -> List[Dict[str, Any]]:
    return await user_service.list_delivery_men(db)


@router.patch(
    "/users/{email}",
    response_model=UpdateResult,
    responses={404: {"model": ErrorResponse}},
    summary="Update a user's fields (e.g. role)",
)
async def update_user(
    email: str,
    fields: Dict[str, Any] = Body(..., examples=[{"role": "Delivery Men"}]),
    db: AsyncSession = Depends(get_db_session),
) -> UpdateResult:
    return await user_service.update_user(db, email, fields)


@router.put(
    "/user/{email}",
    response_model=UpdateResult,
    responses={404: {"model": ErrorResponse}},
    summary="Count one more delivered parcel",
)
async def increment_delivery_count(
    email: str,
    db: AsyncSession = Depends(get_db_session),
) -> UpdateResult:
    return await user_service.increment_delivery_count(db, email)
