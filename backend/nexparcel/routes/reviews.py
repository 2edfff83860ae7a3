"""
NexParcel Backend — Review Route
==================================

What:  POST /reviews. A signed-in customer rates a delivery.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from nexparcel.database import get_db_session
from nexparcel.routes import POLICY
from nexparcel.schemas.common import InsertResult
from nexparcel.schemas.review import ReviewDocument
from nexparcel.services.review_service import review_service

router = APIRouter(tags=["Reviews"], dependencies=POLICY)


@router.post("/reviews", response_model=InsertResult, summary="Post a review")
async def create_review(
    payload: ReviewDocument,
    db: AsyncSession = Depends(get_db_session),
) -> InsertResult:
    return await review_service.create_review(db, payload.model_dump())
