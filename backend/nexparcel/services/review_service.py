"""
NexParcel Backend — Review Service
====================================

What:  Stores customer reviews. Reviews are write-only from the API's
       point of view; nothing reads them back.
"""

import logging
from typing import Any, Mapping

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from nexparcel.exceptions import DatabaseError
from nexparcel.models.review import Review
from nexparcel.schemas.common import InsertResult

logger = logging.getLogger(__name__)


class ReviewService:

    async def create_review(self, db: AsyncSession, document: Mapping[str, Any]) -> InsertResult:
        review = Review.from_document(document)
        try:
            db.add(review)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error creating review: %s", str(e))
            raise DatabaseError()

        logger.info("Review %s stored", review.id)
        return InsertResult(inserted_id=review.id)


review_service = ReviewService()
