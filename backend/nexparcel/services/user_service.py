"""
NexParcel Backend — User Service
==================================

What:  Account documents keyed by email: signup, listing, role assignment,
       and the delivered-parcel counter.
Who:   Called by the user routes and by the authorization gate (role lookups).

Write semantics:
    - Signup is idempotent per email: a known email returns a message object
      and inserts nothing. The unique index on email backs this up when two
      signups race past the check; the loser gets ConflictError (409).
    - Updates match strictly. An unknown email raises NotFoundError; no
      partial user is ever created by an update.
    - The counter increment is a single UPDATE ... SET n = n + 1.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from nexparcel.exceptions import ConflictError, DatabaseError, NotFoundError
from nexparcel.models.user import ROLE_DELIVERY_MEN, User
from nexparcel.schemas.common import InsertResult, MessageResponse, UpdateResult
from nexparcel.schemas.user import UserListResponse

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "This email already in used."


class UserService:
    """
    Business logic for user accounts.

    Error Handling Strategy:
        Unexpected SQLAlchemy errors are wrapped in DatabaseError (generic
        500 for the client, details in the log). Domain errors
        (NotFoundError, ConflictError) propagate as-is.
    """

    async def find_by_email(self, db: AsyncSession, email: Optional[str]) -> Optional[User]:
        """Return the User row for `email`, or None."""
        if not email:
            return None
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def create_user(
        self, db: AsyncSession, document: Mapping[str, Any]
    ) -> Union[InsertResult, MessageResponse]:
        """
        Register a user unless the email is already taken.

        Returns:
            InsertResult for a new account, MessageResponse for a known email

        Raises:
            ConflictError: a concurrent signup inserted the same email first
        """
        email = document.get("email")
        try:
            if await self.find_by_email(db, email) is not None:
                logger.info("Signup skipped, email already registered: %s", email)
                return MessageResponse(message=DUPLICATE_EMAIL_MESSAGE)

            user = User.from_document(document)
            db.add(user)
            await db.flush()
        except IntegrityError:
            logger.warning("Concurrent signup rejected by unique index: %s", email)
            raise ConflictError(message=DUPLICATE_EMAIL_MESSAGE, context={"email": email})
        except SQLAlchemyError as e:
            logger.error("Database error creating user %s: %s", email, str(e))
            raise DatabaseError(context={"email": email})

        logger.info("User created: %s (id=%s)", email, user.id)
        return InsertResult(inserted_id=user.id)

    async def list_users(
        self,
        db: AsyncSession,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> UserListResponse:
        """
        List users in signup order with the total count.

        Pagination applies only when both `page` (1-indexed) and `size` are
        given: offset = (page - 1) * size.
        """
        try:
            total = (await db.execute(select(func.count()).select_from(User))).scalar_one()

            query = select(User).order_by(User.created_at, User.id)
            if page and size:
                query = query.offset((page - 1) * size).limit(size)
            result = await db.execute(query)
            users = [user.to_document() for user in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing users: %s", str(e))
            raise DatabaseError(context={"page": page, "size": size})

        return UserListResponse(users=users, count=total)

    async def get_user(self, db: AsyncSession, email: str) -> Dict[str, Any]:
        """
        Raises:
            NotFoundError: no user with this email
        """
        try:
            user = await self.find_by_email(db, email)
        except SQLAlchemyError as e:
            logger.error("Database error fetching user %s: %s", email, str(e))
            raise DatabaseError(context={"email": email})
        if user is None:
            raise NotFoundError(resource="user", resource_id=email)
        return user.to_document()

    async def list_delivery_men(self, db: AsyncSession) -> List[Dict[str, Any]]:
        """All users whose role is 'Delivery Men'."""
        try:
            result = await db.execute(
                select(User)
                .where(User.role == ROLE_DELIVERY_MEN)
                .order_by(User.created_at, User.id)
            )
        except SQLAlchemyError as e:
            logger.error("Database error listing delivery men: %s", str(e))
            raise DatabaseError()
        return [user.to_document() for user in result.scalars().all()]

    async def update_user(
        self, db: AsyncSession, email: str, fields: Mapping[str, Any]
    ) -> UpdateResult:
        """
        Merge `fields` into the user with this email (role assignment and
        profile edits).

        Raises:
            NotFoundError: no user with this email
            ConflictError: the update changes email to one already in use
        """
        try:
            user = await self.find_by_email(db, email)
            if user is None:
                raise NotFoundError(resource="user", resource_id=email)
            modified = user.merge(fields)
            await db.flush()
        except IntegrityError:
            raise ConflictError(context={"email": email, "new_email": fields.get("email")})
        except SQLAlchemyError as e:
            logger.error("Database error updating user %s: %s", email, str(e))
            raise DatabaseError(context={"email": email})

        if "role" in fields:
            logger.info("User %s role set to %r", email, user.role)
        return UpdateResult(matched_count=1, modified_count=int(modified))

    async def increment_delivery_count(self, db: AsyncSession, email: str) -> UpdateResult:
        """
        Add one to the user's delivered-parcel counter.

        Raises:
            NotFoundError: no user with this email
        """
        try:
            result = await db.execute(
                update(User)
                .where(User.email == email)
                .values(no_of_delivered_parcel=User.no_of_delivered_parcel + 1)
            )
        except SQLAlchemyError as e:
            logger.error("Database error incrementing counter for %s: %s", email, str(e))
            raise DatabaseError(context={"email": email})

        if result.rowcount == 0:
            raise NotFoundError(resource="user", resource_id=email)
        return UpdateResult(matched_count=result.rowcount, modified_count=result.rowcount)

    async def count_users(self, db: AsyncSession) -> int:
        result = await db.execute(select(func.count()).select_from(User))
        return result.scalar_one()


# Singleton instance
user_service = UserService()
