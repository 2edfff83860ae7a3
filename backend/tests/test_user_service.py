"""
NexParcel Backend — User Service Tests
========================================

What:  UserService against a real (in-memory) database, plus error wrapping
       with a mock session.

What we test:
    ✅ Signup inserts once; a known email gets the duplicate message
    ✅ A signup racing past the soft check is rejected by the unique index
    ✅ Listing is in signup order; paging keeps the total count
    ✅ Updates match strictly (unknown email → NotFoundError, nothing created)
    ✅ The delivered-parcel counter increments atomically
    ✅ Unexpected SQLAlchemy errors surface as DatabaseError
"""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from nexparcel.exceptions import ConflictError, DatabaseError, NotFoundError, ValidationError
from nexparcel.schemas.common import InsertResult, MessageResponse
from nexparcel.services.user_service import DUPLICATE_EMAIL_MESSAGE, UserService


class TestCreateUser:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_new_email_is_inserted(self, db_session):
        result = await self.service.create_user(
            db_session, {"email": "ann@mail.com", "name": "Ann", "photo": "https://i/ann.png"}
        )

        assert isinstance(result, InsertResult)
        assert result.acknowledged is True
        assert len(result.inserted_id) == 32

        user = await self.service.get_user(db_session, "ann@mail.com")
        assert user["_id"] == result.inserted_id
        assert user["name"] == "Ann"
        assert user["photo"] == "https://i/ann.png"
        assert user["no_of_delivered_parcel"] == 0

    @pytest.mark.asyncio
    async def test_known_email_returns_message(self, db_session):
        await self.service.create_user(db_session, {"email": "ann@mail.com"})
        result = await self.service.create_user(db_session, {"email": "ann@mail.com", "name": "Other"})

        assert isinstance(result, MessageResponse)
        assert result.message == DUPLICATE_EMAIL_MESSAGE
        assert await self.service.count_users(db_session) == 1

    @pytest.mark.asyncio
    async def test_race_past_soft_check_is_conflict(self, db_session):
        await self.service.create_user(db_session, {"email": "ann@mail.com"})

        # Simulate a second request that checked before the first committed
        with patch.object(self.service, "find_by_email", AsyncMock(return_value=None)):
            with pytest.raises(ConflictError) as exc_info:
                await self.service.create_user(db_session, {"email": "ann@mail.com"})

        assert exc_info.value.message == DUPLICATE_EMAIL_MESSAGE
        await db_session.rollback()


class TestListUsers:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_all_users_in_signup_order(self, db_session):
        for email in ("a@mail.com", "b@mail.com", "c@mail.com"):
            await self.service.create_user(db_session, {"email": email})

        result = await self.service.list_users(db_session)

        assert result.count == 3
        assert [u["email"] for u in result.users] == ["a@mail.com", "b@mail.com", "c@mail.com"]

    @pytest.mark.asyncio
    async def test_page_keeps_total_count(self, db_session):
        for email in ("a@mail.com", "b@mail.com", "c@mail.com"):
            await self.service.create_user(db_session, {"email": email})

        result = await self.service.list_users(db_session, page=2, size=2)

        assert result.count == 3
        assert [u["email"] for u in result.users] == ["c@mail.com"]

    @pytest.mark.asyncio
    async def test_delivery_men_only(self, db_session):
        await self.service.create_user(db_session, {"email": "a@mail.com"})
        await self.service.create_user(db_session, {"email": "b@mail.com", "role": "Delivery Men"})
        await self.service.create_user(db_session, {"email": "c@mail.com", "role": "Admin"})

        riders = await self.service.list_delivery_men(db_session)

        assert [u["email"] for u in riders] == ["b@mail.com"]


class TestUpdateUser:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_role_assignment(self, db_session):
        await self.service.create_user(db_session, {"email": "ann@mail.com", "name": "Ann"})

        result = await self.service.update_user(db_session, "ann@mail.com", {"role": "Delivery Men"})

        assert result.matched_count == 1
        assert result.modified_count == 1
        assert result.upserted_id is None
        user = await self.service.get_user(db_session, "ann@mail.com")
        assert user["role"] == "Delivery Men"
        assert user["name"] == "Ann"

    @pytest.mark.asyncio
    async def test_same_value_is_not_a_modification(self, db_session):
        await self.service.create_user(db_session, {"email": "ann@mail.com", "role": "Admin"})

        result = await self.service.update_user(db_session, "ann@mail.com", {"role": "Admin"})

        assert result.matched_count == 1
        assert result.modified_count == 0

    @pytest.mark.asyncio
    async def test_non_numeric_counter_is_rejected(self, db_session):
        await self.service.create_user(db_session, {"email": "rider@mail.com"})

        with pytest.raises(ValidationError) as exc_info:
            await self.service.update_user(db_session, "rider@mail.com", {"no_of_delivered_parcel": "abc"})

        assert exc_info.value.field == "no_of_delivered_parcel"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", [None, "", "   "])
    async def test_email_cannot_be_cleared(self, db_session, email):
        await self.service.create_user(db_session, {"email": "ann@mail.com"})

        with pytest.raises(ValidationError) as exc_info:
            await self.service.update_user(db_session, "ann@mail.com", {"email": email})

        assert exc_info.value.field == "email"
        assert (await self.service.find_by_email(db_session, "ann@mail.com")) is not None

    @pytest.mark.asyncio
    async def test_email_clash_is_conflict(self, db_session):
        await self.service.create_user(db_session, {"email": "ann@mail.com"})
        await self.service.create_user(db_session, {"email": "bob@mail.com"})

        with pytest.raises(ConflictError):
            await self.service.update_user(db_session, "bob@mail.com", {"email": "ann@mail.com"})

        await db_session.rollback()

    @pytest.mark.asyncio
    async def test_unknown_email_is_not_created(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.update_user(db_session, "ghost@mail.com", {"role": "Admin"})

        assert await self.service.count_users(db_session) == 0

    @pytest.mark.asyncio
    async def test_get_unknown_user(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.get_user(db_session, "ghost@mail.com")


class TestDeliveryCounter:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_two_increments_count_two(self, db_session):
        await self.service.create_user(db_session, {"email": "rider@mail.com", "role": "Delivery Men"})

        await self.service.increment_delivery_count(db_session, "rider@mail.com")
        result = await self.service.increment_delivery_count(db_session, "rider@mail.com")

        assert result.matched_count == 1
        user = await self.service.find_by_email(db_session, "rider@mail.com")
        await db_session.refresh(user)
        assert user.no_of_delivered_parcel == 2

    @pytest.mark.asyncio
    async def test_unknown_email(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.increment_delivery_count(db_session, "ghost@mail.com")


class TestDatabaseErrors:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_list_failure_is_wrapped(self, mock_db_session):
        mock_db_session.execute.side_effect = SQLAlchemyError("connection reset")

        with pytest.raises(DatabaseError):
            await self.service.list_users(mock_db_session, page=1, size=10)

    @pytest.mark.asyncio
    async def test_get_failure_is_wrapped(self, mock_db_session):
        mock_db_session.execute.side_effect = SQLAlchemyError("connection reset")

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.get_user(mock_db_session, "ann@mail.com")

        assert exc_info.value.context == {"email": "ann@mail.com"}
