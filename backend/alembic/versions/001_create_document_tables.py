"""Create users, bookings and reviews tables

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates the three document tables. Each row stores the client's
       document in `data` (JSON) with queried keys promoted to columns;
       see nexparcel/models/document.py.

Rollback: downgrade() drops all three tables (destructive).
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _document_columns() -> list:
    """id / data / created_at, shared by every document table."""
    return [
        sa.Column("id", sa.String(32), nullable=False, comment="Opaque document identifier (UUID4 hex)"),
        sa.Column("data", sa.JSON(), nullable=False, comment="Caller-supplied document fields not promoted to columns"),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), nullable=False, comment="Insertion timestamp (UTC)"),
    ]


def upgrade() -> None:
    # ── users ─────────────────────────────────────────────────────────────
    op.create_table(
        "users",
        *_document_columns(),
        sa.Column("email", sa.String(320), nullable=False, comment="Natural key for identity and role lookups"),
        sa.Column("role", sa.String(50), nullable=True, comment="Admin | Delivery Men | NULL (customer)"),
        sa.Column(
            "no_of_delivered_parcel",
            sa.Integer(),
            nullable=False,
            server_default=sa.text("0"),
            comment="Parcels delivered by this user (Delivery Men only)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    # Unique: duplicate signups that race past the soft check fail here
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_role", "users", ["role"])
    op.create_index("ix_users_created_at", "users", ["created_at"])

    # ── bookings ──────────────────────────────────────────────────────────
    op.create_table(
        "bookings",
        *_document_columns(),
        sa.Column("email", sa.String(320), nullable=True, comment="Requester email"),
        sa.Column("status", sa.String(50), nullable=True, comment="Free text, e.g. pending, delivered"),
        sa.Column("booking_date", sa.String(64), nullable=True, comment="When the booking was placed (ISO 8601 string)"),
        sa.Column(
            "requested_delivery_date",
            sa.String(64),
            nullable=True,
            comment="Requested delivery date (sortable string)",
        ),
        sa.Column("deliverymen_id", sa.String(64), nullable=True, comment="Assigned delivery man's user id"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_bookings_email", "bookings", ["email"])
    op.create_index("ix_bookings_status", "bookings", ["status"])
    op.create_index("ix_bookings_requested_delivery_date", "bookings", ["requested_delivery_date"])
    op.create_index("ix_bookings_deliverymen_id", "bookings", ["deliverymen_id"])
    op.create_index("ix_bookings_created_at", "bookings", ["created_at"])

    # ── reviews ───────────────────────────────────────────────────────────
    op.create_table(
        "reviews",
        *_document_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_reviews_created_at", "reviews", ["created_at"])


def downgrade() -> None:
    """Drop all three tables. All bookings, users and reviews are lost."""
    op.drop_index("ix_reviews_created_at", table_name="reviews")
    op.drop_table("reviews")

    for name in (
        "ix_bookings_created_at",
        "ix_bookings_deliverymen_id",
        "ix_bookings_requested_delivery_date",
        "ix_bookings_status",
        "ix_bookings_email",
    ):
        op.drop_index(name, table_name="bookings")
    op.drop_table("bookings")

    for name in ("ix_users_created_at", "ix_users_role", "ix_users_email"):
        op.drop_index(name, table_name="users")
    op.drop_table("users")
