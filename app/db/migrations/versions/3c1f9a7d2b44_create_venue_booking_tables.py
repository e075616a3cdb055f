"""Create venue booking tables

Revision ID: 3c1f9a7d2b44
Revises:
Create Date: 2026-10-19 10:30:00.000000

"""
from alembic import op
import sqlalchemy as sa


revision = "3c1f9a7d2b44"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade():
    time_slot_enum = sa.Enum("Morning", "Evening", "Full Day", name="timeslot")
    food_category_enum = sa.Enum(
        "Appetizer", "Main Course", "Dessert", "Beverage", name="foodcategory"
    )
    booking_status_enum = sa.Enum(
        "PENDING", "CONFIRMED", "COMPLETED", "CANCELLED", name="bookingstatus"
    )
    payment_status_enum = sa.Enum(
        "PENDING", "PAID", "PARTIAL", "FAILED", "REFUNDED", name="paymentstatus"
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "halls",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("capacity", sa.Integer(), nullable=False),
        sa.Column("base_price", sa.Float(), nullable=False),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("amenities", sa.JSON(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index("ix_halls_id", "halls", ["id"])

    op.create_table(
        "food_items",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("category", food_category_enum, nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("is_veg", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("image", sa.String(), nullable=True),
        sa.Column("is_available", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index("ix_food_items_id", "food_items", ["id"])
    op.create_index("ix_food_items_category", "food_items", ["category"])

    op.create_table(
        "themes",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("is_available", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index("ix_themes_id", "themes", ["id"])

    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("booking_number", sa.String(), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("hall_id", sa.Integer(), sa.ForeignKey("halls.id"), nullable=False),
        sa.Column("event_date", sa.Date(), nullable=False),
        sa.Column("time_slot", time_slot_enum, nullable=False),
        sa.Column("guest_count", sa.Integer(), nullable=False),
        sa.Column("event_type", sa.String(), nullable=False),
        sa.Column("selected_foods", sa.JSON(), nullable=False),
        sa.Column("selected_theme", sa.JSON(), nullable=True),
        sa.Column("customer_details", sa.JSON(), nullable=False),
        sa.Column("total_amount", sa.Float(), nullable=False),
        sa.Column("special_requests", sa.String(), nullable=True),
        sa.Column("status", booking_status_enum, nullable=False, server_default="PENDING"),
        sa.Column("payment_status", payment_status_enum, nullable=False, server_default="PENDING"),
        sa.Column("payment_id", sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_bookings_id", "bookings", ["id"])
    op.create_index("ix_bookings_booking_number", "bookings", ["booking_number"], unique=True)
    op.create_index("ix_bookings_user_id", "bookings", ["user_id"])
    op.create_index("ix_bookings_hall_id", "bookings", ["hall_id"])
    # Availability lookups filter on hall + date
    op.create_index("ix_bookings_hall_date", "bookings", ["hall_id", "event_date"])

    op.create_table(
        "booking_status_events",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("booking_id", sa.Integer(), sa.ForeignKey("bookings.id"), nullable=False),
        sa.Column("from_status", sa.String(), nullable=True),
        sa.Column("to_status", sa.String(), nullable=False),
        sa.Column("note", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_booking_status_events_id", "booking_status_events", ["id"])
    op.create_index(
        "ix_booking_status_events_booking_id", "booking_status_events", ["booking_id"]
    )


def downgrade():
    op.drop_table("booking_status_events")
    op.drop_table("bookings")
    op.drop_table("themes")
    op.drop_table("food_items")
    op.drop_table("halls")
    op.drop_table("users")

    bind = op.get_bind()
    if bind.dialect.name == "postgresql":
        op.execute("DROP TYPE IF EXISTS timeslot")
        op.execute("DROP TYPE IF EXISTS foodcategory")
        op.execute("DROP TYPE IF EXISTS bookingstatus")
        op.execute("DROP TYPE IF EXISTS paymentstatus")
