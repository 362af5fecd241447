"""create box office tables

Revision ID: 3f9a1c7e2b40
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f9a1c7e2b40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "movie",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "room",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("label", sa.String(), nullable=False),
        sa.Column("capacity", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "add_on",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("unit_price", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "showtime",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("starts_at", sa.DateTime(), nullable=False),
        sa.Column("base_price", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("movie_id", sa.Integer(), nullable=False),
        sa.Column("room_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["movie_id"], ["movie.id"]),
        sa.ForeignKeyConstraint(["room_id"], ["room.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_showtime_starts_at", "showtime", ["starts_at"], unique=False)
    op.create_index("ix_showtime_movie_id", "showtime", ["movie_id"], unique=False)
    op.create_table(
        "ticket_order",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("showtime_id", sa.Integer(), nullable=False),
        sa.Column(
            "ticket_type",
            sa.Enum("FULL", "HALF", name="tickettype"),
            nullable=False,
        ),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("add_on_id", sa.Integer(), nullable=True),
        sa.Column("add_on_quantity", sa.Integer(), nullable=False),
        sa.Column("ticket_subtotal", sa.Numeric(precision=12, scale=3), nullable=False),
        sa.Column("add_on_subtotal", sa.Numeric(precision=12, scale=3), nullable=False),
        sa.Column("total", sa.Numeric(precision=12, scale=3), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.CheckConstraint("quantity > 0", name="ck_ticket_order_quantity_positive"),
        sa.CheckConstraint(
            "add_on_quantity >= 0", name="ck_ticket_order_add_on_quantity"
        ),
        sa.ForeignKeyConstraint(["add_on_id"], ["add_on.id"]),
        sa.ForeignKeyConstraint(["showtime_id"], ["showtime.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_ticket_order_showtime_id", "ticket_order", ["showtime_id"], unique=False
    )
    op.create_index(
        "ix_ticket_order_created_at", "ticket_order", ["created_at"], unique=False
    )


def downgrade():
    op.drop_index("ix_ticket_order_created_at", table_name="ticket_order")
    op.drop_index("ix_ticket_order_showtime_id", table_name="ticket_order")
    op.drop_table("ticket_order")
    sa.Enum(name="tickettype").drop(op.get_bind(), checkfirst=True)
    op.drop_index("ix_showtime_movie_id", table_name="showtime")
    op.drop_index("ix_showtime_starts_at", table_name="showtime")
    op.drop_table("showtime")
    op.drop_table("add_on")
    op.drop_table("room")
    op.drop_table("movie")
