"""Create SuperApp schema

Revision ID: 001
Revises: None
Create Date: 2026-01-05 00:00:00.000000+00:00

What:  Creates every table, the `vector` extension, and the
       `search_saved_items` similarity function.
How:   Every per-user table shares the same three leading columns
       (id, user_id, created_at); see superapp/models/base.py.

The embedding width (768) must match EMBEDDING_DIMENSIONS. Changing the
embedding model to one with a different width needs a new migration.

Rollback: downgrade() drops everything (destructive: all data lost).
"""

from typing import List, Sequence, Union
from alembic import op
import sqlalchemy as sa
from pgvector.sqlalchemy import Vector
from sqlalchemy.dialects import postgresql

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

EMBEDDING_DIMENSIONS = 768

OWNED_TABLES = (
    "contacts",
    "tasks",
    "transactions",
    "budgets",
    "workouts",
    "meals",
    "habits",
    "habit_completions",
    "mood_entries",
    "trips",
    "trip_activities",
    "trip_expenses",
    "saved_items",
)


def owned_columns() -> List[sa.Column]:
    """id, user_id and created_at, shared by every per-user table."""
    return [
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
            primary_key=True,
        ),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            nullable=False,
            comment="Owning identity (subject of the session token)",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def money(name: str, nullable: bool = False) -> sa.Column:
    return sa.Column(name, sa.Numeric(12, 2), nullable=nullable)


def tag_array(name: str = "tags") -> sa.Column:
    return sa.Column(
        name, postgresql.ARRAY(sa.Text()), nullable=False, server_default=sa.text("'{}'")
    )


def default_text(name: str, length: int, default: str) -> sa.Column:
    return sa.Column(
        name, sa.String(length), nullable=False, server_default=sa.text(f"'{default}'")
    )


SEARCH_FUNCTION = f"""
CREATE OR REPLACE FUNCTION search_saved_items(
    query_embedding vector({EMBEDDING_DIMENSIONS}),
    match_user_id uuid,
    match_count integer DEFAULT 20,
    match_threshold double precision DEFAULT 0.3
)
RETURNS TABLE (
    id uuid,
    raw_text text,
    title varchar,
    summary text,
    category varchar,
    tags text[],
    metadata jsonb,
    created_at timestamptz,
    similarity double precision
)
LANGUAGE sql STABLE
AS $$
    SELECT
        s.id,
        s.raw_text,
        s.title,
        s.summary,
        s.category,
        s.tags,
        s.metadata,
        s.created_at,
        1 - (s.embedding <=> query_embedding) AS similarity
    FROM saved_items s
    WHERE s.user_id = match_user_id
      AND s.embedding IS NOT NULL
      AND 1 - (s.embedding <=> query_embedding) >= match_threshold
    ORDER BY s.embedding <=> query_embedding
    LIMIT match_count;
$$;
"""


def upgrade() -> None:
    """Create all tables, constraints, indexes and the search function."""
    op.execute("CREATE EXTENSION IF NOT EXISTS vector")

    # ── Projects ──────────────────────────────────────────────────────────
    op.create_table(
        "contacts",
        *owned_columns(),
        sa.Column("first_name", sa.String(120), nullable=False),
        sa.Column("last_name", sa.String(120), nullable=True),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("phone", sa.String(64), nullable=True),
        sa.Column("company", sa.String(200), nullable=True),
        sa.Column("role", sa.String(200), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        default_text("status", 20, "lead"),
    )
    op.create_index("idx_contacts_user_created_at", "contacts", ["user_id", "created_at"])

    op.create_table(
        "tasks",
        *owned_columns(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        default_text("priority", 20, "medium"),
        default_text("status", 20, "todo"),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column(
            "contact_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("contacts.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )
    op.create_index("ix_tasks_contact_id", "tasks", ["contact_id"])

    # ── Finance ───────────────────────────────────────────────────────────
    op.create_table(
        "transactions",
        *owned_columns(),
        sa.Column("description", sa.String(300), nullable=False),
        money("amount"),
        default_text("type", 20, "expense"),
        default_text("category", 50, "other"),
        sa.Column(
            "transaction_date", sa.Date(), nullable=False, server_default=sa.text("CURRENT_DATE")
        ),
        sa.Column("notes", sa.Text(), nullable=True),
    )

    # NULL category is the overall budget; NULLS NOT DISTINCT keeps it unique per month
    op.create_table(
        "budgets",
        *owned_columns(),
        sa.Column("category", sa.String(50), nullable=True),
        money("monthly_limit"),
        sa.Column("budget_month", sa.Date(), nullable=False),
        sa.UniqueConstraint(
            "user_id",
            "category",
            "budget_month",
            name="uq_budgets_user_category_month",
            postgresql_nulls_not_distinct=True,
        ),
    )

    # ── Fitness & Meals ───────────────────────────────────────────────────
    op.create_table(
        "workouts",
        *owned_columns(),
        sa.Column("exercise_name", sa.String(200), nullable=False),
        default_text("category", 50, "strength"),
        sa.Column("sets", sa.Integer(), nullable=True),
        sa.Column("reps", sa.Integer(), nullable=True),
        sa.Column("weight_lbs", sa.Float(), nullable=True),
        sa.Column("duration_minutes", sa.Float(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "workout_date", sa.Date(), nullable=False, server_default=sa.text("CURRENT_DATE")
        ),
    )

    op.create_table(
        "meals",
        *owned_columns(),
        sa.Column("meal_name", sa.String(200), nullable=False),
        default_text("meal_type", 20, "lunch"),
        sa.Column("calories", sa.Float(), nullable=True),
        sa.Column("protein_g", sa.Float(), nullable=True),
        sa.Column("carbs_g", sa.Float(), nullable=True),
        sa.Column("fat_g", sa.Float(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("meal_date", sa.Date(), nullable=False, server_default=sa.text("CURRENT_DATE")),
    )

    # ── Habits ────────────────────────────────────────────────────────────
    op.create_table(
        "habits",
        *owned_columns(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        default_text("category", 50, "other"),
        default_text("type", 20, "boolean"),
        sa.Column("target_count", sa.Integer(), nullable=True),
        sa.Column("color", sa.String(20), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
    )

    op.create_table(
        "habit_completions",
        *owned_columns(),
        sa.Column(
            "habit_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("habits.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("completion_date", sa.Date(), nullable=False),
        sa.Column("value", sa.Float(), nullable=False, server_default=sa.text("1")),
        sa.UniqueConstraint(
            "habit_id", "completion_date", name="uq_habit_completions_habit_date"
        ),
    )

    # ── Wellness ──────────────────────────────────────────────────────────
    op.create_table(
        "mood_entries",
        *owned_columns(),
        sa.Column("mood", sa.Integer(), nullable=False),
        sa.Column("energy_level", sa.Integer(), nullable=True),
        sa.Column("sleep_quality", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        tag_array(),
        sa.Column("entry_date", sa.Date(), nullable=False),
        sa.UniqueConstraint("user_id", "entry_date", name="uq_mood_entries_user_date"),
        sa.CheckConstraint("mood BETWEEN 1 AND 5", name="ck_mood_entries_mood_range"),
    )

    # ── Travel ────────────────────────────────────────────────────────────
    op.create_table(
        "trips",
        *owned_columns(),
        sa.Column("destination", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        default_text("status", 20, "planning"),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        money("budget", nullable=True),
        default_text("currency", 3, "USD"),
        sa.Column("cover_color", sa.String(20), nullable=True),
        tag_array(),
    )

    op.create_table(
        "trip_activities",
        *owned_columns(),
        sa.Column(
            "trip_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("trips.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("activity_date", sa.Date(), nullable=True),
        sa.Column("start_time", sa.Time(), nullable=True),
        sa.Column("end_time", sa.Time(), nullable=True),
        sa.Column("location", sa.String(200), nullable=True),
        default_text("category", 50, "other"),
        money("cost", nullable=True),
        sa.Column("is_booked", sa.Boolean(), nullable=False, server_default=sa.text("false")),
    )
    op.create_index("ix_trip_activities_trip_id", "trip_activities", ["trip_id"])

    op.create_table(
        "trip_expenses",
        *owned_columns(),
        sa.Column(
            "trip_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("trips.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(200), nullable=False),
        money("amount"),
        default_text("category", 50, "other"),
        sa.Column(
            "expense_date", sa.Date(), nullable=False, server_default=sa.text("CURRENT_DATE")
        ),
        sa.Column("notes", sa.Text(), nullable=True),
    )
    op.create_index("ix_trip_expenses_trip_id", "trip_expenses", ["trip_id"])

    # ── Universal Saver ───────────────────────────────────────────────────
    op.create_table(
        "saved_items",
        *owned_columns(),
        sa.Column("raw_text", sa.Text(), nullable=False),
        sa.Column("title", sa.String(80), nullable=False),
        sa.Column("summary", sa.Text(), nullable=False),
        sa.Column("category", sa.String(20), nullable=False),
        tag_array(),
        sa.Column(
            "metadata",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column("embedding", Vector(EMBEDDING_DIMENSIONS), nullable=True),
    )
    op.create_index(
        "idx_saved_items_user_created_at", "saved_items", ["user_id", "created_at"]
    )
    op.create_index("idx_saved_items_user_category", "saved_items", ["user_id", "category"])
    op.execute(
        "CREATE INDEX idx_saved_items_embedding_hnsw "
        "ON saved_items USING hnsw (embedding vector_cosine_ops)"
    )
    op.execute(SEARCH_FUNCTION)

    # ── Preferences ───────────────────────────────────────────────────────
    op.create_table(
        "user_preferences",
        sa.Column("user_id", postgresql.UUID(as_uuid=True), primary_key=True),
        default_text("sidebar_mode", 20, "expanded"),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    )

    # Every owner-scoped query filters on user_id first
    for table in OWNED_TABLES:
        op.create_index(f"ix_{table}_user_id", table, ["user_id"])


def downgrade() -> None:
    """
    Drop everything created by upgrade().

    WARNING: This is destructive: all data will be permanently lost.
    The `vector` extension is left installed; other schemas may use it.
    """
    op.execute(
        "DROP FUNCTION IF EXISTS search_saved_items(vector, uuid, integer, double precision)"
    )
    op.drop_table("user_preferences")
    for table in reversed(OWNED_TABLES):
        op.drop_table(table)
