"""initial_schema

Create the foundational schema for Nexus:
- Profiles (one per identity provider user)
- Contacts (owner-scoped cards, optionally linked to a profile)
- Connections (invite codes and accepted links between profiles)
- Work entries (with chronicle display columns)
- Chronicle entries and places

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-18 10:12:44.218305

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

UPDATED_AT_TABLES = ("profiles", "contacts", "chronicle_entries", "chronicle_places")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def _chronicle_columns() -> list[sa.Column]:
    return [
        sa.Column("chronicle_color", sa.String(32), nullable=True),
        sa.Column(
            "chronicle_fuzzy_start", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column(
            "chronicle_fuzzy_end", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("chronicle_note", sa.Text(), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE connection_status AS ENUM ('pending', 'accepted');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # PROFILES table (id is the identity provider user id)
    # ========================================================================
    op.create_table(
        "profiles",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("headline", sa.String(255), nullable=True),
        sa.Column("website", sa.Text(), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_profiles_email"),
        sa.UniqueConstraint("slug", name="uq_profiles_slug"),
    )

    # ========================================================================
    # CONTACTS table
    # ========================================================================
    op.create_table(
        "contacts",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("linked_profile_id", sa.UUID(), nullable=True),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("website", sa.Text(), nullable=True),
        sa.Column("company", sa.String(255), nullable=True),
        sa.Column("role", sa.String(255), nullable=True),
        sa.Column("relationship_type", sa.String(50), nullable=True),
        *_chronicle_columns(),
        sa.Column(
            "show_on_chronicle", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("met_date", sa.String(10), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["owner_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["linked_profile_id"], ["profiles.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_contacts_owner_id", "contacts", ["owner_id"])
    # One linked card per owner and profile; redemption upserts on this key
    op.create_index(
        "idx_contacts_unique_owner_linked_profile",
        "contacts",
        ["owner_id", "linked_profile_id"],
        unique=True,
        postgresql_where=sa.text("linked_profile_id IS NOT NULL"),
    )

    # ========================================================================
    # CONNECTIONS table
    # ========================================================================
    op.create_table(
        "connections",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("invite_code", sa.String(32), nullable=False),
        sa.Column("inviter_id", sa.UUID(), nullable=False),
        sa.Column("invitee_id", sa.UUID(), nullable=True),
        sa.Column("contact_id", sa.UUID(), nullable=True),
        sa.Column(
            "status",
            postgresql.ENUM(
                "pending", "accepted", name="connection_status", create_type=False
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("accepted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["inviter_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["invitee_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["contact_id"], ["contacts.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("invite_code", name="uq_connections_invite_code"),
        # Business rule: accepted connections record who accepted them
        sa.CheckConstraint(
            "(status = 'pending' OR invitee_id IS NOT NULL)",
            name="accepted_has_invitee",
        ),
    )
    op.create_index("idx_connections_inviter_id", "connections", ["inviter_id"])
    op.create_index("idx_connections_invitee_id", "connections", ["invitee_id"])
    op.create_index(
        "idx_connections_code_status", "connections", ["invite_code", "status"]
    )

    # ========================================================================
    # WORK_ENTRIES table
    # ========================================================================
    op.create_table(
        "work_entries",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("company", sa.String(255), nullable=False),
        sa.Column("start_date", sa.String(10), nullable=False),
        sa.Column("end_date", sa.String(10), nullable=True),
        sa.Column("is_current", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        *_chronicle_columns(),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_work_entries_user_id", "work_entries", ["user_id"])

    # ========================================================================
    # CHRONICLE tables (dates are YYYY-MM)
    # ========================================================================
    op.create_table(
        "chronicle_entries",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("start_date", sa.String(7), nullable=False),
        sa.Column("end_date", sa.String(7), nullable=True),
        sa.Column("canvas_col", sa.String(50), nullable=False),
        sa.Column("color", sa.String(32), nullable=False),
        sa.Column("fuzzy_start", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("fuzzy_end", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("note", sa.Text(), nullable=True),
        sa.Column(
            "show_on_resume", sa.Boolean(), nullable=False, server_default="false"
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_chronicle_entries_user_id", "chronicle_entries", ["user_id"])

    op.create_table(
        "chronicle_places",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("start_date", sa.String(7), nullable=False),
        sa.Column("end_date", sa.String(7), nullable=True),
        sa.Column("color", sa.String(32), nullable=False, server_default="#888888"),
        sa.Column("fuzzy_start", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("fuzzy_end", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("note", sa.Text(), nullable=True),
        sa.Column(
            "show_on_resume", sa.Boolean(), nullable=False, server_default="false"
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_chronicle_places_user_id", "chronicle_places", ["user_id"])

    # ========================================================================
    # TRIGGERS
    # ========================================================================
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    for table in UPDATED_AT_TABLES:
        op.execute(f"""
            CREATE TRIGGER update_{table}_updated_at
            BEFORE UPDATE ON {table}
            FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
        """)


def downgrade() -> None:
    """Downgrade schema."""
    for table in UPDATED_AT_TABLES:
        op.execute(f"DROP TRIGGER IF EXISTS update_{table}_updated_at ON {table}")
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    # Drop tables (in reverse order of dependencies)
    op.drop_table("chronicle_places")
    op.drop_table("chronicle_entries")
    op.drop_table("work_entries")
    op.drop_table("connections")
    op.drop_table("contacts")
    op.drop_table("profiles")

    op.execute("DROP TYPE IF EXISTS connection_status")
