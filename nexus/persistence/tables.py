"""SQLAlchemy table definitions for Nexus.

These tables are used with SQLAlchemy Core and match the schema defined in
Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PROFILES TABLE (one per identity provider user)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),  # Identity provider user id
    Column("email", String(255), nullable=False, unique=True),
    Column("full_name", String(255), nullable=False),
    Column("slug", String(255), nullable=True, unique=True),
    Column("avatar_url", Text, nullable=True),
    Column("location", String(255), nullable=True),
    Column("bio", Text, nullable=True),
    Column("headline", String(255), nullable=True),
    Column("website", Text, nullable=True),
    Column("is_public", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# CONTACTS TABLE (owner-scoped cards)
# ============================================================================
contacts_table = Table(
    "contacts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "owner_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "linked_profile_id",
        UUID,
        ForeignKey("profiles.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("full_name", String(255), nullable=False),
    Column("email", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("location", String(255), nullable=True),
    Column("bio", Text, nullable=True),
    Column("website", Text, nullable=True),
    Column("company", String(255), nullable=True),
    Column("role", String(255), nullable=True),
    Column("relationship_type", String(50), nullable=True),
    Column("chronicle_color", String(32), nullable=True),
    Column("chronicle_fuzzy_start", Boolean, nullable=False, server_default="false"),
    Column("chronicle_fuzzy_end", Boolean, nullable=False, server_default="false"),
    Column("chronicle_note", Text, nullable=True),
    Column("show_on_chronicle", Boolean, nullable=False, server_default="false"),
    Column("met_date", String(10), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_contacts_owner_id", contacts_table.c.owner_id)

# Natural key of a linked card: one per owner and linked profile
Index(
    "idx_contacts_unique_owner_linked_profile",
    contacts_table.c.owner_id,
    contacts_table.c.linked_profile_id,
    unique=True,
    postgresql_where=contacts_table.c.linked_profile_id.isnot(None),
)

# ============================================================================
# CONNECTIONS TABLE (invite codes and accepted links)
# ============================================================================
connections_table = Table(
    "connections",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("invite_code", String(32), nullable=False, unique=True),
    Column(
        "inviter_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "invitee_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "contact_id",
        UUID,
        ForeignKey("contacts.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "status",
        Enum("pending", "accepted", name="connection_status", create_type=False),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_connections_inviter_id", connections_table.c.inviter_id)
Index("idx_connections_invitee_id", connections_table.c.invitee_id)
Index(
    "idx_connections_code_status",
    connections_table.c.invite_code,
    connections_table.c.status,
)

# ============================================================================
# WORK ENTRIES TABLE
# ============================================================================
work_entries_table = Table(
    "work_entries",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(255), nullable=False),
    Column("company", String(255), nullable=False),
    Column("start_date", String(10), nullable=False),
    Column("end_date", String(10), nullable=True),
    Column("is_current", Boolean, nullable=False, server_default="false"),
    Column("location", String(255), nullable=True),
    Column("description", Text, nullable=True),
    Column("chronicle_color", String(32), nullable=True),
    Column("chronicle_fuzzy_start", Boolean, nullable=False, server_default="false"),
    Column("chronicle_fuzzy_end", Boolean, nullable=False, server_default="false"),
    Column("chronicle_note", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_work_entries_user_id", work_entries_table.c.user_id)

# ============================================================================
# CHRONICLE TABLES
# ============================================================================
chronicle_entries_table = Table(
    "chronicle_entries",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column("type", String(50), nullable=False),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("start_date", String(7), nullable=False),  # YYYY-MM
    Column("end_date", String(7), nullable=True),
    Column("canvas_col", String(50), nullable=False),
    Column("color", String(32), nullable=False),
    Column("fuzzy_start", Boolean, nullable=False, server_default="false"),
    Column("fuzzy_end", Boolean, nullable=False, server_default="false"),
    Column("note", Text, nullable=True),
    Column("show_on_resume", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_chronicle_entries_user_id", chronicle_entries_table.c.user_id)

chronicle_places_table = Table(
    "chronicle_places",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(255), nullable=False),
    Column("start_date", String(7), nullable=False),
    Column("end_date", String(7), nullable=True),
    Column("color", String(32), nullable=False, server_default="#888888"),
    Column("fuzzy_start", Boolean, nullable=False, server_default="false"),
    Column("fuzzy_end", Boolean, nullable=False, server_default="false"),
    Column("note", Text, nullable=True),
    Column("show_on_resume", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_chronicle_places_user_id", chronicle_places_table.c.user_id)
