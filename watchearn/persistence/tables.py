"""SQLAlchemy table definitions for WatchEarn.

Core tables used by the repositories for explicit SQL. They match the
schema created by the Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# Monetary columns: two decimal places
MONEY = Numeric(12, 2)

# ============================================================================
# ACCOUNTS TABLE
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),  # Lower-cased
    Column("balance", MONEY, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("first_earn_at", TIMESTAMP(timezone=True), nullable=True),
    Column("voting_streak", Integer, nullable=False, server_default="0"),
    Column("last_voted_at", TIMESTAMP(timezone=True), nullable=True),
    Column("last_vote_date_reset", TIMESTAMP(timezone=True), nullable=True),
    Column("voting_days_count", Integer, nullable=False, server_default="0"),
    CheckConstraint("balance >= 0", name="balance_non_negative"),
)

# ============================================================================
# VIDEOS TABLE (catalog, seeded by migration)
# ============================================================================
videos_table = Table(
    "videos",
    metadata,
    Column("id", String(64), primary_key=True),  # YouTube video ID
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("url", Text, nullable=False),
    Column("thumbnail", Text, nullable=False),
    Column("reward_min", MONEY, nullable=False, server_default="0.30"),
    Column("reward_max", MONEY, nullable=False, server_default="2.00"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("reward_max >= reward_min", name="reward_bounds_ordered"),
)

Index("idx_videos_created_at", videos_table.c.created_at.desc())

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "account_id",
        UUID(as_uuid=True),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "video_id",
        String(64),
        ForeignKey("videos.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column(
        "vote_type",
        postgresql.ENUM("like", "dislike", name="vote_type", create_type=False),
        nullable=False,
    ),
    Column("reward_amount", MONEY, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_votes_account_created", votes_table.c.account_id, votes_table.c.created_at)

# ============================================================================
# TRANSACTIONS TABLE (append-only ledger)
# ============================================================================
transactions_table = Table(
    "transactions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "account_id",
        UUID(as_uuid=True),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "type",
        postgresql.ENUM(
            "credit",
            "debit",
            "withdrawal",
            "withdrawal_reversal",
            name="transaction_type",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("amount", MONEY, nullable=False),
    Column("description", Text, nullable=False),
    Column(
        "status",
        postgresql.ENUM(
            "completed", "pending", "failed", name="transaction_status", create_type=False
        ),
        nullable=False,
        server_default="completed",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_transactions_account_created",
    transactions_table.c.account_id,
    transactions_table.c.created_at.desc(),
)

# ============================================================================
# WITHDRAWALS TABLE
# ============================================================================
withdrawals_table = Table(
    "withdrawals",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "account_id",
        UUID(as_uuid=True),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("amount", MONEY, nullable=False),
    Column("method", String(100), nullable=False),
    Column(
        "status",
        postgresql.ENUM(
            "pending",
            "approved",
            "rejected",
            "completed",
            name="withdrawal_status",
            create_type=False,
        ),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "requested_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    Column("processed_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("amount > 0", name="withdrawal_amount_positive"),
)

Index(
    "idx_withdrawals_account_requested",
    withdrawals_table.c.account_id,
    withdrawals_table.c.requested_at.desc(),
)
# At most one pending withdrawal per account
Index(
    "uq_withdrawals_one_pending",
    withdrawals_table.c.account_id,
    unique=True,
    postgresql_where=text("status = 'pending'"),
)
