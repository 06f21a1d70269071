"""initial_schema

Create the reward ledger schema:
- Accounts (balance, voting window markers, first earning time)
- Videos (catalog with per-video reward bounds)
- Votes (one row per accepted vote)
- Transactions (append-only ledger)
- Withdrawals (at most one pending per account)

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 09:12:03.418257

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENUMS = {
    "vote_type": ("like", "dislike"),
    "transaction_type": ("credit", "debit", "withdrawal", "withdrawal_reversal"),
    "transaction_status": ("completed", "pending", "failed"),
    "withdrawal_status": ("pending", "approved", "rejected", "completed"),
}


def _enum(name: str) -> postgresql.ENUM:
    return postgresql.ENUM(*ENUMS[name], name=name, create_type=False)


def upgrade() -> None:
    """Upgrade schema."""
    for name, values in ENUMS.items():
        labels = ", ".join(f"'{value}'" for value in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # ACCOUNTS table
    # ========================================================================
    op.create_table(
        "accounts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column(
            "balance", sa.Numeric(12, 2), server_default=sa.text("0"), nullable=False
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column("first_earn_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "voting_streak", sa.Integer(), server_default=sa.text("0"), nullable=False
        ),
        sa.Column("last_voted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("last_vote_date_reset", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "voting_days_count",
            sa.Integer(),
            server_default=sa.text("0"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
        sa.CheckConstraint("balance >= 0", name="balance_non_negative"),
    )

    # ========================================================================
    # VIDEOS table
    # ========================================================================
    op.create_table(
        "videos",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), server_default="", nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("thumbnail", sa.Text(), nullable=False),
        sa.Column(
            "reward_min",
            sa.Numeric(12, 2),
            server_default=sa.text("0.30"),
            nullable=False,
        ),
        sa.Column(
            "reward_max",
            sa.Numeric(12, 2),
            server_default=sa.text("2.00"),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("reward_max >= reward_min", name="reward_bounds_ordered"),
    )
    op.create_index(
        "idx_videos_created_at", "videos", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column("video_id", sa.String(length=64), nullable=False),
        sa.Column("vote_type", _enum("vote_type"), nullable=False),
        sa.Column("reward_amount", sa.Numeric(12, 2), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["video_id"], ["videos.id"], ondelete="RESTRICT"),
    )
    op.create_index(
        "idx_votes_account_created", "votes", ["account_id", "created_at"]
    )

    # ========================================================================
    # TRANSACTIONS table
    # ========================================================================
    op.create_table(
        "transactions",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column("type", _enum("transaction_type"), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
            "status",
            _enum("transaction_status"),
            server_default="completed",
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
    )
    op.create_index(
        "idx_transactions_account_created",
        "transactions",
        ["account_id", sa.text("created_at DESC")],
    )

    # ========================================================================
    # WITHDRAWALS table
    # ========================================================================
    op.create_table(
        "withdrawals",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("method", sa.String(length=100), nullable=False),
        sa.Column(
            "status",
            _enum("withdrawal_status"),
            server_default="pending",
            nullable=False,
        ),
        sa.Column(
            "requested_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column("processed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.CheckConstraint("amount > 0", name="withdrawal_amount_positive"),
    )
    op.create_index(
        "idx_withdrawals_account_requested",
        "withdrawals",
        ["account_id", sa.text("requested_at DESC")],
    )
    # At most one pending withdrawal per account
    op.create_index(
        "uq_withdrawals_one_pending",
        "withdrawals",
        ["account_id"],
        unique=True,
        postgresql_where=sa.text("status = 'pending'"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("withdrawals")
    op.drop_table("transactions")
    op.drop_table("votes")
    op.drop_table("videos")
    op.drop_table("accounts")

    for name in reversed(list(ENUMS)):
        op.execute(f"DROP TYPE IF EXISTS {name}")
