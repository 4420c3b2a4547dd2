"""Initial schema - six append-only tournament tables.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _record_columns(id_column: str) -> list[sa.Column]:
    """Identifier, creation_time, creator_user_id: shared by every table."""
    return [
        sa.Column(id_column, sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column("creation_time", sa.BigInteger, nullable=False),
        sa.Column("creator_user_id", sa.BigInteger, nullable=False),
    ]


def _tournament_fk() -> sa.Column:
    return sa.Column(
        "tournament_id", sa.BigInteger,
        sa.ForeignKey("tournament.tournament_id"), nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "tournament",
        *_record_columns("tournament_id"),
        sa.Column("max_rounds", sa.Integer, nullable=False),
        sa.Column("incentive_start_round", sa.Integer, nullable=False),
        sa.Column("baseline_demand", sa.BigInteger, nullable=False, server_default="0"),
        sa.Column("incentive_magnitude", sa.BigInteger, nullable=False, server_default="0"),
    )

    op.create_table(
        "tournament_data",
        *_record_columns("tournament_data_id"),
        _tournament_fk(),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("active", sa.Boolean, nullable=False),
    )
    op.create_index(
        "ix_tournament_data_tournament_id", "tournament_data", ["tournament_id"],
    )

    op.create_table(
        "tournament_year",
        *_record_columns("tournament_year_id"),
        _tournament_fk(),
        sa.Column("current_round", sa.Integer, nullable=False),
    )
    op.create_index(
        "ix_tournament_year_tournament_id", "tournament_year", ["tournament_id"],
    )

    op.create_table(
        "tournament_membership",
        *_record_columns("tournament_membership_id"),
        _tournament_fk(),
        sa.Column("active", sa.Boolean, nullable=False),
    )
    op.create_index(
        "ix_tournament_membership_key", "tournament_membership",
        ["tournament_id", "creator_user_id"],
    )

    op.create_table(
        "tournament_submission",
        *_record_columns("tournament_submission_id"),
        _tournament_fk(),
        sa.Column("round", sa.Integer, nullable=False),
        sa.Column("amount", sa.BigInteger, nullable=False),
        sa.Column("autogenerated", sa.Boolean, nullable=False),
    )
    op.create_index(
        "ix_tournament_submission_key", "tournament_submission",
        ["tournament_id", "creator_user_id", "round"],
    )

    op.create_table(
        "tournament_year_demand",
        *_record_columns("tournament_year_demand_id"),
        _tournament_fk(),
        sa.Column("user_id", sa.BigInteger, nullable=False),
        sa.Column("round", sa.Integer, nullable=False),
        sa.Column("demand", sa.BigInteger, nullable=False),
    )
    op.create_index(
        "ix_tournament_year_demand_key", "tournament_year_demand",
        ["tournament_id", "user_id", "round"],
    )


def downgrade() -> None:
    op.drop_table("tournament_year_demand")
    op.drop_table("tournament_submission")
    op.drop_table("tournament_membership")
    op.drop_table("tournament_year")
    op.drop_table("tournament_data")
    op.drop_table("tournament")
