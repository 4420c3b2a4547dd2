"""TournamentMembership ORM - versioned (tournament, user) membership.

Invariants:
    - creator_user_id is the member
    - Current version = highest tournament_membership_id per (tournament_id, creator_user_id)
"""

from sqlalchemy import BigInteger, Boolean, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column

from minigame.db.base import Base, RecordId


class TournamentMembership(Base):
    __tablename__ = "tournament_membership"
    __table_args__ = (
        Index(
            "ix_tournament_membership_key", "tournament_id", "creator_user_id",
        ),
    )

    tournament_membership_id: Mapped[int] = mapped_column(
        RecordId, primary_key=True, autoincrement=True,
    )
    creation_time: Mapped[int] = mapped_column(BigInteger, nullable=False)
    creator_user_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    tournament_id: Mapped[int] = mapped_column(
        RecordId, ForeignKey("tournament.tournament_id"), nullable=False,
    )
    active: Mapped[bool] = mapped_column(Boolean, nullable=False)
