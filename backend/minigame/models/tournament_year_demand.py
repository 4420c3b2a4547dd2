"""TournamentYearDemand ORM - computed target value per member per round.

Invariants:
    - Never supplied by a caller; inserted by JoinTournament (round 0) and AdvanceYear
    - user_id is the member the demand is for; creator_user_id is who triggered it
    - Current version = highest id per (tournament_id, user_id, round)
"""

from sqlalchemy import BigInteger, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column

from minigame.db.base import Base, RecordId


class TournamentYearDemand(Base):
    __tablename__ = "tournament_year_demand"
    __table_args__ = (
        Index(
            "ix_tournament_year_demand_key", "tournament_id", "user_id", "round",
        ),
    )

    tournament_year_demand_id: Mapped[int] = mapped_column(
        RecordId, primary_key=True, autoincrement=True,
    )
    creation_time: Mapped[int] = mapped_column(BigInteger, nullable=False)
    creator_user_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    tournament_id: Mapped[int] = mapped_column(
        RecordId, ForeignKey("tournament.tournament_id"), nullable=False,
    )
    user_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    round: Mapped[int] = mapped_column(Integer, nullable=False)
    demand: Mapped[int] = mapped_column(BigInteger, nullable=False)
