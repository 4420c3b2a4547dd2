"""Tournament ORM - immutable creation-time parameters.

Invariants:
    - Inserted exactly once by CreateTournament, never versioned
    - max_rounds > 1 and 1 < incentive_start_round < max_rounds (checked before insert)

Design Decisions:
    - baseline_demand / incentive_magnitude default to 0: a tournament without
      them produces a flat zero demand
"""

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import Mapped, mapped_column

from minigame.db.base import Base, RecordId


class Tournament(Base):
    """Tournament entity - the parameters a creator defines once."""
    __tablename__ = "tournament"

    tournament_id: Mapped[int] = mapped_column(
        RecordId, primary_key=True, autoincrement=True,
    )
    creation_time: Mapped[int] = mapped_column(BigInteger, nullable=False)
    creator_user_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    max_rounds: Mapped[int] = mapped_column(Integer, nullable=False)
    incentive_start_round: Mapped[int] = mapped_column(Integer, nullable=False)
    baseline_demand: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0,
    )
    incentive_magnitude: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0,
    )
