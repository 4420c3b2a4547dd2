"""TournamentYear ORM - the round a tournament is on.

Invariants:
    - Current version = highest tournament_year_id per tournament_id
    - current_round starts at 0 and grows by exactly 1 per advance
"""

from sqlalchemy import BigInteger, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from minigame.db.base import Base, RecordId


class TournamentYear(Base):
    __tablename__ = "tournament_year"

    tournament_year_id: Mapped[int] = mapped_column(
        RecordId, primary_key=True, autoincrement=True,
    )
    creation_time: Mapped[int] = mapped_column(BigInteger, nullable=False)
    creator_user_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    tournament_id: Mapped[int] = mapped_column(
        RecordId, ForeignKey("tournament.tournament_id"), nullable=False, index=True,
    )
    current_round: Mapped[int] = mapped_column(Integer, nullable=False)
