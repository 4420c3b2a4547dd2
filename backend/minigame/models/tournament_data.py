"""TournamentData ORM - versioned title and active flag.

Invariants:
    - Current version = highest tournament_data_id per tournament_id
    - active=false archives the tournament
"""

from sqlalchemy import BigInteger, Boolean, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column

from minigame.db.base import Base, RecordId


class TournamentData(Base):
    __tablename__ = "tournament_data"

    tournament_data_id: Mapped[int] = mapped_column(
        RecordId, primary_key=True, autoincrement=True,
    )
    creation_time: Mapped[int] = mapped_column(BigInteger, nullable=False)
    creator_user_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    tournament_id: Mapped[int] = mapped_column(
        RecordId, ForeignKey("tournament.tournament_id"), nullable=False, index=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False)
