"""TournamentSubmission ORM - a member's value for one round.

Invariants:
    - creator_user_id is the member, also for autogenerated rows
    - autogenerated=true only for rows inserted by AdvanceYear's auto-fill
    - Current version = highest id per (tournament_id, creator_user_id, round)
"""

from sqlalchemy import BigInteger, Boolean, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column

from minigame.db.base import Base, RecordId


class TournamentSubmission(Base):
    __tablename__ = "tournament_submission"
    __table_args__ = (
        Index(
            "ix_tournament_submission_key",
            "tournament_id", "creator_user_id", "round",
        ),
    )

    tournament_submission_id: Mapped[int] = mapped_column(
        RecordId, primary_key=True, autoincrement=True,
    )
    creation_time: Mapped[int] = mapped_column(BigInteger, nullable=False)
    creator_user_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    tournament_id: Mapped[int] = mapped_column(
        RecordId, ForeignKey("tournament.tournament_id"), nullable=False,
    )
    round: Mapped[int] = mapped_column(Integer, nullable=False)
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    autogenerated: Mapped[bool] = mapped_column(Boolean, nullable=False)
