"""Versioned Entity Store - append-only log with derived "current version" lookup.

Invariants:
    - Only INSERT is ever issued: no update, no delete
    - Identifier and creation_time are assigned here, never by callers
    - "Current" = row with the greatest identifier sharing a grouping key,
      recomputed from the log on every read
    - query() results are ordered by identifier ascending
    - With only_current, the latest-per-key projection is taken first and the
      remaining filters apply to it

Design Decisions:
    - One RecordSpec per model keeps grouping keys in a single visible table
      instead of relying on database views
    - append() flushes immediately so the returned row carries its identifier;
      the enclosing transaction decides whether it survives
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from minigame.core.record_filter import RecordFilter
from minigame.db.base import Base, now_millis
from minigame.models import (
    Tournament,
    TournamentData,
    TournamentMembership,
    TournamentSubmission,
    TournamentYear,
    TournamentYearDemand,
)

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Base)

ACTOR_COLUMN = "creator_user_id"


@dataclass(frozen=True)
class RecordSpec:
    """How one append-only table is keyed."""
    id_column: str
    grouping_key: tuple[str, ...]
    flag_column: str | None = None
    user_column: str | None = None

    @property
    def self_keyed(self) -> bool:
        """Grouping key is the identifier itself (one version per identity)."""
        return self.grouping_key == (self.id_column,)


RECORD_SPECS: dict[type[Base], RecordSpec] = {
    Tournament: RecordSpec(
        id_column="tournament_id",
        grouping_key=("tournament_id",),
    ),
    TournamentData: RecordSpec(
        id_column="tournament_data_id",
        grouping_key=("tournament_id",),
        flag_column="active",
    ),
    TournamentYear: RecordSpec(
        id_column="tournament_year_id",
        grouping_key=("tournament_id",),
    ),
    TournamentMembership: RecordSpec(
        id_column="tournament_membership_id",
        grouping_key=("tournament_id", "creator_user_id"),
        flag_column="active",
        user_column="creator_user_id",
    ),
    TournamentSubmission: RecordSpec(
        id_column="tournament_submission_id",
        grouping_key=("tournament_id", "creator_user_id", "round"),
        flag_column="autogenerated",
        user_column="creator_user_id",
    ),
    TournamentYearDemand: RecordSpec(
        id_column="tournament_year_demand_id",
        grouping_key=("tournament_id", "user_id", "round"),
        user_column="user_id",
    ),
}


def spec_for(model: type[Base]) -> RecordSpec:
    try:
        return RECORD_SPECS[model]
    except KeyError:
        raise ValueError(f"{model.__name__} is not a versioned entity") from None


class VersionedEntityStore:
    """Append-only access to every tournament table through one AsyncSession."""

    def __init__(self, db: AsyncSession, clock: Callable[[], int] = now_millis):
        self.db = db
        self._clock = clock

    async def append(
        self, model: type[R], key: tuple, actor: int, **payload: Any,
    ) -> R:
        """Insert a new version for `key`, recording `actor` as creator."""
        spec = spec_for(model)
        fields: dict[str, Any] = {}
        if spec.self_keyed:
            if key:
                raise ValueError(
                    f"{model.__name__} identity is assigned by the store",
                )
        else:
            if len(key) != len(spec.grouping_key):
                raise ValueError(
                    f"{model.__name__} key needs {spec.grouping_key}, got {key!r}",
                )
            fields.update(zip(spec.grouping_key, key))
        if fields.get(ACTOR_COLUMN, actor) != actor:
            raise ValueError(
                f"{model.__name__} key user {fields[ACTOR_COLUMN]} != actor {actor}",
            )
        fields[ACTOR_COLUMN] = actor
        fields["creation_time"] = self._clock()
        fields.update(payload)

        record = model(**fields)
        self.db.add(record)
        await self.db.flush()
        logger.debug(
            f"Appended {model.__tablename__} {getattr(record, spec.id_column)}",
        )
        return record

    async def current(
        self, model: type[R], key: tuple, *, for_update: bool = False,
    ) -> R | None:
        """Highest-identifier record for `key`, or None."""
        spec = spec_for(model)
        if len(key) != len(spec.grouping_key):
            raise ValueError(
                f"{model.__name__} key needs {spec.grouping_key}, got {key!r}",
            )
        id_col = getattr(model, spec.id_column)
        stmt = select(model).where(
            *[
                getattr(model, column) == value
                for column, value in zip(spec.grouping_key, key)
            ],
        ).order_by(id_col.desc()).limit(1)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(
        self, model: type[R], tournament_id: int | None = None,
    ) -> list[R]:
        """Every version, ordered by grouping key then identifier."""
        spec = spec_for(model)
        stmt = select(model)
        if tournament_id is not None:
            stmt = stmt.where(model.tournament_id == tournament_id)
        stmt = stmt.order_by(
            *[getattr(model, column) for column in spec.grouping_key],
            getattr(model, spec.id_column),
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def query(self, model: type[R], props: RecordFilter) -> list[R]:
        """Filtered records ordered by identifier ascending."""
        spec = spec_for(model)
        id_col = getattr(model, spec.id_column)
        stmt = select(model)

        if props.only_current:
            latest_ids = select(func.max(id_col)).group_by(
                *[getattr(model, column) for column in spec.grouping_key],
            )
            stmt = stmt.where(id_col.in_(latest_ids))
        if props.ids is not None:
            stmt = stmt.where(id_col.in_(props.ids))
        if props.min_creation_time is not None:
            stmt = stmt.where(model.creation_time >= props.min_creation_time)
        if props.max_creation_time is not None:
            stmt = stmt.where(model.creation_time <= props.max_creation_time)
        if props.creator_user_ids is not None:
            stmt = stmt.where(model.creator_user_id.in_(props.creator_user_ids))
        if props.tournament_ids is not None:
            stmt = stmt.where(model.tournament_id.in_(props.tournament_ids))
        if props.user_ids is not None:
            if spec.user_column is None:
                raise ValueError(f"{model.__name__} is not keyed by user")
            stmt = stmt.where(
                getattr(model, spec.user_column).in_(props.user_ids),
            )
        if props.flag is not None:
            if spec.flag_column is None:
                raise ValueError(f"{model.__name__} has no boolean flag")
            stmt = stmt.where(getattr(model, spec.flag_column) == props.flag)

        result = await self.db.execute(stmt.order_by(id_col))
        return list(result.scalars().all())
