"""Tournament Lifecycle Coordinator - atomic multi-entity transitions over the versioned store.

Invariants:
    - Every operation is one unit of work: one session, one transaction; all of
      its appends commit together or none do
    - Mutating operations on an existing tournament hold that tournament's lock
      and read its row FOR UPDATE before validating anything
    - Validation failures raise before the first append
    - AdvanceYear: every active member ends the elapsed round with a submission,
      the round grows by exactly 1, every active member gets one demand for the new round
    - Returned objects are "filled": they embed their Tournament

Design Decisions:
    - Unit of work opens its own session from the session manager: a caller
      cannot leak an open transaction into an operation
    - Storage faults are mapped to DatabaseError by DatabaseSessionManager.session()
"""

import logging
import random
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from minigame.core.enforce_lifecycle import (
    active_member_ids,
    check_can_advance,
    check_can_join,
    check_can_submit,
    check_owner,
    missing_submitters,
    validate_tournament_params,
)
from minigame.core.incentive import RandomSource, compute_demand
from minigame.core.record_filter import RecordFilter
from minigame.infrastructure.database import DatabaseSessionManager
from minigame.models import (
    Tournament,
    TournamentData,
    TournamentMembership,
    TournamentSubmission,
    TournamentYear,
    TournamentYearDemand,
)
from minigame.schemas.tournament import (
    TournamentDataResponse,
    TournamentMembershipResponse,
    TournamentSubmissionResponse,
    TournamentYearDemandResponse,
    TournamentYearResponse,
)
from minigame.services.fill_records import RecordFiller
from minigame.services.tournament_locks import TournamentLocks, tournament_locks
from minigame.services.tournament_registry import TournamentRegistry
from minigame.services.versioned_store import VersionedEntityStore

logger = logging.getLogger(__name__)


class TournamentLifecycleCoordinator:
    """Create, revise, advance, join, submit and query tournaments."""

    def __init__(
        self,
        db_manager: DatabaseSessionManager,
        locks: TournamentLocks = tournament_locks,
        rng: RandomSource = random,
    ):
        self._db_manager = db_manager
        self._locks = locks
        self._rng = rng

    @asynccontextmanager
    async def _unit_of_work(
        self, tournament_id: int | None = None,
    ) -> AsyncIterator[TournamentRegistry]:
        """Lock (if a tournament is given), open a session, run in one transaction."""
        async with self._locks.hold(tournament_id):
            async with self._db_manager.session() as db:
                async with db.begin():
                    yield TournamentRegistry(VersionedEntityStore(db))

    # ─── Mutations ───────────────────────────────────────────────

    async def create_tournament(
        self,
        creator_id: int,
        title: str,
        max_rounds: int,
        incentive_start_round: int,
        baseline_demand: int = 0,
        incentive_magnitude: int = 0,
    ) -> TournamentDataResponse:
        """Tournament + first TournamentData (active) + TournamentYear at round 0."""
        validate_tournament_params(max_rounds, incentive_start_round)

        async with self._unit_of_work() as registry:
            store = registry.store
            tournament = await store.append(
                Tournament, (), creator_id,
                max_rounds=max_rounds,
                incentive_start_round=incentive_start_round,
                baseline_demand=baseline_demand,
                incentive_magnitude=incentive_magnitude,
            )
            data = await store.append(
                TournamentData, (tournament.tournament_id,), creator_id,
                title=title, active=True,
            )
            await store.append(
                TournamentYear, (tournament.tournament_id,), creator_id,
                current_round=0,
            )
            filled = await RecordFiller(registry).tournament_data(data)

        logger.info(
            "Tournament created",
            extra={"tournament_id": tournament.tournament_id, "user_id": creator_id},
        )
        return filled

    async def revise_tournament_data(
        self, creator_id: int, tournament_id: int, title: str, active: bool,
    ) -> TournamentDataResponse:
        """New title/active version; active=false archives, active=true restores."""
        async with self._unit_of_work(tournament_id) as registry:
            tournament = await registry.require_tournament(
                tournament_id, for_update=True,
            )
            check_owner(tournament, creator_id)
            data = await registry.store.append(
                TournamentData, (tournament_id,), creator_id,
                title=title, active=active,
            )
            filled = await RecordFiller(registry).tournament_data(data)

        logger.info(
            f"Tournament data revised (active={active})",
            extra={"tournament_id": tournament_id, "user_id": creator_id},
        )
        return filled

    async def advance_year(
        self, creator_id: int, tournament_id: int,
    ) -> TournamentYearResponse:
        """Close the current round and open the next one."""
        async with self._unit_of_work(tournament_id) as registry:
            store = registry.store
            tournament = await registry.require_tournament(
                tournament_id, for_update=True,
            )
            check_owner(tournament, creator_id)
            data = await registry.current_data(tournament_id)
            year = await registry.current_year(tournament_id)
            check_can_advance(tournament, data, year)

            elapsed_round = year.current_round
            members = active_member_ids(
                await store.list_all(TournamentMembership, tournament_id),
            )
            submissions = await store.query(
                TournamentSubmission, RecordFilter(tournament_ids=[tournament_id]),
            )
            for user_id in missing_submitters(members, submissions, elapsed_round):
                await store.append(
                    TournamentSubmission,
                    (tournament_id, user_id, elapsed_round), user_id,
                    amount=0, autogenerated=True,
                )

            new_year = await store.append(
                TournamentYear, (tournament_id,), creator_id,
                current_round=elapsed_round + 1,
            )
            for user_id in members:
                await store.append(
                    TournamentYearDemand,
                    (tournament_id, user_id, new_year.current_round), creator_id,
                    demand=compute_demand(
                        tournament.baseline_demand,
                        tournament.incentive_magnitude,
                        new_year.current_round,
                        tournament.incentive_start_round,
                        self._rng,
                    ),
                )
            filled = await RecordFiller(registry).tournament_year(new_year)

        logger.info(
            f"Tournament advanced to round {new_year.current_round}",
            extra={
                "tournament_id": tournament_id,
                "user_id": creator_id,
                "round_number": new_year.current_round,
            },
        )
        return filled

    async def join_tournament(
        self, user_id: int, tournament_id: int, active: bool = True,
    ) -> TournamentMembershipResponse:
        """Membership version plus the member's round-0 demand."""
        async with self._unit_of_work(tournament_id) as registry:
            store = registry.store
            tournament = await registry.require_tournament(
                tournament_id, for_update=True,
            )
            data = await registry.current_data(tournament_id)
            year = await registry.current_year(tournament_id)
            check_can_join(tournament, user_id, data, year)

            membership = await store.append(
                TournamentMembership, (tournament_id, user_id), user_id,
                active=active,
            )
            demand_key = (tournament_id, user_id, 0)
            # one demand per (tournament, member, round), also on re-join
            if await store.current(TournamentYearDemand, demand_key) is None:
                await store.append(
                    TournamentYearDemand, demand_key, user_id,
                    demand=compute_demand(
                        tournament.baseline_demand,
                        tournament.incentive_magnitude,
                        0,
                        tournament.incentive_start_round,
                        self._rng,
                    ),
                )
            filled = await RecordFiller(registry).tournament_membership(membership)

        logger.info(
            f"Tournament membership added (active={active})",
            extra={"tournament_id": tournament_id, "user_id": user_id},
        )
        return filled

    async def submit_value(
        self, user_id: int, tournament_id: int, amount: int,
    ) -> TournamentSubmissionResponse:
        """Manual submission for the tournament's current round."""
        async with self._unit_of_work(tournament_id) as registry:
            store = registry.store
            await registry.require_tournament(tournament_id, for_update=True)
            membership = await store.current(
                TournamentMembership, (tournament_id, user_id),
            )
            data = await registry.current_data(tournament_id)
            check_can_submit(membership, data)
            year = await registry.current_year(tournament_id)

            submission = await store.append(
                TournamentSubmission,
                (tournament_id, user_id, year.current_round), user_id,
                amount=amount, autogenerated=False,
            )
            filled = await RecordFiller(registry).tournament_submission(submission)

        logger.info(
            "Tournament submission added",
            extra={
                "tournament_id": tournament_id,
                "user_id": user_id,
                "round_number": year.current_round,
            },
        )
        return filled

    # ─── Queries ─────────────────────────────────────────────────

    async def view_tournament_data(
        self, props: RecordFilter,
    ) -> list[TournamentDataResponse]:
        async with self._unit_of_work() as registry:
            filler = RecordFiller(registry)
            rows = await registry.store.query(TournamentData, props)
            return [await filler.tournament_data(row) for row in rows]

    async def view_tournament_membership(
        self, props: RecordFilter,
    ) -> list[TournamentMembershipResponse]:
        async with self._unit_of_work() as registry:
            filler = RecordFiller(registry)
            rows = await registry.store.query(TournamentMembership, props)
            return [await filler.tournament_membership(row) for row in rows]

    async def view_tournament_submission(
        self, props: RecordFilter,
    ) -> list[TournamentSubmissionResponse]:
        async with self._unit_of_work() as registry:
            filler = RecordFiller(registry)
            rows = await registry.store.query(TournamentSubmission, props)
            return [await filler.tournament_submission(row) for row in rows]

    async def view_tournament_year(
        self, props: RecordFilter,
    ) -> list[TournamentYearResponse]:
        async with self._unit_of_work() as registry:
            filler = RecordFiller(registry)
            rows = await registry.store.query(TournamentYear, props)
            return [await filler.tournament_year(row) for row in rows]

    async def view_tournament_year_demand(
        self, props: RecordFilter,
    ) -> list[TournamentYearDemandResponse]:
        async with self._unit_of_work() as registry:
            filler = RecordFiller(registry)
            rows = await registry.store.query(TournamentYearDemand, props)
            return [await filler.tournament_year_demand(row) for row in rows]
