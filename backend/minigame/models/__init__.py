"""ORM Models - one append-only table per tournament entity.

Invariants:
    - All models inherit from Base (db/base.py)
    - Rows are inserted, never updated or deleted
    - Tournament is the aggregate root; every other row carries tournament_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all / alembic
"""

from minigame.models.tournament import Tournament  # noqa: F401
from minigame.models.tournament_data import TournamentData  # noqa: F401
from minigame.models.tournament_year import TournamentYear  # noqa: F401
from minigame.models.tournament_membership import TournamentMembership  # noqa: F401
from minigame.models.tournament_submission import TournamentSubmission  # noqa: F401
from minigame.models.tournament_year_demand import TournamentYearDemand  # noqa: F401
