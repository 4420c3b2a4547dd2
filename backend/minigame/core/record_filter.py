"""Record Filter - the query shape shared by every append-only entity.

Invariants:
    - None means "unconstrained"; an empty sequence matches nothing
    - only_current selects the latest version per grouping key before other filters apply
"""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class RecordFilter:
    """Optional constraints for VersionedEntityStore.query()."""
    ids: Sequence[int] | None = None
    min_creation_time: int | None = None
    max_creation_time: int | None = None
    creator_user_ids: Sequence[int] | None = None
    tournament_ids: Sequence[int] | None = None
    user_ids: Sequence[int] | None = None
    flag: bool | None = None
    only_current: bool = False
