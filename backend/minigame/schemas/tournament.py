"""Tournament Schemas - Pydantic request/response models for the public API.

Invariants:
    - Every model serializes camelCase (alias_generator) and accepts snake_case too
    - Every integer a client sends fits its column: 64-bit ids/amounts/times,
      32-bit rounds; out-of-range values fail validation (400), never reach SQL
    - baseline_demand and incentive_magnitude are bounded to 62 bits, so
      baseline + incentive always fits a 64-bit demand
    - Titles are stripped; a blank title fails validation
    - Business validation (max_rounds, incentive_start_round) is NOT done here:
      those failures carry their own error codes raised by the core

Design Decisions:
    - View props expose to_record_filter(): the route stays a one-liner and the
      store never sees HTTP field names
    - Unknown fields are ignored, so clients may keep sending apiKey to /view
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from minigame.core.record_filter import RecordFilter

Int64 = Annotated[int, Field(ge=-(2**63), le=2**63 - 1)]
Int32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]
DemandTerm = Annotated[int, Field(ge=-(2**62), le=2**62 - 1)]


class CamelModel(BaseModel):
    """Base for all wire models: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


# --- Mutation requests --------------------------------------------------------

class _TitledProps(CamelModel):
    api_key: str
    title: str = Field(min_length=1, max_length=500)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class TournamentNewProps(_TitledProps):
    max_rounds: Int32
    incentive_start_round: Int32
    baseline_demand: DemandTerm = 0
    incentive_magnitude: DemandTerm = 0


class TournamentDataNewProps(_TitledProps):
    tournament_id: Int64
    active: bool


class TournamentYearNewProps(CamelModel):
    api_key: str
    tournament_id: Int64


class TournamentMembershipNewProps(CamelModel):
    api_key: str
    tournament_id: Int64
    active: bool = True


class TournamentSubmissionNewProps(CamelModel):
    api_key: str
    tournament_id: Int64
    amount: Int64


# --- View requests ------------------------------------------------------------

class _ViewProps(CamelModel):
    """Filter fields common to every entity."""
    min_creation_time: Int64 | None = None
    max_creation_time: Int64 | None = None
    creator_user_id: list[Int64] | None = None
    tournament_id: list[Int64] | None = None
    only_recent: bool = False

    def _base_filter(self, ids: list[int] | None) -> RecordFilter:
        return RecordFilter(
            ids=ids,
            min_creation_time=self.min_creation_time,
            max_creation_time=self.max_creation_time,
            creator_user_ids=self.creator_user_id,
            tournament_ids=self.tournament_id,
            only_current=self.only_recent,
        )


class TournamentDataViewProps(_ViewProps):
    tournament_data_id: list[Int64] | None = None
    active: bool | None = None

    def to_record_filter(self) -> RecordFilter:
        record_filter = self._base_filter(self.tournament_data_id)
        record_filter.flag = self.active
        return record_filter


class TournamentMembershipViewProps(_ViewProps):
    tournament_membership_id: list[Int64] | None = None
    active: bool | None = None

    def to_record_filter(self) -> RecordFilter:
        record_filter = self._base_filter(self.tournament_membership_id)
        record_filter.flag = self.active
        return record_filter


class TournamentSubmissionViewProps(_ViewProps):
    tournament_submission_id: list[Int64] | None = None
    autogenerated: bool | None = None

    def to_record_filter(self) -> RecordFilter:
        record_filter = self._base_filter(self.tournament_submission_id)
        record_filter.flag = self.autogenerated
        return record_filter


class TournamentYearViewProps(_ViewProps):
    tournament_year_id: list[Int64] | None = None

    def to_record_filter(self) -> RecordFilter:
        return self._base_filter(self.tournament_year_id)


class TournamentYearDemandViewProps(_ViewProps):
    tournament_year_demand_id: list[Int64] | None = None
    user_id: list[Int64] | None = None

    def to_record_filter(self) -> RecordFilter:
        record_filter = self._base_filter(self.tournament_year_demand_id)
        record_filter.user_ids = self.user_id
        return record_filter


# --- Responses ----------------------------------------------------------------

class TournamentResponse(CamelModel):
    tournament_id: int
    creation_time: int
    creator_user_id: int
    max_rounds: int
    incentive_start_round: int
    baseline_demand: int
    incentive_magnitude: int


class TournamentDataResponse(CamelModel):
    tournament_data_id: int
    creation_time: int
    creator_user_id: int
    tournament: TournamentResponse
    title: str
    active: bool


class TournamentYearResponse(CamelModel):
    tournament_year_id: int
    creation_time: int
    creator_user_id: int
    tournament: TournamentResponse
    current_round: int


class TournamentMembershipResponse(CamelModel):
    tournament_membership_id: int
    creation_time: int
    creator_user_id: int
    tournament: TournamentResponse
    active: bool


class TournamentSubmissionResponse(CamelModel):
    tournament_submission_id: int
    creation_time: int
    creator_user_id: int
    tournament: TournamentResponse
    round: int
    amount: int
    autogenerated: bool


class TournamentYearDemandResponse(CamelModel):
    tournament_year_demand_id: int
    creation_time: int
    creator_user_id: int
    user_id: int
    tournament: TournamentResponse
    round: int
    demand: int


class InfoResponse(CamelModel):
    service: str
    version_major: int
    version_minor: int
    version_rev: int
    site_external_url: str
