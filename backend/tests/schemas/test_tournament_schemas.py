"""Tournament Schemas - tests for camelCase wire models and view filters.

Tests cover:
    - requests accept camelCase and snake_case
    - view props translate to RecordFilter with the entity-specific fields
    - responses dump camelCase by alias
    - titles are stripped on create and revise; blank titles rejected
    - client integers are bounded to their column width
"""

import pytest
from pydantic import ValidationError

from minigame.schemas.tournament import (
    TournamentDataNewProps,
    TournamentDataViewProps,
    TournamentNewProps,
    TournamentResponse,
    TournamentSubmissionNewProps,
    TournamentSubmissionViewProps,
    TournamentYearDemandViewProps,
    TournamentYearNewProps,
    TournamentYearViewProps,
)


def test_new_props_accepts_both_casings():
    camel = TournamentNewProps.model_validate({
        "apiKey": "k", "title": " Cup ", "maxRounds": 4, "incentiveStartRound": 2,
    })
    snake = TournamentNewProps(
        api_key="k", title="Cup", max_rounds=4, incentive_start_round=2,
    )
    assert camel == snake
    assert camel.title == "Cup"
    assert camel.baseline_demand == 0
    assert camel.incentive_magnitude == 0


def test_new_props_rejects_blank_title():
    with pytest.raises(ValidationError):
        TournamentNewProps(
            api_key="k", title="  ", max_rounds=4, incentive_start_round=2,
        )


def test_data_view_to_filter():
    props = TournamentDataViewProps.model_validate({
        "tournamentDataId": [1, 2],
        "minCreationTime": 10,
        "maxCreationTime": 20,
        "creatorUserId": [7],
        "tournamentId": [3],
        "active": False,
        "onlyRecent": True,
    })
    f = props.to_record_filter()
    assert list(f.ids) == [1, 2]
    assert (f.min_creation_time, f.max_creation_time) == (10, 20)
    assert list(f.creator_user_ids) == [7]
    assert list(f.tournament_ids) == [3]
    assert f.flag is False
    assert f.only_current is True
    assert f.user_ids is None


def test_submission_view_flag_is_autogenerated():
    f = TournamentSubmissionViewProps(autogenerated=True).to_record_filter()
    assert f.flag is True


def test_demand_view_user_filter():
    f = TournamentYearDemandViewProps(user_id=[5]).to_record_filter()
    assert list(f.user_ids) == [5]
    assert f.flag is None


def test_empty_view_is_unconstrained():
    f = TournamentYearViewProps().to_record_filter()
    assert f.ids is None
    assert f.tournament_ids is None
    assert f.only_current is False


def test_response_dumps_camel_case():
    dumped = TournamentResponse(
        tournament_id=1, creation_time=2, creator_user_id=3, max_rounds=4,
        incentive_start_round=2, baseline_demand=0, incentive_magnitude=0,
    ).model_dump(by_alias=True)
    assert dumped["tournamentId"] == 1
    assert dumped["incentiveStartRound"] == 2


# ─── blank titles / integer ranges ───────────────────────────────

def test_revise_props_strip_and_reject_blank_title():
    props = TournamentDataNewProps(
        api_key="k", tournament_id=1, title="  Renamed ", active=True,
    )
    assert props.title == "Renamed"
    with pytest.raises(ValidationError):
        TournamentDataNewProps(api_key="k", tournament_id=1, title="   ", active=True)


def test_amount_beyond_64_bits_rejected():
    with pytest.raises(ValidationError):
        TournamentSubmissionNewProps(api_key="k", tournament_id=1, amount=2**70)
    with pytest.raises(ValidationError):
        TournamentSubmissionNewProps(api_key="k", tournament_id=1, amount=2**63)
    props = TournamentSubmissionNewProps(
        api_key="k", tournament_id=1, amount=-(2**63),
    )
    assert props.amount == -(2**63)


def test_tournament_id_beyond_64_bits_rejected():
    with pytest.raises(ValidationError):
        TournamentYearNewProps(api_key="k", tournament_id=2**64)
    with pytest.raises(ValidationError):
        TournamentYearDemandViewProps(tournament_id=[1, 2**64])


def test_rounds_limited_to_32_bits():
    with pytest.raises(ValidationError):
        TournamentNewProps(
            api_key="k", title="Cup", max_rounds=2**31, incentive_start_round=2,
        )


def test_demand_terms_leave_room_for_their_sum():
    top = 2**62 - 1
    props = TournamentNewProps(
        api_key="k", title="Cup", max_rounds=4, incentive_start_round=2,
        baseline_demand=top, incentive_magnitude=top,
    )
    assert props.baseline_demand + props.incentive_magnitude <= 2**63 - 1
    with pytest.raises(ValidationError):
        TournamentNewProps(
            api_key="k", title="Cup", max_rounds=4, incentive_start_round=2,
            baseline_demand=2**62,
        )
    with pytest.raises(ValidationError):
        TournamentNewProps(
            api_key="k", title="Cup", max_rounds=4, incentive_start_round=2,
            incentive_magnitude=-(2**62) - 1,
        )


def test_view_ignores_api_key():
    props = TournamentDataViewProps.model_validate({"apiKey": "k", "onlyRecent": True})
    assert not hasattr(props, "api_key")
    assert props.to_record_filter().only_current is True
