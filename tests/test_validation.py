"""Tests for tool argument validators."""

import pytest

from ns_mcp.mcp.validation import (
    is_valid_arrivals_args,
    is_valid_departures_args,
    is_valid_disruptions_args,
    is_valid_ovfiets_args,
    is_valid_prices_args,
    is_valid_station_info_args,
    is_valid_travel_advice_args,
    validate_args,
)
from ns_mcp.models.enums import DisruptionType, Language
from ns_mcp.models.requests import (
    DeparturesParams,
    DisruptionsParams,
    OVFietsParams,
    PricesParams,
    StationInfoParams,
)

# Minimal valid argument bags and the fields each one requires
MINIMAL_ARGS = [
    (is_valid_disruptions_args, {}, []),
    (is_valid_travel_advice_args, {"fromStation": "UT", "toStation": "ASD"}, ["fromStation", "toStation"]),
    (is_valid_departures_args, {"station": "ASD"}, ["station"]),
    (is_valid_arrivals_args, {"uicCode": "8400058"}, ["uicCode"]),
    (is_valid_ovfiets_args, {"stationCode": "ASD"}, ["stationCode"]),
    (is_valid_station_info_args, {"query": "Utrecht"}, ["query"]),
    (is_valid_prices_args, {"fromStation": "UT", "toStation": "ASD"}, ["fromStation", "toStation"]),
]


@pytest.mark.parametrize("validator,args,required", MINIMAL_ARGS)
def test_minimal_arguments_are_accepted(validator, args, required):
    assert validator(args) is True


@pytest.mark.parametrize("validator,args,required", MINIMAL_ARGS)
def test_removing_a_required_field_is_rejected(validator, args, required):
    for field in required:
        reduced = {k: v for k, v in args.items() if k != field}
        assert validator(reduced) is False, f"{field} should be required"


@pytest.mark.parametrize("validator,args,required", MINIMAL_ARGS)
def test_non_mapping_argument_bags_are_rejected(validator, args, required):
    assert validator(["not", "a", "mapping"]) is False
    assert validator("ASD") is False


class TestDisruptions:
    def test_filters_are_typed(self):
        params = validate_args(DisruptionsParams, {"isActive": True, "type": "MAINTENANCE"})
        assert params is not None
        assert params.is_active is True
        assert params.type is DisruptionType.MAINTENANCE

    def test_string_boolean_is_rejected(self):
        assert is_valid_disruptions_args({"isActive": "true"}) is False

    def test_unknown_type_is_rejected(self):
        assert is_valid_disruptions_args({"type": "STRIKE"}) is False

    def test_unknown_keys_are_ignored(self):
        assert is_valid_disruptions_args({"isActive": False, "verbose": 1}) is True


class TestStationBoards:
    @pytest.mark.parametrize("validator", [is_valid_departures_args, is_valid_arrivals_args])
    def test_station_or_uic_code_is_required(self, validator):
        assert validator({"station": "ASD"}) is True
        assert validator({"uicCode": "8400058"}) is True
        assert validator({}) is False
        assert validator({"lang": "en"}) is False

    @pytest.mark.parametrize("validator", [is_valid_departures_args, is_valid_arrivals_args])
    def test_both_station_and_uic_code_are_accepted(self, validator):
        assert validator({"station": "ASD", "uicCode": "8400058"}) is True

    def test_station_code_wins_over_uic_code(self):
        params = validate_args(DeparturesParams, {"station": "ASD", "uicCode": "8400058"})
        assert params.to_query_params() == {"station": "ASD"}

    def test_uic_code_is_forwarded_alone(self):
        params = validate_args(DeparturesParams, {"uicCode": "8400058", "maxJourneys": 5})
        assert params.to_query_params() == {"uicCode": "8400058", "maxJourneys": 5}

    @pytest.mark.parametrize("max_journeys", [0, 101, "10", 10.5, True])
    def test_max_journeys_must_be_an_int_in_range(self, max_journeys):
        assert is_valid_departures_args({"station": "ASD", "maxJourneys": max_journeys}) is False

    def test_max_journeys_bounds_are_inclusive(self):
        assert is_valid_departures_args({"station": "ASD", "maxJourneys": 1}) is True
        assert is_valid_arrivals_args({"station": "ASD", "maxJourneys": 100}) is True

    def test_language_enum(self):
        params = validate_args(DeparturesParams, {"station": "ASD", "lang": "en"})
        assert params.lang is Language.EN
        assert is_valid_departures_args({"station": "ASD", "lang": "de"}) is False

    def test_station_must_be_a_string(self):
        assert is_valid_arrivals_args({"station": 8400058}) is False


class TestOVFiets:
    def test_station_code_is_sent_as_station_code(self):
        params = validate_args(OVFietsParams, {"stationCode": "ASD"})
        assert params.to_query_params() == {"station_code": "ASD"}

    def test_snake_case_key_is_not_accepted(self):
        assert is_valid_ovfiets_args({"station_code": "ASD"}) is False


class TestStationInfo:
    def test_defaults_are_always_sent(self):
        params = validate_args(StationInfoParams, {"query": "Utrecht"})
        assert params.to_query_params() == {
            "q": "Utrecht",
            "includeNonPlannableStations": False,
            "limit": 10,
        }

    @pytest.mark.parametrize("limit", [0, 51, "5"])
    def test_limit_bounds(self, limit):
        assert is_valid_station_info_args({"query": "Utrecht", "limit": limit}) is False

    def test_include_non_plannable_must_be_boolean(self):
        assert is_valid_station_info_args({"query": "Utrecht", "includeNonPlannableStations": 1}) is False


class TestPrices:
    def test_adults_must_be_at_least_one(self):
        base = {"fromStation": "UT", "toStation": "ASD"}
        assert is_valid_prices_args({**base, "adults": 0}) is False
        assert is_valid_prices_args({**base, "adults": 1}) is True

    def test_children_cannot_be_negative(self):
        base = {"fromStation": "UT", "toStation": "ASD"}
        assert is_valid_prices_args({**base, "children": -1}) is False
        assert is_valid_prices_args({**base, "children": 0}) is True

    def test_enums(self):
        base = {"fromStation": "UT", "toStation": "ASD"}
        assert is_valid_prices_args({**base, "travelClass": "FIRST_CLASS", "travelType": "return"}) is True
        assert is_valid_prices_args({**base, "travelClass": "BUSINESS"}) is False
        assert is_valid_prices_args({**base, "travelType": "roundtrip"}) is False

    def test_only_provided_fields_are_forwarded(self):
        params = validate_args(
            PricesParams,
            {"fromStation": "UT", "toStation": "ASD", "isJointJourney": True, "adults": 2},
        )
        assert params.to_query_params() == {
            "fromStation": "UT",
            "toStation": "ASD",
            "isJointJourney": True,
            "adults": 2,
        }
