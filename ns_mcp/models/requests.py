"""Request models (Pydantic *Params classes) for the NS MCP tools.

Each model is the validated, typed view of one tool's argument bag. Field
aliases carry the camelCase names used on the wire by MCP clients; the
serialization names are the query parameter names the NS API expects.
Primitive types are strict: "true" is not a boolean and 40.0 is not an int.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, model_validator

from .enums import DisruptionType, Language, TravelClass, TravelType

MaxJourneys = Annotated[int, Field(strict=True, ge=1, le=100)]
StationLimit = Annotated[int, Field(strict=True, ge=1, le=50)]
AdultCount = Annotated[int, Field(strict=True, ge=1)]
ChildCount = Annotated[int, Field(strict=True, ge=0)]


class NSParams(BaseModel):
    """Base class for tool arguments that are forwarded as query parameters."""

    model_config = ConfigDict(extra="ignore")

    def to_query_params(self) -> dict[str, Any]:
        """Return the upstream query parameters, omitting absent fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ============ CORE REQUEST MODELS ============


class ToolCallParams(BaseModel):
    """Params of an MCP ``tools/call`` request."""

    name: StrictStr = Field(..., description="Name of the tool to invoke")
    # Left untyped on purpose: the tool's own validator decides what is valid
    arguments: Any = Field(default=None, description="Raw argument bag")


# ============ NS TOOL PARAMS ============


class DisruptionsParams(NSParams):
    """Parameters for get_disruptions tool."""

    is_active: StrictBool | None = Field(default=None, alias="isActive")
    type: DisruptionType | None = Field(default=None)


class TravelAdviceParams(NSParams):
    """Parameters for get_travel_advice tool."""

    from_station: StrictStr = Field(..., alias="fromStation")
    to_station: StrictStr = Field(..., alias="toStation")
    date_time: StrictStr | None = Field(default=None, alias="dateTime")
    search_for_arrival: StrictBool | None = Field(default=None, alias="searchForArrival")


class StationBoardParams(NSParams):
    """Shared parameters for the departures and arrivals boards.

    At least one of ``station`` and ``uicCode`` is required. When both are
    given the NS station code wins and the UIC code is not forwarded.
    """

    station: StrictStr | None = Field(default=None)
    uic_code: StrictStr | None = Field(default=None, alias="uicCode")
    date_time: StrictStr | None = Field(default=None, alias="dateTime")
    max_journeys: MaxJourneys | None = Field(default=None, alias="maxJourneys")
    lang: Language | None = Field(default=None)

    @model_validator(mode="after")
    def _require_station_or_uic_code(self) -> "StationBoardParams":
        if self.station is None and self.uic_code is None:
            raise ValueError("either station or uicCode is required")
        return self

    def to_query_params(self) -> dict[str, Any]:
        params = super().to_query_params()
        if self.station is not None:
            params.pop("uicCode", None)
        return params


class DeparturesParams(StationBoardParams):
    """Parameters for get_departures tool."""


class ArrivalsParams(StationBoardParams):
    """Parameters for get_arrivals tool."""


class OVFietsParams(NSParams):
    """Parameters for get_ovfiets tool."""

    # The places API names this parameter station_code
    station_code: StrictStr = Field(..., validation_alias="stationCode")


class StationInfoParams(NSParams):
    """Parameters for get_station_info tool."""

    query: StrictStr = Field(..., serialization_alias="q")
    include_non_plannable_stations: StrictBool = Field(
        default=False, alias="includeNonPlannableStations"
    )
    limit: StationLimit = Field(default=10)


class PricesParams(NSParams):
    """Parameters for get_prices tool."""

    from_station: StrictStr = Field(..., alias="fromStation")
    to_station: StrictStr = Field(..., alias="toStation")
    travel_class: TravelClass | None = Field(default=None, alias="travelClass")
    travel_type: TravelType | None = Field(default=None, alias="travelType")
    is_joint_journey: StrictBool | None = Field(default=None, alias="isJointJourney")
    adults: AdultCount | None = Field(default=None)
    children: ChildCount | None = Field(default=None)
    route_id: StrictStr | None = Field(default=None, alias="routeId")
    planned_departure_time: StrictStr | None = Field(default=None, alias="plannedDepartureTime")
    planned_arrival_time: StrictStr | None = Field(default=None, alias="plannedArrivalTime")
