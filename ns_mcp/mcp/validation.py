"""Argument validation for MCP tool calls.

Each tool has a pydantic model describing its input contract. Validation
either produces the narrowed, typed model instance or ``None``; it never
builds error messages. The dispatcher turns a ``None`` into a uniform
"Invalid arguments for <tool>" error.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..models.enums import ToolName
from ..models.requests import (
    ArrivalsParams,
    DeparturesParams,
    DisruptionsParams,
    OVFietsParams,
    PricesParams,
    StationInfoParams,
    TravelAdviceParams,
)

ParamsT = TypeVar("ParamsT", bound=BaseModel)

# Tools whose arguments are forwarded upstream, keyed by tool name
TOOL_PARAMS: dict[ToolName, type[BaseModel]] = {
    ToolName.GET_DISRUPTIONS: DisruptionsParams,
    ToolName.GET_TRAVEL_ADVICE: TravelAdviceParams,
    ToolName.GET_DEPARTURES: DeparturesParams,
    ToolName.GET_ARRIVALS: ArrivalsParams,
    ToolName.GET_OVFIETS: OVFietsParams,
    ToolName.GET_STATION_INFO: StationInfoParams,
    ToolName.GET_PRICES: PricesParams,
}


def validate_args(model: type[ParamsT], raw: Any) -> ParamsT | None:
    """Return the typed view of ``raw`` or ``None`` if it breaks the contract."""
    if raw is None:
        raw = {}
    try:
        return model.model_validate(raw)
    except ValidationError:
        return None


def is_valid_disruptions_args(raw: Any) -> bool:
    return validate_args(DisruptionsParams, raw) is not None


def is_valid_travel_advice_args(raw: Any) -> bool:
    return validate_args(TravelAdviceParams, raw) is not None


def is_valid_departures_args(raw: Any) -> bool:
    return validate_args(DeparturesParams, raw) is not None


def is_valid_arrivals_args(raw: Any) -> bool:
    return validate_args(ArrivalsParams, raw) is not None


def is_valid_ovfiets_args(raw: Any) -> bool:
    return validate_args(OVFietsParams, raw) is not None


def is_valid_station_info_args(raw: Any) -> bool:
    return validate_args(StationInfoParams, raw) is not None


def is_valid_prices_args(raw: Any) -> bool:
    return validate_args(PricesParams, raw) is not None
