"""Enumeration types for the NS MCP server."""

from enum import StrEnum


class ToolName(StrEnum):
    """Available NS tools."""

    GET_DISRUPTIONS = "get_disruptions"
    GET_TRAVEL_ADVICE = "get_travel_advice"
    GET_DEPARTURES = "get_departures"
    GET_OVFIETS = "get_ovfiets"
    GET_STATION_INFO = "get_station_info"
    GET_CURRENT_TIME = "get_current_time_in_rfc3339"
    GET_ARRIVALS = "get_arrivals"
    GET_PRICES = "get_prices"


class DisruptionType(StrEnum):
    """Kind of disruption reported by the disruptions endpoint."""

    MAINTENANCE = "MAINTENANCE"
    DISRUPTION = "DISRUPTION"


class Language(StrEnum):
    """Localization of departure and arrival boards."""

    NL = "nl"
    EN = "en"


class TravelClass(StrEnum):
    """Travel class for price lookups."""

    FIRST_CLASS = "FIRST_CLASS"
    SECOND_CLASS = "SECOND_CLASS"


class TravelType(StrEnum):
    """Single or return journey for price lookups."""

    SINGLE = "single"
    RETURN = "return"
