"""Pydantic models for NS MCP Server request/response schemas.

Import from submodules directly for cleaner imports:

    from ns_mcp.models.enums import ToolName
    from ns_mcp.models.requests import DeparturesParams
"""

from .enums import DisruptionType, Language, ToolName, TravelClass, TravelType
from .requests import (
    ArrivalsParams,
    DeparturesParams,
    DisruptionsParams,
    NSParams,
    OVFietsParams,
    PricesParams,
    StationBoardParams,
    StationInfoParams,
    ToolCallParams,
    TravelAdviceParams,
)
from .responses import HealthResponse, ServerInfoResponse

__all__ = [
    # Enums
    "ToolName",
    "DisruptionType",
    "Language",
    "TravelClass",
    "TravelType",
    # Requests
    "NSParams",
    "ToolCallParams",
    "DisruptionsParams",
    "TravelAdviceParams",
    "StationBoardParams",
    "DeparturesParams",
    "ArrivalsParams",
    "OVFietsParams",
    "StationInfoParams",
    "PricesParams",
    # Responses
    "HealthResponse",
    "ServerInfoResponse",
]
