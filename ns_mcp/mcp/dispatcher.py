"""Tool dispatch: name lookup, argument validation, upstream call.

``ToolDispatcher.call_tool`` never raises for tool-level problems. It returns
an explicit ``ToolSuccess`` or ``ToolFailure``; the protocol layer renders
either into the wire envelope.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

from pydantic import BaseModel

from ..models.enums import ToolName
from ..services.ns_api import NSApiClient
from .errors import ErrorCode, McpError
from .formatter import create_mcp_error, format_error, format_success, to_mcp_error
from .tool_defs import TOOL_DEFINITIONS
from .validation import TOOL_PARAMS, validate_args

logger = logging.getLogger(__name__)

TIMEZONE_NAME = "Europe/Amsterdam"
AMSTERDAM = ZoneInfo(TIMEZONE_NAME)


def amsterdam_now() -> datetime:
    return datetime.now(AMSTERDAM)


@dataclass(frozen=True)
class ToolSuccess:
    """A tool call that produced a payload."""

    data: Any

    def to_result(self) -> dict:
        return format_success(self.data)


@dataclass(frozen=True)
class ToolFailure:
    """A tool call that ended in a protocol error."""

    error: McpError

    def to_result(self) -> dict:
        return format_error(self.error)


ToolOutcome = ToolSuccess | ToolFailure


class ToolDispatcher:
    """Routes ``tools/list`` and ``tools/call`` to the static catalog and the NS client."""

    def __init__(
        self,
        api_client: NSApiClient,
        clock: Callable[[], datetime] = amsterdam_now,
    ):
        self.api_client = api_client
        self._clock = clock
        self._upstream: dict[ToolName, Callable[[Any], Awaitable[Any]]] = {
            ToolName.GET_DISRUPTIONS: api_client.get_disruptions,
            ToolName.GET_TRAVEL_ADVICE: api_client.get_travel_advice,
            ToolName.GET_DEPARTURES: api_client.get_departures,
            ToolName.GET_ARRIVALS: api_client.get_arrivals,
            ToolName.GET_OVFIETS: api_client.get_ovfiets,
            ToolName.GET_STATION_INFO: api_client.get_station_info,
            ToolName.GET_PRICES: api_client.get_prices,
        }

    def list_tools(self) -> list[dict]:
        return TOOL_DEFINITIONS

    def current_time(self) -> dict:
        return {
            "datetime": self._clock().isoformat(timespec="seconds"),
            "timezone": TIMEZONE_NAME,
        }

    async def call_tool(self, name: str, arguments: Any = None) -> ToolOutcome:
        """Run one tool call end to end.

        Args:
            name: Tool name from the ``tools/call`` request
            arguments: Raw, untyped argument bag

        Returns:
            ToolSuccess with the upstream payload, or ToolFailure with the
            classified error (unknown tool, invalid arguments, configuration
            or upstream failure)
        """
        try:
            tool = ToolName(name)
        except ValueError:
            logger.info(f"Call to unknown tool: {name!r}")
            return ToolFailure(create_mcp_error(ErrorCode.METHOD_NOT_FOUND, f"Unknown tool: {name}"))

        # Arguments are ignored: the current time needs none and has no upstream call
        if tool is ToolName.GET_CURRENT_TIME:
            return ToolSuccess(self.current_time())

        params: BaseModel | None = validate_args(TOOL_PARAMS[tool], arguments)
        if params is None:
            logger.info(f"Rejected arguments for {tool}")
            return ToolFailure(
                create_mcp_error(ErrorCode.INVALID_PARAMS, f"Invalid arguments for {tool}")
            )

        try:
            data = await self._upstream[tool](params)
        except Exception as e:
            failure = ToolFailure(to_mcp_error(e))
            logger.info(f"Tool {tool} failed: {failure.error.message}")
            return failure

        logger.debug(f"Tool {tool} succeeded")
        return ToolSuccess(data)
