"""
In-memory reverse geocode client for testing code which depends on ReverseInterface.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..context import Context
from ..exceptions import SmappError, TransportError
from .abstract import ReverseInterface
from .call_options import CallOptions
from .models import Component

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MockCall:
    """Recorded call of MockReverseClient."""

    method: str
    lat: float
    lon: float
    options: CallOptions


class MockReverseClient(ReverseInterface):
    """Returns preconfigured answers and records every call, dood!

    Context is honoured the same way as in ReverseClient: a done context
    results in TransportError.

    Example:
        >>> client = MockReverseClient(components=[{"name": "Iran"}], displayName="Tehran")
        >>> await client.getDisplayName(35.7, 51.4, newDefaultCallOptions())
        'Tehran'
    """

    def __init__(
        self,
        components: Optional[List[Component]] = None,
        displayName: str = "",
        error: Optional[SmappError] = None,
    ) -> None:
        self.components: List[Component] = components if components is not None else []
        self.displayName = displayName
        self.error = error
        self.calls: List[MockCall] = []

    def _record(self, ctx: Context, method: str, lat: float, lon: float, options: CallOptions) -> None:
        self.calls.append(MockCall(method, lat, lon, options))
        logger.debug(f"Mock {method}({lat}, {lon})")

        err = ctx.err()
        if err is not None:
            raise TransportError(err) from err
        if self.error is not None:
            raise self.error

    async def getComponentsWithContext(
        self, ctx: Context, lat: float, lon: float, options: CallOptions
    ) -> List[Component]:
        self._record(ctx, "getComponents", lat, lon, options)
        return list(self.components)

    async def getDisplayNameWithContext(self, ctx: Context, lat: float, lon: float, options: CallOptions) -> str:
        self._record(ctx, "getDisplayName", lat, lon, options)
        return self.displayName
