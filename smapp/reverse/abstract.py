"""
Abstract interface of reverse geocode service, dood!

There are two implementations: ReverseClient talks to the real service,
MockReverseClient answers from memory for tests of calling code.
"""

from abc import ABC, abstractmethod
from typing import List

from ..context import Context
from .call_options import CallOptions
from .models import Component


class ReverseInterface(ABC):
    """Reverse geocode operations."""

    async def getComponents(self, lat: float, lon: float, options: CallOptions) -> List[Component]:
        """Get address components of given location."""
        return await self.getComponentsWithContext(Context.background(), lat, lon, options)

    async def getDisplayName(self, lat: float, lon: float, options: CallOptions) -> str:
        """Get address of given location as single string."""
        return await self.getDisplayNameWithContext(Context.background(), lat, lon, options)

    @abstractmethod
    async def getComponentsWithContext(
        self, ctx: Context, lat: float, lon: float, options: CallOptions
    ) -> List[Component]:
        """Like getComponents, but cancelled when ctx is done."""
        raise NotImplementedError

    @abstractmethod
    async def getDisplayNameWithContext(self, ctx: Context, lat: float, lon: float, options: CallOptions) -> str:
        """Like getDisplayName, but cancelled when ctx is done."""
        raise NotImplementedError
