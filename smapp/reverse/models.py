"""
Reverse Geocode API Data Models

TypedDict models of reverse geocode responses.
"""

import sys
from typing import List

if sys.version_info >= (3, 14):
    from typing import TypedDict
else:
    from typing_extensions import TypedDict


class Component(TypedDict, total=False, closed=False):
    """One element of address hierarchy (country, city, street...), dood!

    Service may add more keys, they are kept as is.
    """

    name: str  # Human readable name, e.g. "Iran"
    type: str  # Hierarchy level, e.g. "country"


class ComponentsResult(TypedDict):
    components: List[Component]


class DisplayNameResult(TypedDict):
    displayName: str


class ComponentsResponse(TypedDict):
    """Envelope of `display=false` call"""

    status: str  # "OK" or "ERROR"
    result: ComponentsResult


class DisplayNameResponse(TypedDict):
    """Envelope of `display=true` call"""

    status: str  # "OK" or "ERROR"
    result: DisplayNameResult
