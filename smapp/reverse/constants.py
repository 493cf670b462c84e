"""
Reverse Geocode API Constants
"""

from enum import StrEnum
from typing import Final

# Query parameters
PARAM_LAT: Final[str] = "lat"
PARAM_LON: Final[str] = "lon"
PARAM_LANGUAGE: Final[str] = "language"
PARAM_ZOOM: Final[str] = "zoom"
PARAM_TYPE: Final[str] = "type"
PARAM_DISPLAY: Final[str] = "display"

# Envelope statuses
STATUS_OK: Final[str] = "OK"
STATUS_ERROR: Final[str] = "ERROR"

DEFAULT_ZOOM_LEVEL: Final[int] = 16
COORDINATE_FORMAT: Final[str] = "{:.6f}"


class ReverseVersion(StrEnum):
    """Reverse API version (last URL segment)"""

    V1 = "v1"


class ResponseType(StrEnum):
    """Level of detail of the response"""

    DRIVER = "driver"
    PASSENGER = "passenger"
    VERBOSE = "verbose"


class Language(StrEnum):
    """Response language"""

    FARSI = "fa"
    ENGLISH = "en"
