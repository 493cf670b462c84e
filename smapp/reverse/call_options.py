"""
Per-request options of reverse geocode calls.

Options are built by folding setters over defaults:

    >>> options = newDefaultCallOptions(
    ...     withEnglishLanguage(),
    ...     withZoomLevel(18),
    ...     withHeaders({"X-Request-Id": "42"}),
    ... )

Nothing is sent for a field unless its setter was applied, defaults included.
"""

import dataclasses
from dataclasses import dataclass, field
from typing import Callable, Dict, Mapping, Optional

from .constants import DEFAULT_ZOOM_LEVEL, Language, ResponseType


@dataclass(frozen=True)
class CallOptions:
    """Behaviour of a single reverse geocode request.

    Attributes:
        useZoomLevel: Whether `zoom` query param is sent
        zoomLevel: Zoom level of request
        useResponseType: Whether `type` query param is sent
        responseType: Type of the response
        useLanguage: Whether `language` query param is sent
        language: Language of the response
        headers: Custom headers to send, applied after all other headers
    """

    useZoomLevel: bool = False
    zoomLevel: int = DEFAULT_ZOOM_LEVEL
    useResponseType: bool = False
    responseType: ResponseType = ResponseType.DRIVER
    useLanguage: bool = False
    language: Language = Language.FARSI
    headers: Dict[str, str] = field(default_factory=dict)


CallOptionSetter = Callable[[CallOptions], CallOptions]


def _withResponseType(responseType: ResponseType) -> CallOptionSetter:
    return lambda options: dataclasses.replace(options, useResponseType=True, responseType=responseType)


def _withLanguage(language: Language) -> CallOptionSetter:
    return lambda options: dataclasses.replace(options, useLanguage=True, language=language)


def withDriverResponseType() -> CallOptionSetter:
    """Request `driver` type of response."""
    return _withResponseType(ResponseType.DRIVER)


def withPassengerResponseType() -> CallOptionSetter:
    """Request `passenger` type of response."""
    return _withResponseType(ResponseType.PASSENGER)


def withVerboseResponseType() -> CallOptionSetter:
    """Request `verbose` type of response."""
    return _withResponseType(ResponseType.VERBOSE)


def withFarsiLanguage() -> CallOptionSetter:
    """Request response in Farsi."""
    return _withLanguage(Language.FARSI)


def withEnglishLanguage() -> CallOptionSetter:
    """Request response in English."""
    return _withLanguage(Language.ENGLISH)


def withZoomLevel(zoomLevel: int) -> CallOptionSetter:
    """Send given zoom level. Value isn't validated, the service decides."""
    return lambda options: dataclasses.replace(options, useZoomLevel=True, zoomLevel=zoomLevel)


def withHeaders(headers: Optional[Mapping[str, str]]) -> CallOptionSetter:
    """Replace custom headers with given ones.

    None or empty mapping keeps previously set headers, so composing setters
    never wipes headers out.
    """

    def setter(options: CallOptions) -> CallOptions:
        if not headers:
            return options
        return dataclasses.replace(options, headers=dict(headers))

    return setter


def newDefaultCallOptions(*setters: CallOptionSetter) -> CallOptions:
    """Build CallOptions from defaults, applying setters left to right (last one wins)."""
    options = CallOptions()
    for setter in setters:
        options = setter(options)
    return options
