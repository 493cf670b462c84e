"""
Smapp Reverse Geocode Client Library

Async client turning a location into address components or a display name.

Example usage:
    from smapp.config import Config
    from smapp.reverse import ReverseVersion, newDefaultCallOptions, newReverseClient, withEnglishLanguage

    client = newReverseClient(
        Config(apiBaseUrl="https://api.example.com", apiKey="key", apiKeyName="X-Smapp-Key"),
        ReverseVersion.V1,
        5,
    )

    # Structured address
    components = await client.getComponents(35.7006, 51.4013, newDefaultCallOptions())

    # Single string address in English
    name = await client.getDisplayName(35.7006, 51.4013, newDefaultCallOptions(withEnglishLanguage()))
"""

from .abstract import ReverseInterface
from .call_options import (
    CallOptions,
    CallOptionSetter,
    newDefaultCallOptions,
    withDriverResponseType,
    withEnglishLanguage,
    withFarsiLanguage,
    withHeaders,
    withPassengerResponseType,
    withVerboseResponseType,
    withZoomLevel,
)
from .client import (
    ConstructorOption,
    ReverseClient,
    getReverseDefaultUrl,
    newReverseClient,
    withHttpClient,
    withTransport,
)
from .constants import Language, ResponseType, ReverseVersion
from .mock import MockCall, MockReverseClient
from .models import Component, ComponentsResponse, DisplayNameResponse

__all__ = [
    "ReverseInterface",
    "ReverseClient",
    "MockReverseClient",
    "MockCall",
    "newReverseClient",
    "getReverseDefaultUrl",
    "ConstructorOption",
    "withTransport",
    "withHttpClient",
    "CallOptions",
    "CallOptionSetter",
    "newDefaultCallOptions",
    "withDriverResponseType",
    "withPassengerResponseType",
    "withVerboseResponseType",
    "withFarsiLanguage",
    "withEnglishLanguage",
    "withZoomLevel",
    "withHeaders",
    "ReverseVersion",
    "ResponseType",
    "Language",
    "Component",
    "ComponentsResponse",
    "DisplayNameResponse",
]
