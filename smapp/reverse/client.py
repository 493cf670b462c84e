"""
Reverse Geocode Async Client

This module provides ReverseClient which turns a location into address
components or a display name using Smapp reverse geocode API.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Type, cast

import httpx

from ..config import ApiKeySource, Config
from ..context import Context
from ..exceptions import (
    ApplicationStatusError,
    ContextError,
    DecodeError,
    InvalidKeySourceError,
    RequestConstructionError,
    TransportError,
    UnexpectedStatusError,
)
from ..version import USER_AGENT_HEADER, getUserAgent
from .abstract import ReverseInterface
from .call_options import CallOptions
from .constants import (
    COORDINATE_FORMAT,
    PARAM_DISPLAY,
    PARAM_LANGUAGE,
    PARAM_LAT,
    PARAM_LON,
    PARAM_TYPE,
    PARAM_ZOOM,
    STATUS_OK,
    ReverseVersion,
)
from .models import Component, ComponentsResponse, DisplayNameResponse

logger = logging.getLogger(__name__)

ConstructorOption = Callable[["ReverseClient"], None]


class ReverseClient(ReverseInterface):
    """Async client for reverse geocode service, dood!

    URL and HTTP client are built once and reused by all calls, so a single
    instance may serve many concurrent requests.

    Example:
        >>> cfg = Config(apiBaseUrl="https://api.example.com", apiKey="key", apiKeyName="X-Smapp-Key")
        >>> async with newReverseClient(cfg, ReverseVersion.V1, 5) as client:
        ...     components = await client.getComponents(35.7, 51.4, newDefaultCallOptions())

    Attributes:
        config: Connection settings
        url: Resolved reverse endpoint URL
        timeout: Upper bound of each call in seconds, body read included
        httpClient: Underlying httpx.AsyncClient
    """

    def __init__(
        self,
        config: Config,
        version: str = ReverseVersion.V1,
        timeout: float = 10,
        *opts: ConstructorOption,
    ) -> None:
        self.config = config
        self.url = getReverseDefaultUrl(config, version)
        self.timeout = timeout
        self.transport: Optional[httpx.AsyncBaseTransport] = None
        self._httpClient: Optional[httpx.AsyncClient] = None

        for opt in opts:
            opt(self)

        # Built after options so a replaced client is never created
        if self._httpClient is None:
            self._httpClient = self.buildHttpClient(self.transport)
        self.httpClient = self._httpClient

        logger.debug(f"ReverseClient initialized for {self.url}")

    def buildHttpClient(self, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
        """Build HTTP client with client's timeout and default headers."""
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            headers={USER_AGENT_HEADER: getUserAgent()},
            transport=transport,
        )

    async def __aenter__(self) -> "ReverseClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client and release pooled connections."""
        if not self.httpClient.is_closed:
            await self.httpClient.aclose()
            logger.debug("HTTP client closed")

    async def getComponentsWithContext(
        self, ctx: Context, lat: float, lon: float, options: CallOptions
    ) -> List[Component]:
        """Get address components of given location, dood!

        Args:
            ctx: Cancellation context of the call
            lat: Latitude
            lon: Longitude
            options: Per-request options

        Returns:
            Components as returned by the service

        Raises:
            SmappError: Subclass describing what went wrong
        """
        envelope = cast(ComponentsResponse, await self._execute(ctx, lat, lon, options, False, "components", list))
        components = envelope["result"]["components"]
        if not all(isinstance(component, dict) for component in components):
            raise DecodeError("components must be objects")
        return components

    async def getDisplayNameWithContext(self, ctx: Context, lat: float, lon: float, options: CallOptions) -> str:
        """Get address of given location as single string, dood!

        Args and errors are the same as in getComponentsWithContext.
        """
        envelope = cast(DisplayNameResponse, await self._execute(ctx, lat, lon, options, True, "displayName", str))
        return envelope["result"]["displayName"]

    def _buildRequest(self, lat: float, lon: float, options: CallOptions, display: bool) -> httpx.Request:
        try:
            request = self.httpClient.build_request("GET", self.url)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol, ValueError, TypeError) as e:
            raise RequestConstructionError(e) from e

        params: Dict[str, str] = {
            PARAM_LAT: COORDINATE_FORMAT.format(lat),
            PARAM_LON: COORDINATE_FORMAT.format(lon),
        }
        if options.useLanguage:
            params[PARAM_LANGUAGE] = str(options.language)
        if options.useZoomLevel:
            params[PARAM_ZOOM] = str(options.zoomLevel)
        if options.useResponseType:
            params[PARAM_TYPE] = str(options.responseType)
        params[PARAM_DISPLAY] = "true" if display else "false"

        if self.config.apiKeySource == ApiKeySource.HEADER:
            request.headers[self.config.apiKeyName] = self.config.apiKey
        elif self.config.apiKeySource == ApiKeySource.QUERY_PARAM:
            params[self.config.apiKeyName] = self.config.apiKey
        else:
            raise InvalidKeySourceError(str(self.config.apiKeySource))

        for key, value in options.headers.items():
            request.headers[key] = value

        request.url = request.url.copy_with(params=params)
        return request

    async def _execute(
        self,
        ctx: Context,
        lat: float,
        lon: float,
        options: CallOptions,
        display: bool,
        resultField: str,
        resultType: Type[Any],
    ) -> Dict[str, Any]:
        """Make request and return decoded envelope with validated `result[resultField]`."""
        request = self._buildRequest(lat, lon, options, display)
        logger.debug(f"Making GET request to {self.url} (display={display})")

        # Client timeout bounds the whole exchange, body included
        callCtx, cancel = Context.withTimeout(ctx, self.timeout)
        try:
            return await self._roundTrip(callCtx, request, resultField, resultType)
        finally:
            cancel()

    async def _roundTrip(
        self, ctx: Context, request: httpx.Request, resultField: str, resultType: Type[Any]
    ) -> Dict[str, Any]:
        try:
            response = await ctx.run(self.httpClient.send(request, stream=True))
        except (ContextError, httpx.HTTPError) as e:
            logger.debug(f"Request to {self.url} failed: {type(e).__name__}#{e}")
            raise TransportError(e) from e

        try:
            if response.status_code != httpx.codes.OK:
                raise UnexpectedStatusError(response.status_code)

            try:
                await ctx.run(response.aread())
            except (ContextError, httpx.HTTPError) as e:
                raise TransportError(e) from e

            return self._decodeEnvelope(response, resultField, resultType)
        finally:
            await self._drainAndClose(ctx, response)

    def _decodeEnvelope(self, response: httpx.Response, resultField: str, resultType: Type[Any]) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError("invalid JSON", e) from e

        if not isinstance(data, dict) or not isinstance(data.get("status"), str):
            raise DecodeError("response is not a status envelope")

        if data["status"] != STATUS_OK:
            logger.debug(f"Application status of {self.url}: {data['status']}")
            raise ApplicationStatusError(data["status"])

        result = data.get("result")
        if not isinstance(result, dict) or not isinstance(result.get(resultField), resultType):
            raise DecodeError(f"result.{resultField} is missing or has wrong type")

        logger.debug(f"Request to {self.url} succeeded")
        return data

    async def _drainAndClose(self, ctx: Context, response: httpx.Response) -> None:
        # Unread body prevents connection from returning to the pool.
        # Done context skips draining, the connection is dropped instead.
        try:
            if not response.is_stream_consumed and ctx.err() is None:
                await ctx.run(response.aread())
        except (ContextError, httpx.HTTPError, httpx.StreamError) as e:
            logger.debug(f"Could not drain response body: {e}")
        finally:
            await response.aclose()


def withTransport(transport: httpx.AsyncBaseTransport) -> ConstructorOption:
    """Constructor option replacing HTTP transport (e.g. with httpx.MockTransport)."""

    def option(client: ReverseClient) -> None:
        client.transport = transport
        client._httpClient = None

    return option


def withHttpClient(httpClient: httpx.AsyncClient) -> ConstructorOption:
    """Constructor option replacing whole HTTP client.

    Its own timeouts apply per phase, the client timeout still bounds every call.
    """

    def option(client: ReverseClient) -> None:
        client._httpClient = httpClient

    return option


def getReverseDefaultUrl(config: Config, version: str) -> str:
    """Get `{base URL}/reverse/{version}` with trailing slashes of base URL stripped."""
    return f"{config.apiBaseUrl.rstrip('/')}/reverse/{version}"


def newReverseClient(
    config: Config,
    version: str = ReverseVersion.V1,
    timeout: float = 10,
    *opts: ConstructorOption,
) -> ReverseClient:
    """Create reverse geocode client. Nothing is validated here."""
    return ReverseClient(config, version, timeout, *opts)
