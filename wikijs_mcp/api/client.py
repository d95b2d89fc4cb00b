"""
API - Wiki.js GraphQL Client

Single entry point for every call to the Wiki.js GraphQL endpoint.
"""

import logging
import ssl
from typing import Any, Dict, Optional, Union

import httpx

from wikijs_mcp.config import get_settings
from wikijs_mcp.api.errors import (
    ConfigurationError,
    GraphQLError,
    ResponseError,
    TransportError,
)

logger = logging.getLogger(__name__)


class WikiJSClient:
    """Executes GraphQL operations against Wiki.js.

    Constructed explicitly and handed to the services that need it, so tests
    can pass a fake with the same ``execute`` coroutine or an ``httpx``
    mock transport.
    """

    def __init__(
        self,
        settings=None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        wikijs = self.settings.wikijs
        self.api_url = wikijs.api_url
        self.timeout = wikijs.timeout_seconds
        self.headers = {
            "Authorization": f"Bearer {wikijs.api_token}",
            "Content-Type": "application/json",
        }
        self._transport = transport
        self._verify = self._build_verify()

    def _build_verify(self) -> Union[bool, ssl.SSLContext]:
        """Resolve TLS verification from WIKIJS_SSL_VERIFY / WIKIJS_CA_BUNDLE."""
        wikijs = self.settings.wikijs
        if not self.api_url.startswith("https://"):
            return True

        if not wikijs.ssl_verify:
            logger.warning(
                "SSL verification is disabled. This should only be used for testing."
            )
            return False

        if wikijs.ca_bundle:
            try:
                return ssl.create_default_context(cafile=str(wikijs.ca_bundle))
            except (OSError, ssl.SSLError) as e:
                raise ConfigurationError(
                    f"Failed to read CA bundle from {wikijs.ca_bundle}: {e}"
                ) from e

        return True

    async def execute(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Execute a GraphQL query or mutation.

        Args:
            query: GraphQL operation text
            variables: Optional operation variables

        Returns:
            The ``data`` object of the response

        Raises:
            TransportError: network, TLS, HTTP status or undecodable body
            GraphQLError: the response carried an ``errors`` list
            ResponseError: no ``data`` object in the response
        """
        payload: Dict[str, Any] = {"query": query}
        if variables is not None:
            payload["variables"] = variables

        try:
            async with httpx.AsyncClient(
                headers=self.headers,
                verify=self._verify,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(self.api_url, json=payload)
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning("Wiki.js returned HTTP %s", e.response.status_code)
            raise TransportError(str(e), status_code=e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.warning("Wiki.js request failed: %s", e)
            raise TransportError(str(e)) from e
        except ValueError as e:
            raise TransportError(f"Invalid JSON in response: {e}") from e

        if not isinstance(body, dict):
            raise ResponseError("body is not a JSON object")

        if body.get("errors"):
            logger.warning("GraphQL errors: %s", body["errors"])
            raise GraphQLError(body["errors"])

        data = body.get("data")
        if not isinstance(data, dict):
            raise ResponseError("missing data")
        return data
