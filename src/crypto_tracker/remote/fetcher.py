"""Single-shot asynchronous JSON fetcher over httpx."""

import json
import logging
from typing import Any

import httpx

from crypto_tracker.core.errors import DecodeError, EmptyBodyError, HttpStatusError, TransportError

logger = logging.getLogger(__name__)


class RemoteFetcher:
    """
    Issues one GET request per call and returns the decoded JSON body.

    No retries are attempted and httpx's default timeout applies.

    Parameters
    ----------
    client : httpx.AsyncClient | None
        Client to send requests with. A new client is created (and closed by
        ``aclose``) when omitted.

    """

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient()

    async def fetch(self, url: str) -> Any:
        """
        Fetch ``url`` and parse the response as JSON.

        Parameters
        ----------
        url : str
            Absolute URL to GET

        Returns
        -------
        Any
            Parsed JSON value

        Raises
        ------
        TransportError
            If the request cannot be built or the connection fails
        HttpStatusError
            If the response status is not 200
        EmptyBodyError
            If the response body is empty
        DecodeError
            If the body is not valid UTF-8 or not valid JSON

        """
        logger.debug("GET %s", url)
        try:
            response = await self.client.get(url)
        except httpx.InvalidURL as e:
            msg = f"Invalid URL {url}: {e}"
            raise TransportError(url, msg) from e
        except httpx.HTTPError as e:
            msg = f"Request to {url} failed: {e}"
            raise TransportError(url, msg) from e

        if response.status_code != httpx.codes.OK:
            raise HttpStatusError(url, response.status_code)

        body = response.content
        if not body:
            msg = f"No data received from {url}"
            raise EmptyBodyError(url, msg)

        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as e:
            msg = f"Response from {url} is not valid UTF-8: {e}"
            raise DecodeError(url, msg) from e

        try:
            return json.loads(text)
        except ValueError as e:
            msg = f"JSON parse error for {url}: {e}"
            raise DecodeError(url, msg) from e

    async def aclose(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "RemoteFetcher":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.aclose()
