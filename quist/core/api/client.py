"""
Async Gist API client.

Thin wrapper around aiohttp exposing the two calls a run needs: create a Gist
and delete it again.
"""
import asyncio
from typing import Optional, Tuple

import aiohttp

from ..logging import get_logger
from .auth import BasicAuthCredential
from .config import APIConfig
from .errors import NetworkError
from .models import ApiResponse, Gist, GistPayload, Ok
from .request import RequestBuilder, ResponseHandler


class AsyncGistClient:
    """
    Asynchronous GitHub Gist API client.

    Requests are never retried. Transport failures raise NetworkError; refusals
    from the API come back as ``Err`` values.

    Example:
        >>> credential = parse_auth("octocat:ghp_xxx")
        >>> async with AsyncGistClient(credential) as client:
        ...     response = await client.create(GistPayload(files={'a.txt': 'a'}))
    """

    def __init__(
        self,
        credential: BasicAuthCredential,
        config: Optional[APIConfig] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        """
        Initialize async Gist client.

        Args:
            credential: Basic auth credential sent with every request
            config: API configuration (uses defaults if not provided)
            session: Optional externally owned aiohttp session
        """
        self._config = config or APIConfig.default()
        self._builder = RequestBuilder(
            self._config.base_url,
            credential,
            self._config.user_agent,
            accept=self._config.accept,
            extra_headers=self._config.extra_headers
        )
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger('quist.api')

    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config

    async def __aenter__(self) -> 'AsyncGistClient':
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(**self._config.get_connector_kwargs())
            self._session = aiohttp.ClientSession(
                connector=connector,
                **self._config.get_session_kwargs()
            )
            self._owns_session = True
        return self._session

    async def close(self):
        """Close the session if this client created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def _send(
        self,
        method: str,
        url: str,
        data: Optional[bytes] = None
    ) -> Tuple[int, bytes]:
        """
        Send one request and return its status and raw body.

        Raises:
            NetworkError: On connection failure or timeout
        """
        session = await self._ensure_session()
        headers = self._builder.build_headers()
        if data is not None:
            headers['Content-Type'] = 'application/json'

        self._logger.debug(f"{method} {url}")
        try:
            async with session.request(
                method,
                url,
                data=data,
                headers=headers,
                **self._config.get_request_kwargs()
            ) as response:
                body = await response.read()
                self._logger.debug(f"{method} {url} -> HTTP {response.status} ({len(body)} bytes)")
                return response.status, body
        except asyncio.TimeoutError as e:
            raise NetworkError(f"{method} {url} timed out") from e
        except aiohttp.ClientError as e:
            raise NetworkError(f"{method} {url} failed: {e}") from e

    async def create(self, payload: GistPayload) -> ApiResponse[Gist]:
        """
        Create a new Gist.

        Args:
            payload: Files and optional description

        Returns:
            ``Ok(Gist)`` with id and URL, or ``Err`` with the API message

        Raises:
            NetworkError: On transport failure or an undecodable body
        """
        url = self._builder.gists_url()
        status, body = await self._send('POST', url, payload.to_json().encode('utf-8'))
        data = ResponseHandler.parse_json(body, status)
        return ResponseHandler.decode(data, status, Gist.from_dict)

    async def delete(self, gist_id: str) -> ApiResponse[None]:
        """
        Delete an existing Gist.

        204 and 304 are success without a body; any other status is decoded
        as the error shape.

        Args:
            gist_id: Id returned by ``create``

        Returns:
            ``Ok(None)`` or ``Err`` with the API message

        Raises:
            NetworkError: On transport failure or an undecodable body
        """
        url = self._builder.gist_url(gist_id)
        status, body = await self._send('DELETE', url)

        if ResponseHandler.is_empty_success(status):
            return Ok(None)

        data = ResponseHandler.parse_json(body, status)
        return ResponseHandler.decode(data, status)
