from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

from aiohttp import ClientError, ClientSession, ClientTimeout

from mojang.exceptions import TransportError
from mojang.result import Err, Ok, Result


class HttpClient:
    """
    Thin async JSON client around an aiohttp session. Failures come back as
    Err values instead of being raised.

    The client keeps no cache of its own, the ttl of a GET is only forwarded
    as a Cache-Control header so that a caching proxy in front of the API can
    honour it.

    :ivar _session: The session which is used for HTTPS requests.
    :ivar timeout: Total timeout of a single request, in seconds.
    """
    _session: Optional[ClientSession]
    timeout: float

    def __init__(self, timeout: float = 10) -> None:
        self._session = None
        self.timeout = timeout

    async def __aenter__(self) -> HttpClient:
        """
        Enter the session.

        :return: The client.
        """
        self._session = ClientSession(timeout=ClientTimeout(total=self.timeout))
        return self

    async def __aexit__(self, *args) -> None:
        """
        Close the session.

        :return: None.
        """
        if self._session is not None:
            await self._session.close()
            self._session = None

    @staticmethod
    def cache_headers(ttl: int) -> Dict[str, str]:
        if ttl <= 0:
            return {'Cache-Control': 'no-cache'}
        return {'Cache-Control': f'max-age={ttl}'}

    async def _request(self, method: str, url: str,
                       **kwargs) -> Result[Any, TransportError]:
        if self._session is None:
            raise RuntimeError('HttpClient used outside of "async with"')

        try:
            async with self._session.request(method, url, **kwargs) as res:
                if res.status == 204:
                    return Ok(None)
                if not 200 <= res.status < 300:
                    reason = await res.text()
                    logging.debug(f'FAIL {method} {url} returned '
                                  f'{res.status}')
                    return Err(TransportError(url, res.status, reason))
                body = await res.json(content_type=None)
                return Ok(body)
        except (ClientError, asyncio.TimeoutError, ValueError) as e:
            logging.debug(f'FAIL {method} {url}: {e!r}')
            return Err(TransportError(url, reason=repr(e)))

    async def get(self, url: str, ttl: int = 0) -> Result[Any, TransportError]:
        """
        GET a JSON document.

        :param url: The URL to get.
        :param ttl: How long, in seconds, the response may be cached for. 0
        bypasses caches.
        :return: Ok with the JSON body (None for 204), or Err.
        """
        return await self._request('GET', url, headers=self.cache_headers(ttl))

    async def post(self, url: str, body: Any) -> Result[Any, TransportError]:
        """
        POST a JSON document.

        :param url: The URL to post to.
        :param body: The JSON-compatible body.
        :return: Ok with the JSON body (None for 204), or Err.
        """
        return await self._request('POST', url, json=body)
