# api_client.py - HTTP transports around requests (blocking) and httpx (async)
from typing import Optional

import httpx
import requests

from .errors import TransportError
from .request import HttpVerb, PreparedCall
from .utils import get_logger

logger = get_logger(__name__)

DEFAULT_HEADERS = {
    "accept": "application/json",
}
FORM_HEADERS = {
    **DEFAULT_HEADERS,
    "Content-Type": "application/x-www-form-urlencoded",
}


class HttpTransport:
    """Blocking transport backed by a ``requests.Session``.

    Returns the raw body of every response, whatever its HTTP status; the
    envelope decoder decides what the body means.
    """

    def __init__(self, timeout=30, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()

    def send(self, call: PreparedCall) -> str:
        try:
            if call.verb is HttpVerb.GET:
                resp = self.session.get(call.url, headers=DEFAULT_HEADERS, timeout=self.timeout)
            else:
                resp = self.session.post(call.url, data=call.body, headers=FORM_HEADERS, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(
                f"Unable to connect to Etherpad Lite instance ({type(e).__name__}): {e}"
            ) from e
        if not resp.ok:
            logger.warning("%s %s -> HTTP %s", call.verb.value, call.url.split("?", 1)[0], resp.status_code)
        return resp.text

    def close(self):
        if self._owns_session:
            self.session.close()


class AsyncHttpTransport:
    """Cooperative transport backed by an ``httpx.AsyncClient``."""

    def __init__(self, timeout=30, client: Optional[httpx.AsyncClient] = None):
        self.timeout = timeout
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout)

    async def send(self, call: PreparedCall) -> str:
        try:
            if call.verb is HttpVerb.GET:
                resp = await self.client.get(call.url, headers=DEFAULT_HEADERS)
            else:
                resp = await self.client.post(call.url, content=call.body, headers=FORM_HEADERS)
        except httpx.HTTPError as e:
            raise TransportError(
                f"Unable to connect to Etherpad Lite instance ({type(e).__name__}): {e}"
            ) from e
        if not resp.is_success:
            logger.warning("%s %s -> HTTP %s", call.verb.value, call.url.split("?", 1)[0], resp.status_code)
        return resp.text

    async def aclose(self):
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
