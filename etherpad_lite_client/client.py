# client.py - the generic invoke() cycle: encode, build, send, decode
"""
A client for talking to Etherpad Lite's HTTP JSON API.

Example::

    api = EPLiteClient("http://etherpad.mysite.com", "FJ7jksalksdfj83jsdflkj")
    text = api.get_text("my_pad")["text"]
"""
from typing import Any, Mapping, Optional, Union

from .api_client import AsyncHttpTransport, HttpTransport
from .config import EndpointConfig
from .encoding import encode_params
from .envelope import Payload, decode_response
from .errors import ConfigurationError, TransportError
from .facade import EtherpadAPI
from .request import HttpVerb, PreparedCall, build_request
from .utils import get_logger, redact

logger = get_logger(__name__)

Arguments = Optional[Mapping[str, Any]]


class _ClientBase(EtherpadAPI):
    def __init__(self, base_url: Optional[str] = None, api_key: Optional[str] = None,
                 timeout: Optional[float] = None, lenient_json: Optional[bool] = None,
                 transport=None, config: Optional[EndpointConfig] = None):
        if config is None:
            config = EndpointConfig(
                base_url, api_key,
                timeout=30 if timeout is None else timeout,
                lenient_json=bool(lenient_json),
            )
        elif any(v is not None for v in (base_url, api_key, timeout, lenient_json)):
            raise ConfigurationError("pass either config or base_url/api_key/timeout/lenient_json, not both")
        self._config = config
        self._owns_transport = transport is None
        self._transport = transport if transport is not None else self._default_transport()

    @classmethod
    def from_env(cls, transport=None, environ=None):
        return cls(config=EndpointConfig.from_env(environ), transport=transport)

    def _default_transport(self):
        raise NotImplementedError

    @property
    def config(self) -> EndpointConfig:
        return self._config

    @property
    def is_secure(self) -> bool:
        """True if the endpoint is reached over TLS."""
        return self._config.is_secure

    def _prepare(self, method: str, verb: Union[HttpVerb, str], arguments: Arguments) -> PreparedCall:
        verb = HttpVerb.coerce(verb)
        encoded = encode_params(arguments, self._config.api_key)
        call = build_request(self._config, method, encoded, verb)
        logger.debug("%s %s", call.verb.value, redact(call.url, self._config.api_key))
        return call

    def _transport_error(self, call: PreparedCall, e: TransportError) -> TransportError:
        message = redact(str(e), self._config.api_key)
        cause = e.__cause__
        if cause is not None and type(cause).__name__ not in message:
            message = f"{message} ({type(cause).__name__})"
        logger.error("%s %s failed: %s", call.verb.value, call.url.split("?", 1)[0], message)
        return TransportError(message)

    def __repr__(self):
        return f"{type(self).__name__}({self._config!r})"


class EPLiteClient(_ClientBase):
    """Blocking client; every call is exactly one HTTP exchange."""

    def _default_transport(self):
        return HttpTransport(timeout=self._config.timeout)

    def invoke(self, method: str, verb: Union[HttpVerb, str], arguments: Arguments = None) -> Payload:
        """
        Call an API method and return its data payload.

        Raises ConfigurationError for a verb other than GET/POST (nothing is
        sent), TransportError when the exchange fails, ProtocolError for a
        body that is not an API envelope and RemoteError for failure codes.
        """
        call = self._prepare(method, verb, arguments)
        try:
            text = self._transport.send(call)
        except TransportError as e:
            raise self._transport_error(call, e) from None
        return decode_response(text, lenient_json=self._config.lenient_json)

    def close(self):
        if self._owns_transport:
            self._transport.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class AsyncEPLiteClient(_ClientBase):
    """Same API as EPLiteClient, but ``invoke`` and every wrapper are awaitable."""

    def _default_transport(self):
        return AsyncHttpTransport(timeout=self._config.timeout)

    async def invoke(self, method: str, verb: Union[HttpVerb, str], arguments: Arguments = None) -> Payload:
        call = self._prepare(method, verb, arguments)
        try:
            text = await self._transport.send(call)
        except TransportError as e:
            raise self._transport_error(call, e) from None
        return decode_response(text, lenient_json=self._config.lenient_json)

    async def aclose(self):
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
