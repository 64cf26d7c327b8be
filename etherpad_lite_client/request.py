# request.py - builds the versioned URL and body for one API call
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
from urllib.parse import urlunsplit

from .config import EndpointConfig
from .errors import ConfigurationError

API_VERSION = 1


class HttpVerb(str, Enum):
    GET = "GET"
    POST = "POST"

    @classmethod
    def coerce(cls, value: Union["HttpVerb", str]) -> "HttpVerb":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.upper())
            except ValueError:
                pass
        raise ConfigurationError(f"{value} is not a valid HTTP method")


@dataclass(frozen=True)
class PreparedCall:
    verb: HttpVerb
    url: str
    body: Optional[str] = None


def api_path(config: EndpointConfig, method: str) -> str:
    return f"{config.base_path}/{API_VERSION}/{method}"


def build_request(config: EndpointConfig, method: str, encoded: str,
                  verb: Union[HttpVerb, str]) -> PreparedCall:
    """GET puts the encoded params in the query, POST puts them in the body."""
    verb = HttpVerb.coerce(verb)
    path = api_path(config, method)
    if verb is HttpVerb.GET:
        url = urlunsplit((config.scheme, config.netloc, path, encoded, ""))
        return PreparedCall(verb, url)
    url = urlunsplit((config.scheme, config.netloc, path, "", ""))
    return PreparedCall(verb, url, encoded)
