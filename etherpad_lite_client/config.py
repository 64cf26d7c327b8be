# config.py - immutable endpoint configuration
import os
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from .errors import ConfigurationError

TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class EndpointConfig:
    """Where the API lives and how to authenticate against it.

    ``base_url`` is absolute and may carry a port and a base path, e.g.
    ``https://pad.example.com:9001/api``. ``lenient_json`` turns an
    unparseable response body into an empty payload instead of a
    ``ProtocolError``.
    """

    base_url: str
    api_key: str
    timeout: float = 30.0
    lenient_json: bool = False

    def __post_init__(self):
        parts = urlsplit(self.base_url or "")
        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise ConfigurationError(f"base_url must be an absolute http(s) URL, got {self.base_url!r}")
        try:
            parts.port
        except ValueError:
            raise ConfigurationError(f"base_url has an invalid port: {self.base_url!r}")
        if not self.api_key:
            raise ConfigurationError("api_key must not be empty")

    @property
    def scheme(self) -> str:
        return urlsplit(self.base_url).scheme

    @property
    def netloc(self) -> str:
        return urlsplit(self.base_url).netloc

    @property
    def base_path(self) -> str:
        return urlsplit(self.base_url).path.rstrip("/")

    @property
    def port(self) -> Optional[int]:
        return urlsplit(self.base_url).port

    @property
    def is_secure(self) -> bool:
        return self.scheme == "https" or self.port == 443

    def __repr__(self):
        return f"EndpointConfig(base_url={self.base_url!r}, api_key='***', timeout={self.timeout!r}, lenient_json={self.lenient_json!r})"

    @classmethod
    def from_env(cls, environ=None) -> "EndpointConfig":
        env = os.environ if environ is None else environ
        base_url = env.get("EPLITE_BASE_URL", "")
        api_key = env.get("EPLITE_API_KEY", "")
        try:
            timeout = float(env.get("EPLITE_TIMEOUT", "30"))
        except ValueError:
            raise ConfigurationError(f"EPLITE_TIMEOUT is not a number: {env.get('EPLITE_TIMEOUT')!r}")
        lenient = env.get("EPLITE_LENIENT_JSON", "").strip().lower() in TRUTHY
        return cls(base_url=base_url, api_key=api_key, timeout=timeout, lenient_json=lenient)
