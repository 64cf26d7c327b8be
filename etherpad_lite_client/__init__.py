from .api_client import AsyncHttpTransport, HttpTransport
from .client import AsyncEPLiteClient, EPLiteClient
from .config import EndpointConfig
from .encoding import encode_params
from .envelope import StatusCode, decode_response
from .errors import (
    ConfigurationError,
    EPLiteError,
    InternalServerError,
    InvalidApiKeyError,
    InvalidMethodError,
    InvalidParametersError,
    ProtocolError,
    RemoteError,
    TransportError,
)
from .request import API_VERSION, HttpVerb, PreparedCall, build_request
from .sessions import hours_from_now, to_unix_seconds

__version__ = "0.1.0"
