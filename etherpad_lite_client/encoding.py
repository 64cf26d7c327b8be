# encoding.py - turns call arguments into a form/query string
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

API_KEY_PARAM = "apikey"


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_params(arguments: Optional[Mapping[str, Any]], api_key: str) -> str:
    """
    Encode arguments plus the API key as ``k=v&k=v``.

    - None values are dropped, not sent empty
    - insertion order is kept, the key goes last
    - reserved characters are form-quoted (spaces become '+')
    """
    pairs: Dict[str, str] = {}
    for key, value in (arguments or {}).items():
        if value is None or key == API_KEY_PARAM:
            continue
        pairs[key] = _render(value)
    pairs[API_KEY_PARAM] = api_key
    return urlencode(pairs)
