# utils.py - logging helper and credential redaction
import logging
import os
import re
from urllib.parse import quote_plus

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
PACKAGE_LOGGER = "etherpad_lite_client"
REDACTED = "[REDACTED]"

_APIKEY_PARAM = re.compile(r"(apikey=)(?!\[REDACTED\])[^&\s]*")


def env_log_level(default=logging.WARNING) -> int:
    """EPLITE_LOG_LEVEL as a level number; accepts names or integers."""
    raw = os.environ.get("EPLITE_LOG_LEVEL", "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


def get_logger(name: str = PACKAGE_LOGGER):
    # handler and level live on the package logger only; module loggers inherit
    package = logging.getLogger(PACKAGE_LOGGER)
    if not getattr(package, "_eplite_configured", False):
        package._eplite_configured = True
        if not logging.getLogger().handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            package.addHandler(handler)
        package.setLevel(env_log_level())
    return logging.getLogger(name)


def redact(text, secret: str) -> str:
    """Mask the API key: whole-token matches (raw or form-quoted) and any apikey= value."""
    if text is None:
        return ""
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="ignore")
    text = str(text)
    if not secret:
        return text
    for variant in {secret, quote_plus(secret)}:
        text = re.sub(r"(?<!\w)" + re.escape(variant) + r"(?!\w)", REDACTED, text)
    return _APIKEY_PARAM.sub(r"\1" + REDACTED, text)
