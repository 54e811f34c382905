import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)

PROPERTIES_PATH = Path(__file__).resolve().parent / "config.properties"

DEFAULT_BASE_URL = "https://fakerestapi.azurewebsites.net"
DEFAULT_API_VERSION = "/api/v1"
DEFAULT_BOOKS_ENDPOINT = "/Books"
DEFAULT_AUTHORS_ENDPOINT = "/Authors"
DEFAULT_REQUEST_TIMEOUT_MS = 30000
DEFAULT_CONNECTION_TIMEOUT_MS = 10000
DEFAULT_LOG_LEVEL = "INFO"


def env_key(key: str) -> str:
    """base.url -> BASE_URL"""
    return key.upper().replace(".", "_")


def load_properties(path) -> Dict[str, str]:
    """
    Reads a Java-style .properties file into a dict.

    Only the simple forms are supported: `key=value` and `key: value`, one per
    line, with `#` and `!` comment lines. A missing or unreadable file is logged
    and treated as empty so environment variables and defaults keep working.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Unable to read configuration file {path}: {e}")
        return {}

    data: Dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line[0] in "#!":
            continue
        positions = [p for p in (line.find("="), line.find(":")) if p != -1]
        if not positions:
            continue
        sep = min(positions)
        key = line[:sep].strip()
        if key:
            data[key] = line[sep + 1:].strip()

    logger.info(f"Configuration loaded successfully from {path} ({len(data)} keys)")
    return data


class PropertySource:
    """Raw key lookup: override -> environment -> properties file -> default."""

    def __init__(self, properties: Mapping[str, str], environ: Optional[Mapping[str, str]] = None,
                 overrides: Optional[Mapping[str, str]] = None):
        self._properties = dict(properties)
        self._environ = dict(os.environ if environ is None else environ)
        self._overrides = {k: v for k, v in (overrides or {}).items() if v}

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        if key in self._overrides:
            return self._overrides[key]

        env_value = self._environ.get(env_key(key))
        if env_value:
            logger.debug(f"Using environment variable {env_key(key)} for key {key}")
            return env_value

        value = self._properties.get(key)
        return value if value is not None else default

    def get_int(self, key: str, default: int) -> int:
        raw = self.get(key)
        if raw is None or raw == "":
            return default
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"Configuration key '{key}' must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class ApiConfig:
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    books_endpoint: str = DEFAULT_BOOKS_ENDPOINT
    authors_endpoint: str = DEFAULT_AUTHORS_ENDPOINT
    request_timeout_ms: int = DEFAULT_REQUEST_TIMEOUT_MS
    connection_timeout_ms: int = DEFAULT_CONNECTION_TIMEOUT_MS
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def books_path(self) -> str:
        return self.api_version + self.books_endpoint

    @property
    def authors_path(self) -> str:
        return self.api_version + self.authors_endpoint

    @classmethod
    def from_source(cls, source: PropertySource) -> "ApiConfig":
        return cls(
            base_url=source.get("base.url", DEFAULT_BASE_URL),
            api_version=source.get("api.version", DEFAULT_API_VERSION),
            books_endpoint=source.get("books.endpoint", DEFAULT_BOOKS_ENDPOINT),
            authors_endpoint=source.get("authors.endpoint", DEFAULT_AUTHORS_ENDPOINT),
            request_timeout_ms=source.get_int("request.timeout", DEFAULT_REQUEST_TIMEOUT_MS),
            connection_timeout_ms=source.get_int("connection.timeout", DEFAULT_CONNECTION_TIMEOUT_MS),
            log_level=source.get("log.level", DEFAULT_LOG_LEVEL).upper(),
        )


def load_config(properties_path=PROPERTIES_PATH, environ: Optional[Mapping[str, str]] = None,
                overrides: Optional[Mapping[str, str]] = None) -> ApiConfig:
    source = PropertySource(load_properties(properties_path), environ=environ, overrides=overrides)
    return ApiConfig.from_source(source)


_config: Optional[ApiConfig] = None
_config_lock = threading.Lock()


def get_config(overrides: Optional[Mapping[str, str]] = None) -> ApiConfig:
    """
    Returns the process-wide configuration, resolving it on first use.

    Overrides only take effect on the call that performs the resolution; later
    callers get the already-resolved value.
    """
    global _config
    if _config is not None:
        return _config
    with _config_lock:
        if _config is None:
            _config = load_config(overrides=overrides)
            logger.info(f"Resolved API configuration: {_config}")
        return _config


def reset_config() -> None:
    """Drops the resolved configuration so the next get_config() resolves again."""
    global _config
    with _config_lock:
        _config = None
