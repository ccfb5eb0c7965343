"""Startup configuration: where the merge service lives."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import urlparse

ORG_NAME = "PDphilE"
APP_NAME = "PDphilE"
APP_VERSION = "1.0.0"

API_URL_ENV = "PDPHILE_API_URL"
API_URL_SETTING = "api_url"
DEFAULT_API_URL = "http://localhost:5000"


@dataclass(frozen=True)
class AppConfig:
    api_url: str


def normalize_api_url(value: str) -> str:
    """Strip whitespace and trailing slashes. Raises ValueError if not http(s)."""
    url = (value or "").strip().rstrip("/")
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Invalid merge service URL: '{value}'")
    return url


def resolve_api_url(
    cli_value: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    stored: Optional[str] = None,
) -> str:
    """Pick the base URL: command line, then environment, then saved setting, then default."""
    if environ is None:
        environ = os.environ
    for candidate in (cli_value, environ.get(API_URL_ENV), stored):
        if candidate and candidate.strip():
            return normalize_api_url(candidate)
    return DEFAULT_API_URL


def load_config(cli_value: Optional[str] = None, stored: Optional[str] = None) -> AppConfig:
    return AppConfig(api_url=resolve_api_url(cli_value, stored=stored))
