from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    # Address lookup API
    lookup_base_url: str
    lookup_path: str

    # Cache
    cache_ttl_seconds: int
    cache_maxsize: int

    # HTTP
    http_timeout_seconds: float
    http_user_agent: str

    # Server
    log_level: str
    mcp_host: str
    mcp_port: int
    mcp_path: str


def _clean(s: str | None) -> str:
    return (s or "").strip().strip('"').strip("'")


def _int(name: str, default: int) -> int:
    v = _clean(os.getenv(name, str(default)))
    return int(v)


def _float(name: str, default: float) -> float:
    v = _clean(os.getenv(name, str(default)))
    return float(v)


def get_settings() -> Settings:
    base_url = _clean(os.getenv("ADDRESS_LOOKUP_BASE_URL", "http://localhost:3000"))
    if not base_url:
        raise RuntimeError("ADDRESS_LOOKUP_BASE_URL is empty in environment (.env).")

    return Settings(
        lookup_base_url=base_url,
        lookup_path=_clean(os.getenv("ADDRESS_LOOKUP_PATH", "/api/getAddresses")),
        # cache
        cache_ttl_seconds=_int("LOOKUP_CACHE_TTL_SECONDS", 300),
        cache_maxsize=_int("LOOKUP_CACHE_MAXSIZE", 1024),
        # http
        http_timeout_seconds=_float("HTTP_TIMEOUT_SECONDS", 10.0),
        http_user_agent=_clean(os.getenv("HTTP_USER_AGENT", "address-book-mcp/0.1.0")),
        # server
        log_level=_clean(os.getenv("LOG_LEVEL", "INFO")).upper(),
        mcp_host=_clean(os.getenv("MCP_HOST", "127.0.0.1")),
        mcp_port=_int("MCP_PORT", 3334),
        mcp_path=_clean(os.getenv("MCP_PATH", "/mcp")),
    )
