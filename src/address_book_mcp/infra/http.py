from __future__ import annotations

import logging
from typing import Any

import httpx

from address_book_mcp.core.errors import UpstreamError

log = logging.getLogger(__name__)


class HttpClient:
    def __init__(
        self,
        *,
        timeout_seconds: float,
        user_agent: str,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            timeout=timeout_seconds,
            headers={"User-Agent": user_agent},
            transport=transport,
        )

    def get_json(self, url: str, *, params: dict[str, Any]) -> Any:
        try:
            r = self._client.get(url, params=params)
            r.raise_for_status()
            return r.json()
        except httpx.HTTPStatusError as e:
            log.warning("HTTP status error: %s", e)
            raise UpstreamError(
                f"Upstream HTTP error: {e}",
                status_code=e.response.status_code,
                payload=_json_or_none(e.response),
            ) from e
        except httpx.HTTPError as e:
            log.warning("HTTP error: %s", e)
            raise UpstreamError(f"Upstream HTTP error: {e}") from e
        except ValueError as e:
            log.warning("Invalid JSON from %s: %s", url, e)
            raise UpstreamError("Upstream returned invalid JSON") from e

    def close(self) -> None:
        try:
            self._client.close()
        except Exception:
            # close failures only happen at shutdown
            pass


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
