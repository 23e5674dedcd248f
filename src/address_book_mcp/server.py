from __future__ import annotations

import logging

from fastmcp import FastMCP

from address_book_mcp.app.container import build_container
from address_book_mcp.app.logger import configure_logging
from address_book_mcp.app.settings import get_settings
from address_book_mcp.tools.address_book_tools import register_address_book_tools

_settings = get_settings()
configure_logging(_settings.log_level)
log = logging.getLogger(__name__)

mcp = FastMCP("address-book-mcp")

try:
    _container = build_container(_settings)
    register_address_book_tools(mcp, _container)
    log.info("Address book tools registered successfully")
except Exception as e:
    log.error("Failed to register address book tools: %s", e, exc_info=True)
    raise


def main() -> None:
    try:
        mcp.run(
            transport="http",
            host=_settings.mcp_host,
            port=_settings.mcp_port,
            path=_settings.mcp_path,
        )
    finally:
        _container.http.close()


if __name__ == "__main__":
    main()
