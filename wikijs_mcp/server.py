"""
Wiki.js MCP Server - Main Entry Point

FastMCP server with STDIO and SSE transport support.
"""

import argparse
import logging
import sys
from fastmcp import FastMCP

from wikijs_mcp.api import ConfigurationError, WikiJSClient
from wikijs_mcp.config import get_settings

# Import tools and resources (registered with decorators)
from wikijs_mcp.tools import (
    search_pages,
    list_pages,
    get_page,
    create_page,
    update_page,
    delete_page,
    get_page_tree,
    get_page_tags,
    add_page_tags,
    remove_page_tags,
    search_by_tags,
    list_all_tags,
)
from wikijs_mcp.resources import pages

logger = logging.getLogger(__name__)

ROUTERS = [
    search_pages.router,
    list_pages.router,
    get_page.router,
    create_page.router,
    update_page.router,
    delete_page.router,
    get_page_tree.router,
    get_page_tags.router,
    add_page_tags.router,
    remove_page_tags.router,
    search_by_tags.router,
    list_all_tags.router,
    pages.router,
]


def create_app() -> FastMCP:
    """Create and configure the MCP application."""
    mcp = FastMCP(
        name="wikijs-mcp",
        instructions="Read, edit, tag and browse pages of a Wiki.js instance",
    )

    # Register all tools and resources
    for router in ROUTERS:
        mcp.mount(router)

    # Page resources are listed per request from Wiki.js
    mcp.add_middleware(pages.PageResourceListing())

    return mcp


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Wiki.js MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=None,
        help="Transport protocol (default: from env)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for SSE transport (default: from env)"
    )
    args = parser.parse_args()

    settings = get_settings()
    # stdout carries the stdio protocol, logging goes to stderr
    logging.basicConfig(
        level=settings.log.level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Fail once at startup instead of on every tool call
    try:
        WikiJSClient(settings)
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    transport = args.transport or settings.mcp.transport
    port = args.port or settings.mcp.port

    mcp = create_app()
    logger.info("Wiki.js MCP server targeting %s", settings.wikijs.api_url)

    if transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(transport="sse", host=settings.mcp.host, port=port)


if __name__ == "__main__":
    main()
