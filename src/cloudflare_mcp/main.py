"""Entry point for the Cloudflare MCP server."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from cloudflare_mcp.client import CloudflareClient
from cloudflare_mcp.config import CloudflareSettings
from cloudflare_mcp.server import build_fastmcp_app
from mcp_adapter.cli import build_parser, configure_logging, print_catalog, run_app

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Load settings, register tools and serve them over the chosen transport."""
    parser = build_parser("Cloudflare MCP server")
    parser.add_argument(
        "--direct",
        action="store_true",
        help="Call the REST API directly instead of through the API client.",
    )
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        settings = CloudflareSettings()
    except ValidationError:
        logger.error("Cloudflare API token not found in environment variables")
        logger.error("Please set CLOUDFLARE_API_TOKEN")
        return 1

    token_length = len(settings.api_token.get_secret_value())
    logger.info(
        "Initializing Cloudflare client with API token (length: %d characters)",
        token_length,
    )
    client = None if args.direct else CloudflareClient.from_settings(settings)

    app, server = build_fastmcp_app(settings, client)
    if args.catalog:
        print_catalog(server)
        return 0

    logger.info("Cloudflare MCP server running on %s", args.transport)
    run_app(app, args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
