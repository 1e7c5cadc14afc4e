from __future__ import annotations

import argparse
import logging

from . import __version__
from ._logging import setup_colored_logging
from .config import ServerConfig

logger = logging.getLogger(__name__)

_DESCRIPTION = """\
mrya-lsp: Language Server Protocol implementation for the Mrya language

Provides editor support for .mrya files with:
• Context-aware completion of keywords, builtins, modules and your declarations
• Import path completion for native modules, packages and workspace files
• Hover documentation for builtin functions and module members"""


def main():
    """Main entry point for the language server."""
    parser = argparse.ArgumentParser(
        description=_DESCRIPTION,
        prog="mrya-lsp",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: %(default)s)",
    )
    parser.add_argument(
        "--package-modules",
        type=str,
        help="Comma-separated list of additional package modules offered in import paths (e.g., sprites,net)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    server_parser = subparsers.add_parser(
        "server",
        help="Start the LSP server",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    server_parser.add_argument("--tcp", action="store_true", help="Use TCP instead of stdio")
    server_parser.add_argument(
        "--port", type=int, default=8080, help="TCP port to listen on (default: %(default)s)"
    )
    server_parser.add_argument("--stdio", action="store_true", help="Use stdio (default)")

    args = parser.parse_args()

    if args.command is None:
        parser.error(
            "A subcommand is required. Use 'mrya-lsp server' to start the LSP server.\n"
            "See 'mrya-lsp --help' for available commands."
        )

    if args.tcp and args.stdio:
        parser.error("--tcp and --stdio are mutually exclusive")

    setup_colored_logging(level=getattr(logging, args.log_level))

    config = ServerConfig.from_arguments(args.package_modules)
    if config.extra_package_modules:
        logger.info(f"Extra package modules: {', '.join(config.extra_package_modules)}")

    # Import server only when actually needed
    from .server import create_server

    server = create_server(config=config)

    if args.tcp:
        logger.info(f"Starting Mrya LSP server ({__version__}) on TCP port {args.port}")
        server.start_tcp("localhost", args.port)
    else:
        logger.info(f"Starting Mrya LSP server ({__version__}) on stdio")
        server.start_io()


if __name__ == "__main__":
    main()
