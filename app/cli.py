"""
CLI entry point for the products API.

Usage:
    # Serve the API
    products-api serve --port 4000

    # Apply pending schema migrations
    products-api migrate
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from app.core.config import settings
from app.core.database import build_engine, describe_engine
from app.infrastructure.catalog.migrations import apply_migrations, current_version
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the HTTP server."""
    import uvicorn

    logger.info("Starting API at http://%s:%d", args.host, args.port)
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=args.reload)


def cmd_migrate(args: argparse.Namespace) -> None:
    """Apply pending schema migrations."""
    engine = build_engine(settings.get_database_url(), ssl_required=settings.database_ssl)
    try:
        logger.info("Migrating %s", describe_engine(engine))
        apply_migrations(engine)
        logger.info("Schema revision is now %s", current_version(engine))
    finally:
        engine.dispose()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="products-api", description=__doc__.strip().splitlines()[0])
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--host", default=settings.host)
    serve.add_argument("--port", type=int, default=settings.port)
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    serve.set_defaults(func=cmd_serve)

    migrate = sub.add_parser("migrate", help="Apply pending schema migrations")
    migrate.set_defaults(func=cmd_migrate)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging(level=settings.log_level)
    args = build_parser().parse_args(argv)
    args.func(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
