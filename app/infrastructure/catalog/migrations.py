"""
Schema migrations for the catalog store, run through Alembic.

Migrations are applied explicitly (``products-api migrate`` or the
``MIGRATE_ON_STARTUP`` setting), never implicitly by the repository.
Revision scripts live in the ``schema`` directory next to this module;
Alembic records the applied revision in ``alembic_version``.
"""

import logging
from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

SCRIPT_LOCATION = Path(__file__).resolve().parent / "schema"


def alembic_config() -> Config:
    """Build an Alembic config pointing at the bundled revision scripts."""
    config = Config()
    config.set_main_option("script_location", str(SCRIPT_LOCATION))
    return config


def head_revision() -> Optional[str]:
    """Return the newest revision shipped with the application."""
    return ScriptDirectory.from_config(alembic_config()).get_current_head()


def current_version(engine: Engine) -> Optional[str]:
    """Return the revision the database is at (None when never migrated)."""
    with engine.connect() as conn:
        return MigrationContext.configure(conn).get_current_revision()


def apply_migrations(engine: Engine) -> Optional[str]:
    """Upgrade the database to the newest revision.

    Already-applied revisions are skipped, so calling this repeatedly
    is safe.

    Args:
        engine: Engine bound to the target database.

    Returns:
        The revision the database is at afterwards.
    """
    config = alembic_config()

    with engine.begin() as conn:
        before = MigrationContext.configure(conn).get_current_revision()
        config.attributes["connection"] = conn
        command.upgrade(config, "head")
        after = MigrationContext.configure(conn).get_current_revision()

    if before == after:
        logger.info("Schema is up to date at revision %s", after)
    else:
        logger.info("Schema migrated from %s to %s", before or "base", after)
    return after
