"""
Apply pending alembic revisions at startup.

History is kept in the ``alembic_version`` table of the same database, so
revisions that already ran are skipped. Any failure propagates and aborts
startup; the server never runs against a half-migrated schema.
"""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config

from app.core.config import Settings

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent.parent / "alembic"


def alembic_config(settings: Settings) -> Config:
    """Build the alembic Config in code; no alembic.ini is needed at runtime."""
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    # ConfigParser interpolation: escape % in percent-encoded passwords
    cfg.set_main_option(
        "sqlalchemy.url", str(settings.SQLALCHEMY_DATABASE_URI).replace("%", "%%")
    )
    return cfg


def run_migrations(settings: Settings) -> None:
    logger.info("Running database migrations")
    command.upgrade(alembic_config(settings), "head")
    logger.info("Database migrations completed successfully")
