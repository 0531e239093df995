"""
Programmatic Alembic runner used by the startup sequence.

The upgrade runs on a connection borrowed from the application's own
engine: ``alembic/env.py`` picks it up from ``config.attributes`` instead
of building a second engine.  Already-applied revisions are skipped, so
running this on every boot is safe.
"""
import logging
from pathlib import Path

from alembic import command
from alembic.config import Config

from book_api.database import Database

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
ALEMBIC_INI = PROJECT_ROOT / "alembic.ini"
SCRIPT_LOCATION = PROJECT_ROOT / "alembic"


def alembic_config(url: str) -> Config:
    config = Config(str(ALEMBIC_INI)) if ALEMBIC_INI.exists() else Config()
    config.set_main_option("script_location", str(SCRIPT_LOCATION))
    # ConfigParser interpolation would choke on '%' in URL-encoded passwords.
    config.set_main_option("sqlalchemy.url", url.replace("%", "%%"))
    # The application owns logging configuration; skip env.py's fileConfig.
    config.attributes["configure_logger"] = False
    return config


def _upgrade(connection, config: Config, revision: str) -> None:
    config.attributes["connection"] = connection
    command.upgrade(config, revision)


async def apply_migrations(db: Database, revision: str = "head") -> None:
    """Bring the schema behind *db* up to *revision*."""
    config = alembic_config(db.url)
    logger.info("Applying migrations up to %s", revision)
    async with db.engine.begin() as conn:
        await conn.run_sync(_upgrade, config, revision)
    logger.info("Migrations complete")
