"""Host startup entrypoint: database stage followed by registered mods."""

from typing import Optional

from ref_friendly_quests.config import Settings, settings as default_settings
from ref_friendly_quests.core.logging import get_logger, setup_logging
from ref_friendly_quests.db.database import DatabaseService
from ref_friendly_quests.modules.database.module import DatabaseImporter
from ref_friendly_quests.modules.mod_loader import ModLoader
from ref_friendly_quests.modules.ref_quests.module import RefFriendlyQuests
from ref_friendly_quests.services.item_helper import ItemHelper
from ref_friendly_quests.services.mod_helper import ModHelper

logger = get_logger(__name__)


def build_loader(settings: Settings) -> tuple[ModLoader, DatabaseService]:
    """Wire the host stand-in and register every load-order component."""
    database = DatabaseService()
    loader = ModLoader()
    loader.register(DatabaseImporter(database, settings.DATABASE_PATH))
    loader.register(
        RefFriendlyQuests(
            database=database,
            mod_helper=ModHelper(settings.MOD_PATH),
            item_helper=ItemHelper(database),
        )
    )
    return loader, database


def run(settings: Optional[Settings] = None) -> DatabaseService:
    """Run the full startup sequence once and return the patched database."""
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    logger.info("Starting load sequence...")
    loader, database = build_loader(settings)
    loader.load()
    logger.info("Load sequence complete.")
    return database
