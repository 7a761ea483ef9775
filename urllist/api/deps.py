import logging
import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from urllist.adapters.sqlite.migrator import SQLiteMigrator
from urllist.adapters.sqlite.repos import SQLiteListRepo

# Components are stateless, so we build them per request from injected repos.
from urllist.components.lists import ListService
from urllist.components.publish import PublishComponent
from urllist.rules.loader import load_rules
from urllist.rules.models import Rules

logger = logging.getLogger(__name__)


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("URLLIST_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "urllist.db")
        self.rules_path = Path(
            os.environ.get("URLLIST_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )
        self.site_url = os.environ.get("SITE_URL") or None


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    settings = get_settings()
    if not settings.rules_path.exists():
        logger.warning("Rules file %s not found, using defaults", settings.rules_path)
        return Rules()
    return load_rules(settings.rules_path)


def get_site_url(
    settings: Settings = Depends(get_settings),
    rules: Rules = Depends(get_rules),
) -> str:
    """Origin used in share URLs: SITE_URL, else the rules default."""
    return settings.site_url or rules.sharing.default_site_url


# --- Database initialisation ---
_initialized_dbs: set[str] = set()


def init_db(db_path: str) -> None:
    """Create the data directory and apply migrations once per database."""
    if db_path in _initialized_dbs:
        return

    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    applied = SQLiteMigrator(db_path).run_migrations()
    if applied:
        logger.info("Database %s initialised (%d migrations)", db_path, len(applied))
    _initialized_dbs.add(db_path)


# --- Repos ---
def get_list_repo(settings: Settings = Depends(get_settings)) -> SQLiteListRepo:
    init_db(settings.db_path)
    return SQLiteListRepo(settings.db_path)


# --- Component Services ---
def get_list_service(
    repo: SQLiteListRepo = Depends(get_list_repo),
    rules: Rules = Depends(get_rules),
) -> ListService:
    return ListService(repo=repo, rules=rules)


def get_publish_component(
    repo: SQLiteListRepo = Depends(get_list_repo),
    site_url: str = Depends(get_site_url),
    rules: Rules = Depends(get_rules),
) -> PublishComponent:
    return PublishComponent(repo=repo, site_url=site_url, path_prefix=rules.sharing.path_prefix)
