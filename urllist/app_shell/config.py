import logging

from urllist.api.deps import Settings
from urllist.components.sharing import validate_base_url
from urllist.rules.models import Rules

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Startup configuration is unusable."""


def validate_settings(settings: Settings, rules: Rules) -> str:
    """
    Validate operational settings before startup.

    Returns the effective site URL used for share links.
    """
    site_url = settings.site_url or rules.sharing.default_site_url

    errors = validate_base_url(site_url)
    if errors:
        messages = "; ".join(err.message for err in errors)
        raise ConfigurationError(f"Invalid site URL {site_url!r}: {messages}")

    if settings.site_url is None:
        logger.warning("SITE_URL not set, share links will use %s", site_url)

    if not rules.sharing.path_prefix.startswith("/"):
        logger.warning(
            "sharing.path_prefix %r has no leading slash, one will be added",
            rules.sharing.path_prefix,
        )

    logger.info("Data directory: %s", settings.data_dir.absolute())
    logger.info("Database path: %s", settings.db_path)
    logger.info("Site URL: %s", site_url)
    return site_url
