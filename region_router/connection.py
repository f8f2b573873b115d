"""Pick the database connection once, at startup"""
import logging

from region_router.config import Settings
from region_router.errors import ConfigurationError
from region_router.geo_router import UNKNOWN_REGION, database_host, resolve
from region_router.models import RoutingConfig

logger = logging.getLogger(__name__)

def select_connection(settings: Settings) -> RoutingConfig:
    """
    Work out which database this instance should use.

    DATABASE_URL holds either one connection string or several, comma
    separated, with the primary first. With only one there is no choice to make.
    """
    database_url = (settings.database_url or "").strip()
    if not database_url:
        raise ConfigurationError("DATABASE_URL is not set")

    # No point searching preferences when running next to the primary
    is_primary_region = bool(settings.fly_region) and settings.fly_region == settings.primary_region
    fly_region = settings.fly_region or UNKNOWN_REGION
    primary_region = settings.primary_region

    if "," in database_url:
        candidates = [target.strip() for target in database_url.split(",") if target.strip()]
        if not candidates:
            raise ConfigurationError("DATABASE_URL contains no connection strings")
        if len(candidates) == 1:
            database_url = candidates[0]
        else:
            database_url = resolve(fly_region, is_primary_region, candidates)
    else:
        database_url = settings.database_url

    routing = RoutingConfig(
        database_url=database_url,
        database_host=database_host(database_url),
        fly_region=fly_region,
        primary_region=primary_region,
        is_primary_region=is_primary_region,
    )
    logger.info(
        "Fly region %s (primary region: %s) using database host %s",
        routing.fly_region, routing.is_primary_region, routing.database_host,
    )
    return routing
