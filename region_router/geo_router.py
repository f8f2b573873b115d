"""Geo-routing logic: pick the closest database that actually exists"""
import logging
from typing import Optional, Sequence
from urllib.parse import urlsplit

from region_router.regions import preference_list

logger = logging.getLogger(__name__)

UNKNOWN_REGION = "unknown"

def database_host(connection_string: str) -> Optional[str]:
    """Hostname embedded in a connection string, e.g. "eu-west.connect.psdb.cloud" """
    return urlsplit(connection_string).hostname

def resolve(compute_region: str, is_primary_region: bool, connection_strings: Sequence[str]) -> str:
    """
    Choose the connection string with the lowest expected latency from this Fly region.

    A plain Fly region -> database region lookup is not enough: the closest
    PlanetScale region may not have a database in it. So walk the region's
    preference list, best first, and take the first connection string that
    mentions that region. The first connection string is assumed to be the
    primary and is used whenever nothing better can be determined.

    Matching is a plain substring test, so "ap-south" also matches an
    "ap-southeast" hostname. Region slugs need delimiting before that can change.
    """
    primary = connection_strings[0]

    if not compute_region or compute_region == UNKNOWN_REGION:
        # Probably running locally
        logger.debug("Fly region unknown, using the first database (the primary)")
        return primary

    if is_primary_region:
        # Also the path taken by replayed writes
        logger.debug("Running in the primary region, using the first database (the primary)")
        return primary

    db_regions = preference_list(compute_region)
    if not db_regions:
        logger.debug("No database region preferences for Fly region %s, using the primary", compute_region)
        return primary

    logger.debug("Database regions considered for %s: %s", compute_region, ",".join(db_regions))
    for db_region in db_regions:
        for connection_string in connection_strings:
            if db_region in connection_string:
                logger.debug("Closest available database: %s", database_host(connection_string))
                return connection_string

    # Most likely the hostnames no longer contain the region slugs we look for
    logger.debug("No preferred database region matched, using the primary")
    return primary
