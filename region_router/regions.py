"""Fly region -> PlanetScale regions, ordered from likely best to likely worst latency.

Hand-curated from ping data (e.g. https://www.cloudping.co/grid). Beyond the
first few entries latency is a lot higher, so the head of each row matters most.
Edit the rows here; the resolver only assumes "given order is preference order".

See:
https://fly.io/docs/reference/regions
https://docs.planetscale.com/concepts/regions
"""
from typing import Dict, Tuple

_EUROPE_CENTRAL = (
    "eu-central", "eu-west", "us-east", "us-west", "ap-south",
    "aws-sa-east-1", "ap-southeast", "ap-northeast", "aws-ap-southeast-2",
)
_US_EAST = (
    "us-east", "us-west", "aws-sa-east-1", "eu-west", "eu-central",
    "ap-southeast", "ap-northeast", "aws-ap-southeast-2", "ap-south",
)
_US_WEST = (
    "us-west", "us-east", "aws-sa-east-1", "eu-west", "eu-central",
    "ap-southeast", "ap-northeast", "aws-ap-southeast-2", "ap-south",
)

REGION_PREFERENCES: Dict[str, Tuple[str, ...]] = {
    "ams": _EUROPE_CENTRAL,  # Amsterdam
    "cdg": _EUROPE_CENTRAL,  # Paris
    "dfw": _US_EAST,  # Dallas
    "ewr": _US_EAST,  # Secaucus, NJ
    "fra": _EUROPE_CENTRAL,  # Frankfurt
    "gru": (  # Sao Paulo
        "aws-sa-east-1", "us-east", "us-west", "eu-west", "aws-ap-southeast-2",
        "eu-central", "ap-south", "ap-southeast", "ap-northeast",
    ),
    "hkg": (  # Hong Kong
        "ap-northeast", "ap-southeast", "aws-ap-southeast-2", "us-west", "us-east",
        "ap-south", "aws-sa-east-1", "eu-central", "eu-west",
    ),
    "iad": _US_EAST,  # Ashburn, Virginia
    "lax": _US_WEST,  # Los Angeles
    "lhr": (  # London
        "eu-west", "eu-central", "us-east", "us-west", "ap-south",
        "aws-sa-east-1", "ap-southeast", "ap-northeast", "aws-ap-southeast-2",
    ),
    "maa": (  # Chennai
        "ap-south", "ap-southeast", "aws-ap-southeast-2", "ap-northeast", "eu-central",
        "eu-west", "us-east", "us-west", "aws-sa-east-1",
    ),
    "mad": _EUROPE_CENTRAL,  # Madrid
    "mia": _US_EAST,  # Miami
    "nrt": (  # Tokyo
        "ap-northeast", "ap-southeast", "aws-ap-southeast-2", "us-west", "us-east",
        "eu-central", "eu-west", "ap-south", "aws-sa-east-1",
    ),
    "ord": _US_EAST,  # Chicago
    "scl": (  # Santiago
        "aws-sa-east-1", "us-east", "us-west", "aws-ap-southeast-2", "eu-central",
        "eu-west", "ap-south", "ap-southeast", "ap-northeast",
    ),
    "sea": _US_WEST,  # Seattle
    "sin": (  # Singapore
        "ap-southeast", "aws-ap-southeast-2", "ap-northeast", "ap-south", "aws-sa-east-1",
        "eu-central", "eu-west", "us-west", "us-east",
    ),
    "sjc": _US_WEST,  # Sunnyvale
    "syd": (  # Sydney
        "aws-ap-southeast-2", "ap-southeast", "ap-northeast", "ap-south", "us-west",
        "us-east", "eu-central", "eu-west", "aws-sa-east-1",
    ),
    "yyz": (  # Toronto
        "us-east", "us-west", "eu-west", "eu-central", "aws-sa-east-1",
        "ap-southeast", "ap-northeast", "aws-ap-southeast-2", "ap-south",
    ),
}

def preference_list(compute_region: str) -> Tuple[str, ...]:
    """Database regions to try for a Fly region, best first. Empty if the region is not listed."""
    return REGION_PREFERENCES.get(compute_region, ())

def known_regions() -> Tuple[str, ...]:
    return tuple(REGION_PREFERENCES)
