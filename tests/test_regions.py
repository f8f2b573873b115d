import pytest
from region_router.regions import REGION_PREFERENCES, known_regions, preference_list

ALL_DATABASE_REGIONS = {
    "us-east", "us-west", "eu-west", "eu-central", "ap-south",
    "ap-southeast", "ap-northeast", "aws-sa-east-1", "aws-ap-southeast-2",
}

@pytest.mark.parametrize("region", known_regions())
def test_known_region_preferences_are_unique(region):
    """Every listed Fly region has a non-empty list without duplicates"""
    preferences = preference_list(region)
    assert len(preferences) > 0
    assert len(set(preferences)) == len(preferences)

@pytest.mark.parametrize("region", known_regions())
def test_known_region_covers_every_database_region(region):
    """Rows only name real PlanetScale regions"""
    assert set(preference_list(region)) <= ALL_DATABASE_REGIONS

@pytest.mark.parametrize("region", ["", "unknown", "xyz", "LHR"])
def test_unlisted_region_has_no_preferences(region):
    assert preference_list(region) == ()

def test_closest_region_first():
    """Spot-check the head of a few rows"""
    assert preference_list("lhr")[:2] == ("eu-west", "eu-central")
    assert preference_list("fra")[0] == "eu-central"
    assert preference_list("sjc")[0] == "us-west"
    assert preference_list("gru")[0] == "aws-sa-east-1"
    assert preference_list("syd")[0] == "aws-ap-southeast-2"
    assert preference_list("maa")[0] == "ap-south"

def test_known_regions_match_table():
    assert set(known_regions()) == set(REGION_PREFERENCES)
    assert len(known_regions()) == 21
