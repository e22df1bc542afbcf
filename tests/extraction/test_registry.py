# ABOUTME: Tests for the alert type registry
# ABOUTME: Every registered source must build URLs and be reachable by its command-line name

import pytest

from rastreadora.errors import ConfigurationError
from rastreadora.extraction.registry import SITES, SiteName, available_sites, get_site


def test_available_sites():
    assert available_sites() == [
        "cdmx-custom",
        "chis-hasvistoa",
        "gro-alba",
        "gro-amber",
        "gro-hasvistoa",
        "mor-amber",
        "mor-custom",
    ]


@pytest.mark.parametrize("name", list(SiteName))
def test_every_site_is_registered(name):
    site = get_site(name.value)
    assert site is SITES[name]
    assert site.name == name.value
    assert site.build_url(1).startswith("https://")


def test_only_detail_page_sources_enrich():
    enriching = sorted(site.name for site in SITES.values() if site.enrich is not None)
    assert enriching == ["chis-hasvistoa", "mor-amber"]


def test_unknown_site():
    with pytest.raises(ConfigurationError, match="unknown alert type 'son-alba'"):
        get_site("son-alba")
