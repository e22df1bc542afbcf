# ABOUTME: Registry mapping command-line alert type names to the sources that serve them
# ABOUTME: One Site is selected per run; an unknown name is a configuration error

from enum import Enum

from rastreadora.errors import ConfigurationError
from rastreadora.extraction.base import Site
from rastreadora.extraction.sites import cdmx, chis, gro, mor


class SiteName(str, Enum):
    CDMX_CUSTOM = "cdmx-custom"
    CHIS_HASVISTOA = "chis-hasvistoa"
    GRO_ALBA = "gro-alba"
    GRO_AMBER = "gro-amber"
    GRO_HASVISTOA = "gro-hasvistoa"
    MOR_AMBER = "mor-amber"
    MOR_CUSTOM = "mor-custom"


SITES: dict[SiteName, Site] = {
    SiteName.CDMX_CUSTOM: Site(
        name=SiteName.CDMX_CUSTOM.value,
        description="Mexico City prosecutor's missing persons registry",
        build_url=cdmx.build_url,
        extract=cdmx.extract,
    ),
    SiteName.CHIS_HASVISTOA: Site(
        name=SiteName.CHIS_HASVISTOA.value,
        description="Chiapas prosecutor's \"Has visto a\" listing",
        build_url=chis.build_url,
        extract=chis.extract,
        enrich=chis.enrich,
    ),
    SiteName.GRO_ALBA: Site(
        name=SiteName.GRO_ALBA.value,
        description="Guerrero prosecutor's Alba alerts",
        build_url=gro.build_alba_url,
        extract=gro.extract_alba,
    ),
    SiteName.GRO_AMBER: Site(
        name=SiteName.GRO_AMBER.value,
        description="Guerrero prosecutor's Amber alerts",
        build_url=gro.build_amber_url,
        extract=gro.extract_amber,
    ),
    SiteName.GRO_HASVISTOA: Site(
        name=SiteName.GRO_HASVISTOA.value,
        description="Guerrero prosecutor's \"Has visto a\" alerts",
        build_url=gro.build_has_visto_a_url,
        extract=gro.extract_has_visto_a,
    ),
    SiteName.MOR_AMBER: Site(
        name=SiteName.MOR_AMBER.value,
        description="Morelos prosecutor's Amber alerts",
        build_url=mor.build_amber_url,
        extract=mor.extract_amber,
        enrich=mor.enrich_amber,
    ),
    SiteName.MOR_CUSTOM: Site(
        name=SiteName.MOR_CUSTOM.value,
        description="Morelos prosecutor's missing persons cards",
        build_url=mor.build_custom_url,
        extract=mor.extract_custom,
    ),
}


def available_sites() -> list[str]:
    """Alert type names accepted on the command line, sorted."""
    return sorted(name.value for name in SITES)


def get_site(name: str | SiteName) -> Site:
    """Look up a source by its alert type name.

    Raises:
        ConfigurationError: If no source is registered under ``name``
    """
    try:
        return SITES[SiteName(name)]
    except ValueError as e:
        raise ConfigurationError(f"unknown alert type {name!r}, expected one of {', '.join(available_sites())}") from e
