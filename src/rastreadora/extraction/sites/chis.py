# ABOUTME: Chiapas state prosecutor "Has visto a" listing (fge.chiapas.gob.mx)
# ABOUTME: Listing cards give name, links and poster; each card's detail page fills in the description

import math
from datetime import date, datetime
from typing import Any

from rastreadora.core.models import AlertType, Complexion, MissingPersonPoster, PhysicalBuild, Sex, State
from rastreadora.document import Document
from rastreadora.extraction.base import ExtractionOutcome, Retrieve, collect_entries, require
from rastreadora.extraction.sites.common import join_url, optional_url, required_url, title_case

BASE_URL = "https://www.fge.chiapas.gob.mx"

BUILDS = {
    "atletica": PhysicalBuild.SLIM,
    "delgada": PhysicalBuild.SLIM,
    "mediana": PhysicalBuild.REGULAR,
    "regular": PhysicalBuild.REGULAR,
    "obesa": PhysicalBuild.HEAVY,
    "robusta": PhysicalBuild.HEAVY,
}

COMPLEXIONS = {
    "albino": Complexion.VERY_LIGHT,
    "blanca": Complexion.LIGHT,
    "apiñonado": Complexion.LIGHT_INTERMEDIATE,
    "morena clara": Complexion.DARK_INTERMEDIATE,
    "morena": Complexion.DARK,
    "morena obscura": Complexion.VERY_DARK,
}

SEXES = {"hombre": Sex.MALE, "mujer": Sex.FEMALE}

# Order of the 13 "p.color-subtitulo-theme1" values on a detail page
DETAIL_FIELDS = (
    "sex",
    "height",
    "complexion",
    "eyes",
    "hair",
    "weight",
    "missing_date",
    "build",
    "mouth",
    "nose_size",
    "nose_type",
    "schooling_level",
    "origin",
)


def parse_chis_build(value: str) -> PhysicalBuild | None:
    return BUILDS.get(value.strip().lower())


def parse_chis_complexion(value: str) -> Complexion | None:
    return COMPLEXIONS.get(value.strip().lower())


def parse_chis_sex(value: str) -> Sex | None:
    return SEXES.get(value.strip().lower())


def parse_chis_found(value: str) -> bool:
    """The listing only shows people still missing ("Ausente", "No localizada", ...)."""
    return False


def parse_chis_date(value: str) -> date | None:
    """Parse ``"dd/mm/yyyy"``."""
    try:
        return datetime.strptime(value.strip(), "%d/%m/%Y").date()
    except ValueError:
        return None


def parse_chis_height(value: str) -> int | None:
    """Convert ``"1.65 C"`` metres to centimetres."""
    value = value.replace("C", "").strip()
    try:
        meters = float(value)
    except ValueError:
        return None
    if not math.isfinite(meters) or meters < 0:
        return None
    return round(meters * 100)


def parse_chis_weight(value: str) -> int | None:
    """Parse ``"60 Kg."`` into kilograms."""
    value = value.lower().replace("kg", "").replace(".", "").strip()
    try:
        weight = int(value)
    except ValueError:
        return None
    return weight if weight >= 0 else None


def build_url(page_number: int) -> str:
    """Listing pages are numbered from 0 on the site, from 1 on the command line."""
    return f"{BASE_URL}/Servicios/Hasvistoa/Page/{max(page_number - 1, 0)}"


def _build_poster(card: Document) -> MissingPersonPoster:
    link = card.query(".nombre")
    mp_name = require(title_case(link.text()), "mp_name")
    po_post_url = required_url(join_url(BASE_URL, link.attr("href")), "po_post_url")
    poster_url = join_url(BASE_URL, card.query(".contenido-img img").attr("src"))

    return MissingPersonPoster(
        alert_type=AlertType.HAS_VISTO_A,
        found=parse_chis_found(card.query("span").text()),
        mp_name=mp_name,
        po_poster_url=optional_url(poster_url),
        po_post_url=po_post_url,
        po_state=State.CHIAPAS,
    )


def extract(doc: Document) -> ExtractionOutcome:
    return collect_entries(doc.query_all(".column_hasvistoa"), _build_poster)


def parse_detail(doc: Document) -> dict[str, Any]:
    """Read the fields of a detail page that the listing does not show.

    Returns the poster fields to update; values that cannot be parsed are left out.
    """
    updates: dict[str, Any] = {}
    characteristics = ["Registro: " + doc.query(".proile-rating span").text().strip()]

    values = [p.text().strip() for p in doc.query_all("p.color-subtitulo-theme1")]
    if len(values) == len(DETAIL_FIELDS):
        data = dict(zip(DETAIL_FIELDS, values, strict=True))
        updates["mp_sex"] = parse_chis_sex(data["sex"])
        updates["mp_eyes_description"] = data["eyes"]
        updates["mp_hair_description"] = data["hair"]
        updates["mp_physical_build"] = parse_chis_build(data["build"])
        updates["mp_complexion"] = parse_chis_complexion(data["complexion"])
        if (height := parse_chis_height(data["height"])) is not None:
            updates["mp_height"] = height
        if (weight := parse_chis_weight(data["weight"])) is not None:
            updates["mp_weight"] = weight
        if (missing_date := parse_chis_date(data["missing_date"])) is not None:
            updates["missing_date"] = missing_date
        characteristics += [
            "Boca: " + data["mouth"],
            "Tamaño de nariz: " + data["nose_size"],
            "Tipo de nariz: " + data["nose_type"],
            "Escolaridad: " + data["schooling_level"],
            "Originario de: " + data["origin"],
        ]

    more = [p.text().strip() for p in doc.query_all(".profile-work p")]
    if len(more) == 3:
        dob, particular_signs, circumstances = more
        if (parsed_dob := parse_chis_date(dob)) is not None:
            updates["mp_dob"] = parsed_dob
        characteristics.append("Señas particulares: " + particular_signs)
        updates["circumstances_behind_dissapearance"] = circumstances

    updates["mp_identifying_characteristics"] = ", ".join(characteristics)
    return updates


async def enrich(poster: MissingPersonPoster, retrieve: Retrieve) -> MissingPersonPoster:
    doc = await retrieve(str(poster.po_post_url))
    return poster.model_copy(update=parse_detail(doc))
