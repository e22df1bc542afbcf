# ABOUTME: Guerrero state prosecutor (fiscaliaguerrero.gob.mx) Alba, Amber and Has visto a listings
# ABOUTME: Entry titles carry a status legend ("Localizada: <name>") parsed into name, sex and found flag

import functools
from datetime import date

from rastreadora.core.models import AlertType, MissingPersonPoster, Sex, State
from rastreadora.document import Document
from rastreadora.extraction.base import ExtractionOutcome, collect_entries, require
from rastreadora.extraction.sites.common import optional_url, required_url, title_case

BASE_URL = "https://fiscaliaguerrero.gob.mx"

LEGEND_SEPARATORS = (";", ":", ",", ".")

STATUS_LEGENDS: dict[str, tuple[Sex, bool]] = {
    "desaparecida": (Sex.FEMALE, False),
    "localizada": (Sex.FEMALE, True),
    "desaparecido": (Sex.MALE, False),
    "localizado": (Sex.MALE, True),
}


def parse_name_sex_found(legend: str) -> tuple[str, Sex | None, bool]:
    """Split a ``"<status><sep> <name>"`` title into the title-cased name, sex and found flag.

    Titles without a recognised status are returned whole, title-cased, with no sex and not found.
    """
    legend = legend.strip()
    for separator in LEGEND_SEPARATORS:
        parts = legend.split(separator)
        if len(parts) != 2:
            continue
        status = STATUS_LEGENDS.get(parts[0].strip().lower())
        if status is not None:
            sex, found = status
            return title_case(parts[1]), sex, found
    return title_case(legend), None, False


def parse_gro_date(value: str) -> date | None:
    """Parse the date part of an ISO timestamp such as ``2022-05-10T12:00:00+00:00``."""
    parts = value.strip().split("T")
    if len(parts) != 2:
        return None
    try:
        return date.fromisoformat(parts[0])
    except ValueError:
        return None


def _build_poster(entry: Document, alert_type: AlertType, sex: Sex | None) -> MissingPersonPoster:
    link = entry.query("h2 a")
    mp_name, legend_sex, found = parse_name_sex_found(link.text())
    require(mp_name, "mp_name")
    po_post_url = required_url(link.attr("href"), "po_post_url")

    published = entry.query(".entry-date.published").attr("datetime") or entry.query(".entry-date").attr("datetime")
    poster_url = entry.query("a[data-src]").attr("data-src").strip().replace("-480x320", "", 1)

    return MissingPersonPoster(
        alert_type=alert_type,
        found=found,
        mp_name=mp_name,
        mp_sex=sex or legend_sex,
        po_poster_url=optional_url(poster_url),
        po_post_publication_date=parse_gro_date(published),
        po_post_url=po_post_url,
        po_state=State.GUERRERO,
    )


def _extract(doc: Document, alert_type: AlertType, sex: Sex | None = None) -> ExtractionOutcome:
    return collect_entries(
        doc.query_all(".article_content"), functools.partial(_build_poster, alert_type=alert_type, sex=sex)
    )


def build_alba_url(page_number: int) -> str:
    return f"{BASE_URL}/category/alba/page/{page_number}/"


def extract_alba(doc: Document) -> ExtractionOutcome:
    """Alba alerts only cover women and girls."""
    return _extract(doc, AlertType.ALBA, Sex.FEMALE)


def build_amber_url(page_number: int) -> str:
    return f"{BASE_URL}/category/amber/page/{page_number}/"


def extract_amber(doc: Document) -> ExtractionOutcome:
    return _extract(doc, AlertType.AMBER)


def build_has_visto_a_url(page_number: int) -> str:
    return f"{BASE_URL}/category/hasvistoa/page/{page_number}/"


def extract_has_visto_a(doc: Document) -> ExtractionOutcome:
    return _extract(doc, AlertType.HAS_VISTO_A)
