# ABOUTME: Morelos state prosecutor (fiscaliamorelos.gob.mx) Amber alerts and "cédulas" listings
# ABOUTME: Amber listings link to a post page that holds the full-size poster image

from datetime import date

from rastreadora.core.models import AlertType, MissingPersonPoster, State
from rastreadora.document import Document
from rastreadora.extraction.base import ExtractionOutcome, Retrieve, collect_entries, require
from rastreadora.extraction.sites.common import optional_url, required_url, spanish_date, title_case

BASE_URL = "https://fiscaliamorelos.gob.mx"


def parse_mor_date(value: str) -> date | None:
    """Parse ``"mayo 10, 2022"``."""
    tokens = value.replace(",", "").strip().lower().split()
    if len(tokens) != 3:
        return None
    month, day, year = tokens
    try:
        return spanish_date(day, month, year)
    except (ValueError, OverflowError):
        return None


def build_amber_url(page_number: int) -> str:
    return f"{BASE_URL}/category/alerta-amber/page/{page_number}/"


def _build_amber_poster(article: Document) -> MissingPersonPoster:
    mp_name = require(title_case(article.query("h2").text()), "mp_name")
    po_post_url = required_url(article.query("a").attr("href"), "po_post_url")

    return MissingPersonPoster(
        alert_type=AlertType.AMBER,
        mp_name=mp_name,
        po_post_publication_date=parse_mor_date(article.query("span .published").text()),
        po_post_url=po_post_url,
        po_state=State.MORELOS,
    )


def extract_amber(doc: Document) -> ExtractionOutcome:
    return collect_entries(doc.query_all("article"), _build_amber_poster)


async def enrich_amber(poster: MissingPersonPoster, retrieve: Retrieve) -> MissingPersonPoster:
    """Fill in the poster image from the alert's post page."""
    doc = await retrieve(str(poster.po_post_url))
    poster_url = optional_url(doc.query("div .post-thumb-img-content img").attr("src"))
    if poster_url is None:
        return poster
    return poster.model_copy(update={"po_poster_url": poster_url})


def build_custom_url(page_number: int) -> str:
    return f"{BASE_URL}/cedulas/{page_number}/"


def _build_custom_poster(article: Document) -> MissingPersonPoster:
    link = article.query("h3 a")
    mp_name = require(title_case(link.text()), "mp_name")
    po_post_url = required_url(link.attr("href"), "po_post_url")

    return MissingPersonPoster(
        mp_name=mp_name,
        po_post_publication_date=parse_mor_date(article.query("span").text()),
        po_post_url=po_post_url,
        po_poster_url=optional_url(article.query("img").attr("src")),
        po_state=State.MORELOS,
    )


def extract_custom(doc: Document) -> ExtractionOutcome:
    return collect_entries(doc.query_all("article"), _build_custom_poster)
