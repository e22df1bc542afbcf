# ABOUTME: Mexico City prosecutor's missing persons registry (personasdesaparecidas.fgjcdmx.gob.mx)
# ABOUTME: Each table row holds a poster cell and a data cell whose children are "Label: value" legends

from datetime import date

from rastreadora.core.models import MissingPersonPoster, State
from rastreadora.document import Document
from rastreadora.errors import ExtractionError
from rastreadora.extraction.base import ExtractionOutcome, collect_entries, require
from rastreadora.extraction.sites.common import (
    clean_text,
    join_url,
    optional_url,
    required_url,
    spanish_date,
    split_legend,
    title_case,
)

BASE_URL = "https://personasdesaparecidas.fgjcdmx.gob.mx/"

# Positions of the data cell's children (text nodes and <br>s included)
NAME_CHILD = 0
AGE_CHILD = 2
MISSING_DATE_CHILD = 4
STATUS_CHILD = 8
POST_LINK_CHILD = 10

FOUND_LEGENDS = {"localizado": True, "localizada": True, "no localizado": False, "no localizada": False}


def parse_cdmx_date(value: str) -> date | None:
    """Parse ``"5 de mayo de 2022"``."""
    tokens = value.strip().lower().split(" ")
    if len(tokens) != 5:
        return None
    day, _, month, _, year = tokens
    try:
        return spanish_date(day, month, year)
    except (ValueError, OverflowError):
        return None


def parse_cdmx_found(value: str) -> bool:
    return FOUND_LEGENDS.get(value.strip().lower(), False)


def parse_cdmx_age(value: str) -> int | None:
    """Parse ``"25 años"``."""
    years = value.strip().split(" ")[0]
    try:
        age = int(years)
    except ValueError:
        return None
    return age if age >= 0 else None


def build_url(page_number: int) -> str:
    return f"{BASE_URL}listado.php?pa={page_number}&re=100"


def _build_poster(row: Document) -> MissingPersonPoster:
    cells = row.query_all("td")
    if len(cells) != 2:
        raise ExtractionError(f"entry has {len(cells)} td elements instead of 2")
    poster_cell, data_cell = cells

    mp_name = require(title_case(clean_text(data_cell.nth_child(NAME_CHILD).text())), "mp_name")
    post_url = join_url(BASE_URL, data_cell.nth_child(POST_LINK_CHILD).attr("href"))
    po_post_url = required_url(post_url, "po_post_url")
    poster_url = join_url(BASE_URL, poster_cell.query("img").attr("src"))

    missing_date = None
    if (legend := split_legend(data_cell.nth_child(MISSING_DATE_CHILD).text())) is not None:
        missing_date = parse_cdmx_date(legend)

    found = False
    if (legend := split_legend(data_cell.nth_child(STATUS_CHILD).text())) is not None:
        found = parse_cdmx_found(legend)

    age = None
    if (legend := split_legend(data_cell.nth_child(AGE_CHILD).text())) is not None:
        age = parse_cdmx_age(legend)

    return MissingPersonPoster(
        found=found,
        missing_date=missing_date,
        mp_age_when_disappeared=age or 0,
        mp_name=mp_name,
        po_poster_url=optional_url(poster_url),
        po_post_url=po_post_url,
        po_state=State.CIUDAD_DE_MEXICO,
    )


def extract(doc: Document) -> ExtractionOutcome:
    # Data rows, whether or not the markup wraps them in an explicit <tbody>
    return collect_entries(doc.query_all("table tr:has(> td)"), _build_poster)
