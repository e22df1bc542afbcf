# ABOUTME: Shared fixtures: a minimal listing site and a renderer for its pages
# ABOUTME: The site reads <li><a href=...>name</a></li> entries, one poster per entry

import pytest

from rastreadora.core.models import MissingPersonPoster, State
from rastreadora.document import Document
from rastreadora.extraction.base import ExtractionOutcome, Site, collect_entries, require
from rastreadora.extraction.sites.common import required_url


def _build_poster(entry: Document) -> MissingPersonPoster:
    link = entry.query("a")
    return MissingPersonPoster(
        mp_name=require(link.text().strip(), "mp_name"),
        po_post_url=required_url(link.attr("href"), "po_post_url"),
        po_state=State.MORELOS,
    )


def extract_listing(doc: Document) -> ExtractionOutcome:
    return collect_entries(doc.query_all("li"), _build_poster)


@pytest.fixture
def listing_site() -> Site:
    """Site whose page N lives at https://example.gob.mx/listado/N."""
    return Site(
        name="example",
        description="Example listing",
        build_url="https://example.gob.mx/listado/{}".format,
        extract=extract_listing,
    )


@pytest.fixture
def render_listing():
    """Render a listing page; entry i links to https://example.gob.mx/ficha/i and empty names stay empty."""

    def render(*names: str) -> str:
        items = "".join(
            f'<li><a href="https://example.gob.mx/ficha/{i}">{name}</a></li>' for i, name in enumerate(names)
        )
        return f"<html><body><ul>{items}</ul></body></html>"

    return render
