# ABOUTME: Contracts shared by every source: extractor, URL builder, enrichment and their results
# ABOUTME: Per-entry failures are collected by position instead of aborting the page

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rastreadora.core.models import MissingPersonPoster
from rastreadora.document import Document
from rastreadora.errors import ExtractionError

# Fetches and parses one page; raises FetchError or ParseError
Retrieve = Callable[[str], Awaitable[Document]]


class SiteExtractor(Protocol):
    """Turns one listing page into posters plus per-entry errors.

    Implementations must be pure: calling them twice on the same document
    yields the same outcome and performs no I/O.
    """

    def __call__(self, doc: Document) -> "ExtractionOutcome": ...


class UrlBuilder(Protocol):
    """Maps a page number to the URL of that listing page. Total and pure."""

    def __call__(self, page_number: int) -> str: ...


class PosterEnricher(Protocol):
    """Completes a poster from its detail page.

    Raises FetchError/ParseError when the detail page is unavailable; the caller
    then keeps the poster as it was.
    """

    def __call__(self, poster: MissingPersonPoster, retrieve: Retrieve) -> Awaitable[MissingPersonPoster]: ...


class ExtractionOutcome(BaseModel):
    """Result of processing one listing page."""

    model_config = ConfigDict(frozen=True)

    posters: list[MissingPersonPoster] = Field(default_factory=list)
    errors: dict[int, str] = Field(default_factory=dict, description="1-based entry position -> reason")
    failure: str | None = Field(default=None, description="Why the page itself could not be fetched or parsed")

    @property
    def entries(self) -> int:
        """Number of entries found on the page, whether or not they became posters."""
        return len(self.posters) + len(self.errors)

    @property
    def failed(self) -> bool:
        return self.failure is not None

    def error_details(self) -> str:
        return ", ".join(f"entry #{position}: {reason}" for position, reason in sorted(self.errors.items()))

    @classmethod
    def from_failure(cls, reason: str) -> "ExtractionOutcome":
        return cls(failure=reason)


@dataclass(frozen=True)
class Site:
    """Everything the pipeline needs to scrape one source."""

    name: str
    description: str
    build_url: UrlBuilder
    extract: SiteExtractor
    enrich: PosterEnricher | None = None


def collect_entries(
    entries: Iterable[Document], build: Callable[[Document], MissingPersonPoster]
) -> ExtractionOutcome:
    """Build one poster per entry, recording failures under the entry's 1-based position.

    Every entry ends up either as a poster or as an error, never both and never neither.
    """
    posters: list[MissingPersonPoster] = []
    errors: dict[int, str] = {}
    for position, entry in enumerate(entries, start=1):
        try:
            posters.append(build(entry))
        except ExtractionError as e:
            errors[position] = str(e)
        except ValidationError as e:
            errors[position] = f"invalid poster data: {_summarize_validation_error(e)}"
    return ExtractionOutcome(posters=posters, errors=errors)


def _summarize_validation_error(error: ValidationError) -> str:
    return "; ".join(f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in error.errors())


def require(value: str, field_name: str) -> str:
    """Return ``value`` or raise ExtractionError when it is empty."""
    if not value:
        raise ExtractionError(f"{field_name} can't be empty")
    return value
