# ABOUTME: Pipeline that scrapes a closed range of listing pages concurrently
# ABOUTME: Launches one fetch-extract unit per page, waits for all of them and merges their posters

import asyncio

from pydantic import BaseModel, ConfigDict, Field

from rastreadora.core.models import MissingPersonPoster
from rastreadora.errors import ConfigurationError
from rastreadora.extraction.base import ExtractionOutcome, Site
from rastreadora.extraction.fetch import NetworkConfig, PageFetcher
from rastreadora.utils.logging import with_pipeline_context


def validate_page_range(page_from: int, page_until: int) -> None:
    """Check a page range before anything is fetched.

    Raises:
        ConfigurationError: If a bound is negative or ``page_from`` is greater than ``page_until``
    """
    if page_from < 0 or page_until < 0:
        raise ConfigurationError(f"page numbers must be non-negative, got {page_from} and {page_until}")
    if page_from > page_until:
        raise ConfigurationError(f"invalid page range, {page_from} is greater than {page_until}")


class PageReport(BaseModel):
    """What happened to one listing page."""

    model_config = ConfigDict(frozen=True)

    page_number: int
    url: str
    outcome: ExtractionOutcome


class ScrapeResult(BaseModel):
    """Aggregated result of a scrape run."""

    model_config = ConfigDict(frozen=True)

    posters: list[MissingPersonPoster] = Field(default_factory=list)
    pages: list[PageReport] = Field(default_factory=list)

    @property
    def failed_pages(self) -> int:
        return sum(1 for page in self.pages if page.outcome.failed)

    @property
    def entry_errors(self) -> int:
        return sum(len(page.outcome.errors) for page in self.pages)


class ScrapePipeline:
    """Scrapes a range of pages from one source."""

    def __init__(self, site: Site, fetcher: PageFetcher | None = None, network: NetworkConfig | None = None):
        """Initialize the pipeline.

        Args:
            site: Source to scrape
            fetcher: Shared page fetcher (defaults to one built from ``network``, closed after each run)
            network: HTTP settings used when no fetcher is given
        """
        self.site = site
        self.fetcher = fetcher
        self.network = network or NetworkConfig()

    async def run(self, page_from: int, page_until: int) -> ScrapeResult:
        """Scrape every page in ``[page_from, page_until]``.

        Pages that fail to load and entries that fail to parse are reported in the
        result; they never abort the run.

        Raises:
            ConfigurationError: If the page range is invalid
        """
        validate_page_range(page_from, page_until)

        with with_pipeline_context("scrape", site=self.site.name) as logger:
            logger.info("Starting scrape", page_from=page_from, page_until=page_until)

            if self.fetcher is not None:
                pages = await self._scrape(self.fetcher, page_from, page_until)
            else:
                async with PageFetcher(self.network) as fetcher:
                    pages = await self._scrape(fetcher, page_from, page_until)

            result = ScrapeResult(
                posters=[poster for page in pages for poster in page.outcome.posters],
                pages=pages,
            )
            logger.info(
                "Scrape complete",
                pages=len(result.pages),
                posters=len(result.posters),
                failed_pages=result.failed_pages,
                entry_errors=result.entry_errors,
            )
            return result

    async def _scrape(self, fetcher: PageFetcher, page_from: int, page_until: int) -> list[PageReport]:
        page_numbers = range(page_from, page_until + 1)
        urls = [self.site.build_url(page_number) for page_number in page_numbers]
        outcomes: list[ExtractionOutcome] = await asyncio.gather(
            *(fetcher.fetch_and_extract(url, self.site) for url in urls)
        )
        return [
            PageReport(page_number=page_number, url=url, outcome=outcome)
            for page_number, url, outcome in zip(page_numbers, urls, outcomes, strict=True)
        ]


async def scrape_pages(
    page_from: int, page_until: int, site: Site, network: NetworkConfig | None = None
) -> list[MissingPersonPoster]:
    """Scrape a page range and return only the collected posters."""
    result = await ScrapePipeline(site, network=network).run(page_from, page_until)
    return result.posters
