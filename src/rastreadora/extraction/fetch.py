# ABOUTME: Fetch-extract unit: retrieves a listing page over httpx and hands it to a site extractor
# ABOUTME: Page failures become an empty outcome plus a log event, never an exception

import asyncio
import contextlib

import httpx
from pydantic import BaseModel, ConfigDict, Field

from rastreadora.core.models import MissingPersonPoster
from rastreadora.document import Document
from rastreadora.errors import FetchError, ParseError
from rastreadora.extraction.base import ExtractionOutcome, Site
from rastreadora.utils.logging import get_logger, log_page_fetch

DEFAULT_USER_AGENT = "rastreadora/0.6 (+https://github.com/midir99/rastreadora)"


class NetworkConfig(BaseModel):
    """HTTP settings shared, read-only, by every concurrent fetch."""

    model_config = ConfigDict(frozen=True)

    skip_verify: bool = Field(default=False, description="Skip TLS certificate and hostname verification")
    timeout: float | None = Field(default=30.0, gt=0, description="Per-request timeout in seconds, None to disable")
    max_concurrency: int | None = Field(default=None, ge=1, description="Simultaneous requests, None for no limit")
    user_agent: str = DEFAULT_USER_AGENT


def _entry_legend(entries: int) -> str:
    return "entry" if entries == 1 else "entries"


class PageFetcher:
    """Retrieves pages and runs site extractors on them.

    One fetcher (and its httpx client) is shared by every page of a run.
    """

    def __init__(self, network: NetworkConfig | None = None, client: httpx.AsyncClient | None = None):
        self.network = network or NetworkConfig()
        self._owns_client = client is None
        self.http_client = client or httpx.AsyncClient(  # Allow for dependency injection
            verify=not self.network.skip_verify,
            timeout=httpx.Timeout(self.network.timeout),
            follow_redirects=True,
            headers={"User-Agent": self.network.user_agent},
        )
        self._slots = asyncio.Semaphore(self.network.max_concurrency) if self.network.max_concurrency else None
        self.logger = get_logger(__name__)

    async def __aenter__(self) -> "PageFetcher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._owns_client:
            await self.http_client.aclose()

    def _slot(self):
        return self._slots if self._slots is not None else contextlib.nullcontext()

    @log_page_fetch
    async def retrieve(self, url: str) -> Document:
        """Fetch ``url`` and parse it.

        Raises:
            FetchError: On transport failures, timeouts and non-2xx responses
            ParseError: If the body cannot be parsed
        """
        try:
            async with self._slot():
                response = await self.http_client.get(url)
        except httpx.HTTPError as e:
            raise FetchError(f"unable to retrieve {url}: {e!r}") from e

        if not response.is_success:
            raise FetchError(f"{url} responded with a {response.status_code} status code")

        return Document.parse(response.content)

    async def fetch_and_extract(self, url: str, site: Site) -> ExtractionOutcome:
        """Scrape one listing page.

        A page that cannot be fetched, parsed or extracted yields an outcome with
        no posters and no entry errors, its ``failure`` set to the reason.
        """
        logger = self.logger.bind(url=url, site=site.name)
        try:
            doc = await self.retrieve(url)
        except (FetchError, ParseError) as e:
            logger.warning("0 entries collected", reason=str(e))
            return ExtractionOutcome.from_failure(str(e))

        try:
            outcome = site.extract(doc)
        except Exception as e:
            logger.error("Unexpected error during extraction", error=str(e), error_type=type(e).__name__)
            return ExtractionOutcome.from_failure(f"unexpected {type(e).__name__} while extracting {url}: {e}")

        if site.enrich is not None and outcome.posters:
            posters = await asyncio.gather(*(self._enrich(site, poster) for poster in outcome.posters))
            outcome = outcome.model_copy(update={"posters": list(posters)})

        collected = len(outcome.posters)
        if outcome.errors:
            logger.warning(
                f"{collected} {_entry_legend(collected)} collected",
                collected=collected,
                unable_to_retrieve=len(outcome.errors),
                details=outcome.error_details(),
            )
        else:
            logger.info(f"{collected} {_entry_legend(collected)} collected", collected=collected)

        return outcome

    async def _enrich(self, site: Site, poster: MissingPersonPoster) -> MissingPersonPoster:
        """Run the site's enrichment, keeping the poster unchanged when it fails."""
        post_url = str(poster.po_post_url) if poster.po_post_url else None
        try:
            return await site.enrich(poster, self.retrieve)
        except (FetchError, ParseError) as e:
            self.logger.warning("Unable to enrich poster", site=site.name, post_url=post_url, reason=str(e))
        except Exception as e:
            self.logger.error(
                "Unexpected error during enrichment",
                site=site.name,
                post_url=post_url,
                error=str(e),
                error_type=type(e).__name__,
            )
        return poster
