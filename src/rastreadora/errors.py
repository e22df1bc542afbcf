# ABOUTME: Exception hierarchy shared by every layer of the scraper
# ABOUTME: Separates fatal configuration/output errors from contained per-page and per-entry errors


class RastreadoraError(Exception):
    """Base class for all errors raised by rastreadora."""


class ConfigurationError(RastreadoraError, ValueError):
    """Raised for invalid arguments or settings, before any page is fetched."""


class SelectorError(RastreadoraError, ValueError):
    """Raised when a CSS selector cannot be compiled."""


class ParseError(RastreadoraError):
    """Raised when a payload cannot be turned into a document tree."""


class FetchError(RastreadoraError):
    """Raised when a page cannot be retrieved (transport failure or non-2xx status)."""


class ExtractionError(RastreadoraError):
    """Raised when a single listing entry cannot be turned into a poster."""


class OutputError(RastreadoraError):
    """Raised when the serialized posters cannot be written to their destination."""
