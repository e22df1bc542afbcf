# ABOUTME: Field parsers shared by the site extractors: Spanish dates, names and URLs
# ABOUTME: All helpers are pure; unparseable values raise ValueError or return None

import re
from datetime import date
from urllib.parse import urljoin

from pydantic import HttpUrl, TypeAdapter, ValidationError

from rastreadora.errors import ExtractionError
from rastreadora.extraction.base import require

NBSP = "\u00a0"

_HTTP_URL = TypeAdapter(HttpUrl)

SPANISH_MONTHS = {
    "enero": 1,
    "febrero": 2,
    "marzo": 3,
    "abril": 4,
    "mayo": 5,
    "junio": 6,
    "julio": 7,
    "agosto": 8,
    "septiembre": 9,
    "setiembre": 9,
    "octubre": 10,
    "noviembre": 11,
    "diciembre": 12,
}


def clean_text(value: str) -> str:
    """Replace non-breaking spaces and strip surrounding whitespace."""
    return value.replace(NBSP, " ").strip()


def title_case(value: str) -> str:
    """Title-case a Spanish name: ``"MARÍA de la LUZ"`` -> ``"María De La Luz"``."""
    return re.sub(r"\s+", " ", value).strip().title()


def spanish_date(day: str, month: str, year: str) -> date:
    """Build a date from Spanish day/month-name/year tokens.

    Raises:
        ValueError: On an unknown month name or an impossible date
        OverflowError: When the year does not fit in a C long
    """
    month_number = SPANISH_MONTHS.get(month.strip().lower())
    if month_number is None:
        raise ValueError(f"invalid month: {month}")
    return date(int(year), month_number, int(day))


def join_url(base: str, path: str) -> str:
    """Resolve a possibly relative link against the site root; empty stays empty."""
    path = path.strip()
    if not path:
        return ""
    return urljoin(base, path)


def split_legend(value: str, separator: str = ":" + NBSP) -> str | None:
    """Return the value part of a ``"Label: value"`` legend, or None when it is not one."""
    parts = value.split(separator)
    if len(parts) != 2:
        return None
    return parts[1]


def optional_url(value: str) -> HttpUrl | None:
    """Validate an optional absolute URL, dropping it when it is empty or malformed."""
    value = value.strip()
    if not value:
        return None
    try:
        return _HTTP_URL.validate_python(value)
    except ValidationError:
        return None


def required_url(value: str, field_name: str) -> HttpUrl:
    """Validate a mandatory absolute URL.

    Raises:
        ExtractionError: If the URL is empty or malformed
    """
    value = require(value.strip(), field_name)
    try:
        return _HTTP_URL.validate_python(value)
    except ValidationError as e:
        raise ExtractionError(f"can't parse {field_name}: {e.errors()[0]['msg']}") from e
