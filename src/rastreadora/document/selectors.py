# ABOUTME: CSS selector compilation on top of soupsieve with a process-wide cache
# ABOUTME: Strict variant surfaces syntax errors, lenient variant returns None for chained queries

import functools

import soupsieve
from soupsieve import SelectorSyntaxError

from rastreadora.errors import SelectorError
from rastreadora.utils.logging import get_logger

logger = get_logger(__name__)


@functools.lru_cache(maxsize=512)
def _compile(selector: str) -> soupsieve.SoupSieve:
    return soupsieve.compile(selector)


def compile_selector(selector: str) -> soupsieve.SoupSieve:
    """Compile a CSS selector (tag, class, id, combinators, pseudo-classes such as ``:first-of-type``).

    Compiled selectors are stateless and cached, so extractors can pass the same
    selector text for every entry of every page.

    Raises:
        SelectorError: If the selector is malformed
    """
    if not isinstance(selector, str):
        raise SelectorError(f"selector must be a string, got {type(selector).__name__}")
    try:
        return _compile(selector)
    except SelectorSyntaxError as e:
        raise SelectorError(f"invalid selector {selector!r}: {e}") from e


def try_compile_selector(selector: str) -> soupsieve.SoupSieve | None:
    """Compile a selector, returning None instead of raising when it is malformed."""
    try:
        return compile_selector(selector)
    except SelectorError as e:
        logger.debug("Ignoring malformed selector", selector=selector, error=str(e))
        return None
