# ABOUTME: Read-only query surface over a parsed HTML tree (BeautifulSoup + soupsieve)
# ABOUTME: Lookups never raise: missing nodes and bad selectors yield the EMPTY sentinel

from __future__ import annotations

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.builder import ParserRejectedMarkup
from bs4.element import PreformattedString

from rastreadora.document.selectors import try_compile_selector
from rastreadora.errors import ParseError

HTML_PARSER = "html.parser"


def _is_text(node: object) -> bool:
    # Comments, doctypes, CDATA and processing instructions are not text nodes
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


class Document:
    """One node of a parsed markup tree.

    A ``Document`` may wrap the tree root, an element, a text node or nothing at
    all (:data:`EMPTY`). Every query on an empty or text node returns
    :data:`EMPTY` / ``[]``, so lookups can be chained without checking each step::

        name = entry.query(".nombre").text()
        href = entry.query("h2 a").attr("href")

    Documents never modify the tree they wrap.
    """

    __slots__ = ("_node",)

    def __init__(self, node: Tag | NavigableString | None = None):
        self._node = node

    @classmethod
    def parse(cls, payload: bytes | str) -> Document:
        """Build a tree from raw markup.

        Malformed but recoverable HTML yields a best-effort tree, as browsers do.

        Raises:
            ParseError: If the payload is not markup or the tree builder rejects it
        """
        if not isinstance(payload, (bytes, str)):
            raise ParseError(f"cannot parse a {type(payload).__name__} payload")
        try:
            soup = BeautifulSoup(payload, HTML_PARSER, multi_valued_attributes=None)
        except ParserRejectedMarkup as e:
            raise ParseError(f"unable to parse document: {e}") from e
        return cls(soup)

    @property
    def node(self) -> Tag | NavigableString | None:
        return self._node

    @property
    def is_empty(self) -> bool:
        return self._node is None

    @property
    def is_text(self) -> bool:
        return _is_text(self._node)

    @property
    def tag_name(self) -> str:
        """Element name, or an empty string for text nodes and the empty sentinel."""
        if isinstance(self._node, BeautifulSoup) or not isinstance(self._node, Tag):
            return ""
        return self._node.name

    def __bool__(self) -> bool:
        return self._node is not None

    def __repr__(self) -> str:
        if self._node is None:
            return "Document(<empty>)"
        if isinstance(self._node, BeautifulSoup):
            return "Document(<root>)"
        if isinstance(self._node, Tag):
            return f"Document(<{self._node.name}>)"
        return f"Document({str(self._node)[:30]!r})"

    def query(self, selector: str) -> Document:
        """Return the first descendant matching ``selector``, in document order.

        Returns :data:`EMPTY` when nothing matches *or when the selector is
        malformed*. A typo in a selector therefore looks exactly like a missing
        node; use :func:`~rastreadora.document.selectors.compile_selector` to
        check a selector up front.
        """
        if not isinstance(self._node, Tag):
            return EMPTY
        compiled = try_compile_selector(selector)
        if compiled is None:
            return EMPTY
        match = compiled.select_one(self._node)
        return Document(match) if match is not None else EMPTY

    def query_all(self, selector: str) -> list[Document]:
        """Return every descendant matching ``selector`` in document order (``[]`` on a bad selector)."""
        if not isinstance(self._node, Tag):
            return []
        compiled = try_compile_selector(selector)
        if compiled is None:
            return []
        return [Document(match) for match in compiled.select(self._node)]

    def text(self) -> str:
        """Concatenate the payload of every descendant text node, depth-first pre-order."""
        if self._node is None:
            return ""
        if not isinstance(self._node, Tag):
            return str(self._node) if _is_text(self._node) else ""
        return "".join(str(node) for node in self._node.descendants if _is_text(node))

    def attr(self, key: str, default: str = "") -> str:
        """Return the value of attribute ``key``, or ``default`` when it is absent."""
        if not isinstance(self._node, Tag):
            return default
        value = self._node.get(key)
        if value is None:
            return default
        if isinstance(value, list):
            return " ".join(value)
        return value

    def nth_child(self, n: int) -> Document:
        """Return the n-th (0-based) direct child, element or text, or :data:`EMPTY`."""
        if not isinstance(self._node, Tag) or n < 0:
            return EMPTY
        children = self._node.contents
        if n >= len(children):
            return EMPTY
        return Document(children[n])


EMPTY = Document()
"""Shared sentinel for "no node"; every lookup on it is safe and returns empty results."""
