# ABOUTME: Document model - parsed HTML trees with fail-soft CSS selector queries
# ABOUTME: Foundation for every site extractor

from .model import EMPTY, Document
from .selectors import compile_selector, try_compile_selector

__all__ = [
    "EMPTY",
    "Document",
    "compile_selector",
    "try_compile_selector",
]
