# template/__init__.py

from functools import lru_cache

from .definitions import (
    ArgRef, ArgRefKind, Fragment, FormatTemplate, StyleClose, StyleOpen,
    TextFragment, add_trailing_newline,
)
from .parser import TemplateParser


@lru_cache(maxsize=256)
def parse(source: str) -> FormatTemplate:
    """Parse `source` into a FormatTemplate, reusing earlier results for the same text."""
    return TemplateParser().parse(source)


__all__ = [
    'ArgRef', 'ArgRefKind', 'Fragment', 'FormatTemplate', 'StyleClose',
    'StyleOpen', 'TemplateParser', 'TextFragment', 'add_trailing_newline',
    'parse',
]
