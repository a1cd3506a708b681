"""
Parsing stages for OFX documents.

- header: split the KEY:VALUE header from the markup body
- markup: close unterminated SGML leaf elements
- tree: lxml-backed tag-path queries
- datetime_parser: OFX date/time layouts
- mapper: tree -> Document
"""

from .header import split_header, parse_header_lines
from .markup import normalize_markup, close_unterminated_leaves, tokenize
from .tree import OfxTree
from .datetime_parser import parse_datetime
from .mapper import build_document

__all__ = [
    'split_header',
    'parse_header_lines',
    'normalize_markup',
    'close_unterminated_leaves',
    'tokenize',
    'OfxTree',
    'parse_datetime',
    'build_document',
]
