"""
User-facing API for ofx_parser.
"""

from ofx_parser.api.parser import OfxParser, parse, read_source

__all__ = [
    'OfxParser',
    'parse',
    'read_source',
]
