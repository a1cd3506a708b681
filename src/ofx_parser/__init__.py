"""
ofx-parser: read OFX bank, credit card and investment statements into a
typed, immutable document model.

Main package exports for user-facing API.
"""

from ofx_parser.api import OfxParser, parse
from ofx_parser.exceptions import (
    OfxParserError,
    MalformedDocument,
    InvalidDateFormat,
    InvalidAmountFormat,
)
from ofx_parser.models import Document
from ofx_parser.parsers import parse_datetime

__version__ = '1.1.0'

__all__ = [
    'OfxParser',
    'parse',
    'parse_datetime',
    'Document',
    'OfxParserError',
    'MalformedDocument',
    'InvalidDateFormat',
    'InvalidAmountFormat',
]
