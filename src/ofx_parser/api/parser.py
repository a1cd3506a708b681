"""
Public entry point: raw OFX text in, Document out.

Pipeline (single pass, no shared state between calls):
    raw text -> (header, body) -> normalized body -> tree -> Document
"""

import logging
from typing import Any, Dict, Tuple, Union

from ofx_parser.config import get_settings
from ofx_parser.exceptions import MalformedDocument
from ofx_parser.models import Document
from ofx_parser.parsers.datetime_parser import parse_datetime
from ofx_parser.parsers.header import split_header
from ofx_parser.parsers.mapper import build_document
from ofx_parser.parsers.markup import normalize_markup
from ofx_parser.parsers.tree import OfxTree

logger = logging.getLogger(__name__)

Source = Union[str, bytes, Any]


def read_source(source: Source) -> str:
    """
    Read a whole input into text.

    Args:
        source: str, bytes, or an object with ``read()`` returning either

    Returns:
        Document text

    Raises:
        MalformedDocument: If bytes cannot be decoded with any configured
            encoding
    """
    if hasattr(source, 'read'):
        source = source.read()

    if source is None:
        return ''

    if isinstance(source, str):
        return source

    if isinstance(source, (bytes, bytearray)):
        encodings = get_settings().input_encodings
        for encoding in encodings:
            try:
                return bytes(source).decode(encoding)
            except UnicodeDecodeError:
                logger.debug(f"Input is not valid {encoding}, trying next encoding")
                continue
        raise MalformedDocument(
            f"Could not decode input with any of: {', '.join(encodings)}"
        )

    return str(source)


class OfxParser:
    """
    Parser for OFX 1.x (SGML) and 2.x (XML) documents.

    Usage:
        with open('statement.qfx', 'rb') as f:
            doc = OfxParser.parse(f)
        for account in doc.bank_accounts:
            print(account.number, account.balance)
    """

    parse_datetime = staticmethod(parse_datetime)

    @staticmethod
    def parse(source: Source) -> Document:
        """
        Parse a complete OFX document.

        Args:
            source: str, bytes or a readable stream, consumed to completion

        Returns:
            Document; empty input yields an empty Document

        Raises:
            MalformedDocument: If no header/body boundary exists or the
                body cannot be built into a tree
            InvalidDateFormat: If a date field is malformed
            InvalidAmountFormat: If an amount field is not numeric
        """
        text = read_source(source)
        if text == '':
            return Document()

        header, body = OfxParser.pre_process(text)
        tree = OfxTree.from_markup(body)
        document = build_document(tree, header)

        logger.info(
            f"Parsed OFX document (version {header.get('VERSION', 'unknown')}): "
            f"{len(document.bank_accounts)} bank, "
            f"{len(document.credit_accounts)} credit card, "
            f"{len(document.investment_accounts)} investment account(s)"
        )
        return document

    @staticmethod
    def pre_process(text: str) -> Tuple[Dict[str, str], str]:
        """
        Split the header off and normalize the body.

        Returns:
            (header mapping, well-formed markup body)
        """
        header, body = split_header(text)
        return header, normalize_markup(body)


def parse(source: Source) -> Document:
    """Parse an OFX document. See OfxParser.parse()."""
    return OfxParser.parse(source)
