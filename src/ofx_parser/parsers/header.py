"""
Header extraction for OFX documents.

An OFX 1.x file opens with ``KEY:VALUE`` lines, a blank line, then the SGML
body::

    OFXHEADER:100
    DATA:OFXSGML
    VERSION:102

    <OFX>...

OFX 2.x files carry the same keys as attributes of an ``<?OFX ...?>``
processing instruction instead.
"""

import logging
import re
from typing import Dict, Tuple

from ofx_parser.exceptions import MalformedDocument

logger = logging.getLogger(__name__)

# Whichever comes first: a blank-line run, or the root element
_BOUNDARY = re.compile(r'(?P<blank>(?:\r?\n){2,})|(?P<root><OFX>)', re.IGNORECASE)
_PI_ATTRIBUTE = re.compile(r'([A-Za-z][\w.-]*)\s*=\s*"([^"]*)"')
_OFX_PI = re.compile(r'<\?OFX\b(.*?)\?>', re.IGNORECASE | re.DOTALL)


def split_header(text: str) -> Tuple[Dict[str, str], str]:
    """
    Split a raw document into its header mapping and markup body.

    Args:
        text: Full document text (non-empty)

    Returns:
        (header, body). For a blank-line boundary the body is everything
        after the blank lines; for a root-marker boundary the body starts
        at ``<OFX>``.

    Raises:
        MalformedDocument: If neither boundary occurs in the text

    Example:
        >>> split_header('OFXHEADER:100\\r\\nVERSION:102\\r\\n\\r\\n<OFX></OFX>')
        ({'OFXHEADER': '100', 'VERSION': '102'}, '<OFX></OFX>')
    """
    # Leading blank lines are padding, not the header/body boundary
    text = text.lstrip()
    match = _BOUNDARY.search(text)
    if match is None:
        raise MalformedDocument(
            "No header/body boundary found: expected a blank line or <OFX>"
        )

    if match.group('blank') is not None:
        logger.debug(f"Header boundary: blank lines at offset {match.start()}")
        header_text, body = text[:match.start()], text[match.end():]
    else:
        logger.debug(f"Header boundary: root element at offset {match.start()}")
        header_text, body = text[:match.start()], text[match.start():]

    return parse_header_lines(header_text), body


def parse_header_lines(header_text: str) -> Dict[str, str]:
    """
    Parse header text into an ordered mapping.

    ``KEY:VALUE`` lines are split at the first colon; a repeated key keeps
    its last value. Attributes of an ``<?OFX ...?>`` instruction are read the
    same way. Other lines (the ``<?xml?>`` declaration, stray text) are
    skipped.
    """
    header: Dict[str, str] = {}

    for pi in _OFX_PI.finditer(header_text):
        for key, value in _PI_ATTRIBUTE.findall(pi.group(1)):
            header[key] = value
    header_text = _OFX_PI.sub('', header_text)

    for line in header_text.splitlines():
        line = line.strip()
        if not line:
            continue
        if ':' not in line or line.startswith('<'):
            logger.debug(f"Ignoring header line without KEY:VALUE form: {line!r}")
            continue
        key, value = line.split(':', 1)
        header[key.strip()] = value.strip()

    return header
