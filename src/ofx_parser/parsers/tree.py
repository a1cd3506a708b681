"""
Tree query capability over normalized OFX markup.

All mapping code reads the document through OfxTree, which offers three
operations on lxml elements:
1. select descendants by a slash-separated tag path, in document order
2. read an element's direct text ('' when it has none)
3. iterate sibling elements sharing a tag (a path's last segment)

A path's first segment matches at any depth below the starting element;
each further segment is a direct child, so 'STMTRS/LEDGERBAL/BALAMT'
compiles to the XPath './/STMTRS/LEDGERBAL/BALAMT'.
"""

from functools import lru_cache
import logging
import re
from typing import List, Optional

from lxml import etree

from ofx_parser.config import get_settings
from ofx_parser.exceptions import MalformedDocument

logger = logging.getLogger(__name__)

_TAG_NAME = re.compile(r'^[A-Za-z_][\w.-]*$')


@lru_cache(maxsize=256)
def path_to_xpath(path: str) -> str:
    """
    Translate a tag path into a relative descendant XPath expression.

    Raises:
        ValueError: If a segment is not a plain tag name
    """
    segments = path.strip('/').split('/')
    for segment in segments:
        if not _TAG_NAME.match(segment):
            raise ValueError(f"Invalid tag path segment {segment!r} in {path!r}")
    return './/' + '/'.join(segments)


class OfxTree:
    """
    Navigable tree built from well-formed OFX markup.

    Example:
        >>> tree = OfxTree.from_markup('<OFX><A><B>1</B><B>2</B></A></OFX>')
        >>> [tree.text(b) for b in tree.select('A/B')]
        ['1', '2']
        >>> tree.text_at('A/C') is None
        True
    """

    def __init__(self, root: etree._Element):
        self.root = root

    @classmethod
    def from_markup(cls, markup: str) -> 'OfxTree':
        """
        Build a tree from normalized markup.

        Raises:
            MalformedDocument: If lxml cannot produce a root element
        """
        settings = get_settings()
        parser = etree.XMLParser(
            recover=settings.recover,
            huge_tree=settings.huge_tree,
            encoding='utf-8',
            remove_blank_text=True,
        )

        try:
            root = etree.fromstring(markup.encode('utf-8'), parser)
        except etree.XMLSyntaxError as e:
            raise MalformedDocument(f"Markup body could not be parsed: {e}") from e

        if root is None:
            raise MalformedDocument("Markup body could not be parsed: no root element")

        if len(parser.error_log):
            logger.warning(
                f"Recovered from {len(parser.error_log)} markup error(s); "
                f"first: {parser.error_log[0].message}"
            )

        return cls(root)

    def select(self, path: str, node: Optional[etree._Element] = None) -> List[etree._Element]:
        """All elements matching ``path`` below ``node`` (default: root), in document order."""
        start = self.root if node is None else node
        return start.xpath(path_to_xpath(path))

    def first(self, path: str, node: Optional[etree._Element] = None) -> Optional[etree._Element]:
        """First element matching ``path``, or None when absent."""
        matches = self.select(path, node)
        return matches[0] if matches else None

    @staticmethod
    def children(node: etree._Element, *tags: str) -> List[etree._Element]:
        """Direct children of ``node`` whose tag is one of ``tags``, in document order."""
        return [child for child in node if child.tag in tags]

    @staticmethod
    def text(node: etree._Element) -> str:
        """Direct text of an element, '' when it has none."""
        return node.text or ''

    def text_at(self, path: str, node: Optional[etree._Element] = None) -> Optional[str]:
        """
        Text of the first element matching ``path``.

        Returns:
            None when no element matches (absent), '' when the element
            exists without text (empty)
        """
        element = self.first(path, node)
        return None if element is None else self.text(element)
