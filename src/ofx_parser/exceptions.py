"""
Typed errors raised while turning an OFX document into a Document.

All errors derive from OfxParserError and also from ValueError, so callers
that already guard parsing with ``except ValueError`` keep working.
"""


class OfxParserError(Exception):
    """Base class for every error raised by ofx_parser."""


class MalformedDocument(OfxParserError, ValueError):
    """
    Raised when a document cannot be split or turned into a markup tree.

    Covers a missing header/body boundary, a body lxml cannot build a
    tree from, and byte input that none of the configured encodings decode.
    """


class InvalidDateFormat(OfxParserError, ValueError):
    """Raised when an OFX datetime string matches none of the known layouts."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"Invalid OFX datetime: {value!r}\n"
            f"Expected YYYYMMDD, YYYYMMDDHHMMSS or YYYYMMDDHHMMSS.XXX, "
            f"optionally followed by [offset:tzname]"
        )


class InvalidAmountFormat(OfxParserError, ValueError):
    """Raised when a monetary or quantity field holds non-numeric text."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid OFX amount: {value!r}")
