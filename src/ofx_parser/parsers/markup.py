"""
Markup normalization for OFX SGML bodies.

OFX 1.x is SGML: leaf elements may omit their closing tag, so

    <STMTTRN><TRNTYPE>DEBIT<TRNAMT>-10.00</STMTTRN>

is valid OFX but not XML. normalize_markup() rewrites such a body into
well-formed, fully nested markup that lxml can build a tree from.

Rule "unterminated leaf": an opening tag immediately followed by a text run
whose next token is not that tag's own closing tag is a leaf whose close was
omitted; its closing tag is emitted right after the text.

Text runs are trimmed and bare ampersands escaped on the way through.

This relies on OFX's grammar: elements holding text are leaves, and
aggregates hold only elements. A body that nests elements inside a text
element is restructured incorrectly; that is accepted, not repaired.
"""

import re
from typing import Iterator, List, Tuple

_TOKEN = re.compile(r'<[^>]*>|[^<]+')
# '&' that does not already start a character or entity reference
_BARE_AMPERSAND = re.compile(r'&(?!#?\w+;)')

TAG = 'tag'
TEXT = 'text'


def collapse_whitespace(body: str) -> str:
    """
    Remove incidental whitespace between and around tags.

    Whitespace-only runs between tags are dropped and text runs are trimmed
    at their edges; whitespace inside a text run is kept, including around
    a literal '>'.
    """
    return ''.join(token for _, token in _trimmed_tokens(body))


def tokenize(body: str) -> Iterator[Tuple[str, str]]:
    """Yield (kind, token) pairs: tags (including '<' ... '>') and text runs."""
    for match in _TOKEN.finditer(body):
        token = match.group(0)
        yield (TAG if token.startswith('<') else TEXT), token


def _trimmed_tokens(body: str) -> Iterator[Tuple[str, str]]:
    for kind, token in tokenize(body):
        if kind == TEXT:
            token = token.strip()
            if not token:
                continue
        yield kind, token


def escape_text(text: str) -> str:
    """Escape bare '&' (AT&T) so the text survives XML parsing unchanged."""
    return _BARE_AMPERSAND.sub('&amp;', text)


def opening_tag_name(token: str) -> str:
    """
    Element name of an opening tag, or '' for anything else.

    Closing tags, self-closing tags, processing instructions, comments and
    declarations are not opening tags.
    """
    if token[1:2] in ('/', '?', '!') or token.endswith('/>'):
        return ''
    inner = token[1:-1].strip()
    return inner.split()[0] if inner else ''


def close_unterminated_leaves(tokens: List[Tuple[str, str]]) -> List[str]:
    """
    Apply the unterminated-leaf rule to a token stream.

    Args:
        tokens: (kind, token) pairs from tokenize()

    Returns:
        Output tokens with synthesized closing tags inserted
    """
    out: List[str] = []
    for i, (kind, token) in enumerate(tokens):
        out.append(token)
        if kind != TEXT or i == 0:
            continue

        prev_kind, prev_token = tokens[i - 1]
        name = opening_tag_name(prev_token) if prev_kind == TAG else ''
        if not name:
            continue

        closing = f'</{name}>'
        following = tokens[i + 1][1] if i + 1 < len(tokens) else None
        if following is None or following.replace(' ', '') != closing:
            out.append(closing)
    return out


def normalize_markup(body: str) -> str:
    """
    Rewrite an OFX body into well-formed, nested markup.

    Applying it to its own output changes nothing.

    Example:
        >>> normalize_markup('<STMTTRN>\\n  <TRNTYPE>DEBIT\\n  <TRNAMT>-1.00\\n</STMTTRN>')
        '<STMTTRN><TRNTYPE>DEBIT</TRNTYPE><TRNAMT>-1.00</TRNAMT></STMTTRN>'
    """
    tokens = [
        (kind, escape_text(token) if kind == TEXT else token)
        for kind, token in _trimmed_tokens(body)
    ]
    return ''.join(close_unterminated_leaves(tokens))
