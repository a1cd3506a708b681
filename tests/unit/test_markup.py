"""
Unit tests for markup normalization.

The unterminated-leaf rule: an opening tag followed by text and then
anything other than its own closing tag gets a closing tag after the text.
"""

import pytest


class TestCollapseWhitespace:

    def test_removes_whitespace_around_tags(self):
        from ofx_parser.parsers.markup import collapse_whitespace

        assert collapse_whitespace("<A>\r\n  <B> x y \n</A>\n") == "<A><B>x y</A>"

    def test_keeps_inner_text_whitespace(self):
        from ofx_parser.parsers.markup import collapse_whitespace

        assert collapse_whitespace("<NAME>JOHN  SMITH<MEMO>a b") == "<NAME>JOHN  SMITH<MEMO>a b"

    def test_keeps_whitespace_around_literal_gt(self):
        from ofx_parser.parsers.markup import normalize_markup

        assert normalize_markup("<NAME>a > b\n<MEMO>x") == "<NAME>a > b</NAME><MEMO>x</MEMO>"


class TestEscapeText:

    def test_bare_ampersand_is_escaped(self):
        from ofx_parser.parsers.markup import normalize_markup

        assert normalize_markup("<NAME>AT&T WIRELESS") == "<NAME>AT&amp;T WIRELESS</NAME>"

    @pytest.mark.parametrize("text", ["Q&amp;A", "caf&#233;", "x &lt; y"])
    def test_existing_references_untouched(self, text):
        from ofx_parser.parsers.markup import escape_text

        assert escape_text(text) == text


class TestUnterminatedLeafRule:

    def test_closes_sgml_leaves(self):
        """Leaves without closing tags get one right after their text."""
        from ofx_parser.parsers.markup import normalize_markup

        body = "<STMTTRN>\n<TRNTYPE>DEBIT\n<TRNAMT>-1.00\n</STMTTRN>"

        assert normalize_markup(body) == (
            "<STMTTRN><TRNTYPE>DEBIT</TRNTYPE><TRNAMT>-1.00</TRNAMT></STMTTRN>"
        )

    def test_explicitly_closed_leaf_untouched(self):
        from ofx_parser.parsers.markup import normalize_markup

        body = "<A><B>1</B><C>2</A>"

        assert normalize_markup(body) == "<A><B>1</B><C>2</C></A>"

    def test_containers_pass_through(self):
        """Aggregates hold only elements and are never matched by the rule."""
        from ofx_parser.parsers.markup import normalize_markup

        assert normalize_markup("<OFX><A><B></B></A></OFX>") == "<OFX><A><B></B></A></OFX>"

    def test_trailing_text_is_closed(self):
        from ofx_parser.parsers.markup import normalize_markup

        assert normalize_markup("<A>1") == "<A>1</A>"

    def test_processing_instruction_not_treated_as_leaf(self):
        from ofx_parser.parsers.markup import opening_tag_name

        assert opening_tag_name('<?OFX OFXHEADER="200"?>') == ''
        assert opening_tag_name('</A>') == ''
        assert opening_tag_name('<A/>') == ''
        assert opening_tag_name('<INTU.BID>') == 'INTU.BID'

    @pytest.mark.parametrize("body", [
        "<OFX><A>1<B>2</A></OFX>",
        "<OFX>\n <A>\n  <B>x y\n  <C>3\n </A>\n</OFX>",
        "<OFX><A><B>1</B></A></OFX>",
        "<OFX><NAME>AT&T<MEMO>a > b</OFX>",
    ])
    def test_idempotent(self, body):
        """Normalizing twice gives the same result as normalizing once."""
        from ofx_parser.parsers.markup import normalize_markup

        once = normalize_markup(body)

        assert normalize_markup(once) == once

    def test_output_is_well_formed(self, bank_ofx):
        """The normalized fixture body parses strictly (no recovery)."""
        from lxml import etree
        from ofx_parser.parsers.header import split_header
        from ofx_parser.parsers.markup import normalize_markup

        _, body = split_header(bank_ofx)
        root = etree.fromstring(normalize_markup(body).encode('utf-8'))

        assert root.tag == 'OFX'
        assert len(root.findall('.//STMTTRN')) == 3
