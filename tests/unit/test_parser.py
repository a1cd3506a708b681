"""
Unit tests for the public parse() entry point.
"""

import io
import pytest
from datetime import datetime
from decimal import Decimal


class TestParseEmptyInput:

    def test_empty_string_gives_empty_document(self):
        from ofx_parser import parse, Document

        doc = parse("")

        assert isinstance(doc, Document)
        assert doc.is_empty
        assert doc.header == {}
        assert doc.sign_on is None
        assert doc.bank_accounts == ()
        assert doc.credit_accounts == ()
        assert doc.investment_accounts == ()
        assert doc.securities == ()
        assert doc.signup_account_info == ()

    def test_empty_stream_gives_empty_document(self):
        from ofx_parser import parse

        assert parse(io.StringIO("")).is_empty

    def test_documents_are_independent(self):
        from ofx_parser import parse

        assert parse("") is not parse("")


class TestParseDocuments:

    def test_bank_document(self, bank_ofx):
        from ofx_parser import parse

        doc = parse(bank_ofx)

        assert doc.header['OFXHEADER'] == '100'
        assert doc.header['VERSION'] == '102'
        assert doc.header['CHARSET'] == '1252'
        assert doc.bank_account.number == '123456789'
        assert len(doc.bank_account.statement.transactions) == 3

    def test_ofx2_document(self, ofx2_ofx):
        from ofx_parser import parse

        doc = parse(ofx2_ofx)

        assert doc.header['VERSION'] == '211'
        assert doc.sign_on.date.tzname() == 'PST'
        (transaction,) = doc.bank_account.statement.transactions
        assert transaction.payee == 'Interest & bonus'
        assert transaction.amount == Decimal('1.07')
        assert doc.bank_account.type == 'SAVINGS'

    def test_leading_blank_lines(self, bank_ofx):
        from ofx_parser import parse

        doc = parse("\r\n\r\n" + bank_ofx)

        assert doc.header['VERSION'] == '102'
        assert len(doc.bank_account.statement.transactions) == 3

    def test_bytes_input(self, bank_ofx):
        from ofx_parser import parse

        doc = parse(bank_ofx.encode('utf-8'))

        assert doc.bank_account.balance == Decimal('2329.75')

    def test_cp1252_bytes_input(self):
        """Bytes that are not UTF-8 fall back to cp1252."""
        from ofx_parser import parse

        raw = (
            "OFXHEADER:100\n\n<OFX><BANKMSGSRSV1><STMTTRNRS><STMTRS><BANKTRANLIST>"
            "<STMTTRN><NAME>CAFÉ<FITID>1</STMTTRN>"
            "</BANKTRANLIST></STMTRS></STMTTRNRS></BANKMSGSRSV1></OFX>"
        ).encode('cp1252')

        doc = parse(raw)

        assert doc.bank_account.statement.transactions[0].payee == 'CAFÉ'

    def test_binary_stream_input(self, fixtures_dir):
        from ofx_parser import OfxParser

        with open(fixtures_dir / 'credit_card.ofx', 'rb') as f:
            doc = OfxParser.parse(f)

        assert doc.credit_card.number == '4111111111111111'

    def test_no_boundary_raises(self):
        from ofx_parser import parse, MalformedDocument

        with pytest.raises(MalformedDocument):
            parse("OFXHEADER:100 with no body")

    def test_bad_date_propagates(self, bank_ofx):
        from ofx_parser import parse, InvalidDateFormat

        with pytest.raises(InvalidDateFormat):
            parse(bank_ofx.replace('<DTPOSTED>20090603', '<DTPOSTED>not-a-date'))


class TestOfxParserHelpers:

    def test_pre_process(self):
        from ofx_parser import OfxParser

        header, body = OfxParser.pre_process(
            "OFXHEADER:100\r\nVERSION:102\r\n\r\n<OFX>\r\n<A>1\r\n</OFX>"
        )

        assert header == {'OFXHEADER': '100', 'VERSION': '102'}
        assert body == '<OFX><A>1</A></OFX>'

    def test_parse_datetime_is_exposed(self):
        from ofx_parser import OfxParser

        assert OfxParser.parse_datetime('20090715') == datetime(2009, 7, 15)
