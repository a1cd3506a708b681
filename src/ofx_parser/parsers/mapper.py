"""
Domain mapping from an OFX tree to the Document model.

Each builder is a pure function of (tree, element): it reads a fixed set of
tag paths below the element and returns a frozen model. Absent nodes leave
fields None; present-but-empty string nodes yield ''. Dates go through
parse_datetime, whose InvalidDateFormat is deliberately not caught here.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional

from lxml import etree

from ofx_parser.models import (
    AccountInfo,
    BankAccount,
    CreditAccount,
    Document,
    Institute,
    InvestmentAccount,
    OptionPosition,
    SecurityId,
    SecurityInfo,
    SignOn,
    Statement,
    Status,
    StockInfo,
    StockPosition,
    StockTransaction,
    Transaction,
)
from ofx_parser.parsers.datetime_parser import parse_datetime
from ofx_parser.parsers.tree import OfxTree
from ofx_parser.validators import parse_decimal

logger = logging.getLogger(__name__)

# Section roots, relative to the document root
SIGNON_PATH = 'SIGNONMSGSRSV1/SONRS'
SIGNUP_PATH = 'SIGNUPMSGSRSV1/ACCTINFOTRNRS'
BANK_PATH = 'BANKMSGSRSV1/STMTTRNRS'
CREDIT_CARD_PATH = 'CREDITCARDMSGSRSV1/CCSTMTTRNRS'
SECURITY_LIST_PATH = 'SECLISTMSGSRSV1/SECLIST/STOCKINFO'
INVESTMENT_PATH = 'INVSTMTMSGSRSV1/INVSTMTTRNRS/INVSTMTRS'

# Investment trade aggregates: wrapper tag -> (inner aggregate, type tag)
STOCK_TRADES = {
    'BUYSTOCK': ('INVBUY', 'BUYTYPE'),
    'SELLSTOCK': ('INVSELL', 'SELLTYPE'),
}


def _decimal(tree: OfxTree, path: str, node: etree._Element) -> Optional[Decimal]:
    return parse_decimal(tree.text_at(path, node))


def _datetime(tree: OfxTree, path: str, node: etree._Element) -> Optional[datetime]:
    """Parsed date at ``path``; None when the node is absent or empty."""
    text = tree.text_at(path, node)
    if not text:
        return None
    return parse_datetime(text)


# === Sign-on and signup ===

def build_status(tree: OfxTree, node: etree._Element) -> Status:
    return Status(
        code=tree.text_at('CODE', node),
        severity=tree.text_at('SEVERITY', node),
        message=tree.text_at('MESSAGE', node),
    )


def build_signon(tree: OfxTree, node: etree._Element) -> SignOn:
    """Build SignOn from a SONRS element."""
    status_node = tree.first('STATUS', node)
    fi_node = tree.first('FI', node)

    institute = None
    if fi_node is not None:
        institute = Institute(
            name=tree.text_at('ORG', fi_node),
            id=tree.text_at('FID', fi_node),
        )

    return SignOn(
        status=build_status(tree, status_node) if status_node is not None else None,
        date=_datetime(tree, 'DTSERVER', node),
        language=tree.text_at('LANGUAGE', node),
        institute=institute,
    )


def build_account_info(tree: OfxTree, node: etree._Element) -> AccountInfo:
    """Build AccountInfo from an ACCTINFO element (bank details may be nested)."""
    return AccountInfo(
        desc=tree.text_at('DESC', node),
        number=tree.text_at('ACCTID', node),
        bank_id=tree.text_at('BANKID', node),
        type=tree.text_at('ACCTTYPE', node),
    )


def build_signup_account_info(tree: OfxTree, node: etree._Element) -> List[AccountInfo]:
    """All ACCTINFO records of an ACCTINFOTRNRS element, in order."""
    return [build_account_info(tree, info) for info in tree.select('ACCTINFO', node)]


# === Bank and credit card ===

def build_transaction(tree: OfxTree, node: etree._Element) -> Transaction:
    """Build a Transaction from a STMTTRN element."""
    payee = tree.text_at('PAYEE', node)
    name = tree.text_at('NAME', node)
    if payee is None and name is None:
        combined_payee = None
    else:
        combined_payee = (payee or '') + (name or '')

    return Transaction(
        type=tree.text_at('TRNTYPE', node),
        date=_datetime(tree, 'DTPOSTED', node),
        amount=_decimal(tree, 'TRNAMT', node),
        fit_id=tree.text_at('FITID', node),
        payee=combined_payee,
        memo=tree.text_at('MEMO', node),
        sic=tree.text_at('SIC', node),
        check_number=tree.text_at('CHECKNUM', node) or None,
    )


def build_bank_statement(tree: OfxTree, node: etree._Element, response: str) -> Statement:
    """
    Statement of a STMTRS or CCSTMTRS response.

    Args:
        tree: Document tree
        node: STMTTRNRS or CCSTMTTRNRS element
        response: 'STMTRS' or 'CCSTMTRS'
    """
    return Statement(
        currency=tree.text_at(f'{response}/CURDEF', node),
        start_date=_datetime(tree, f'{response}/BANKTRANLIST/DTSTART', node),
        end_date=_datetime(tree, f'{response}/BANKTRANLIST/DTEND', node),
        transactions=[
            build_transaction(tree, t)
            for t in tree.select(f'{response}/BANKTRANLIST/STMTTRN', node)
        ],
    )


def build_bank(tree: OfxTree, node: etree._Element) -> BankAccount:
    """Build a BankAccount from a STMTTRNRS element."""
    return BankAccount(
        transaction_uid=tree.text_at('TRNUID', node),
        number=tree.text_at('STMTRS/BANKACCTFROM/ACCTID', node),
        routing_number=tree.text_at('STMTRS/BANKACCTFROM/BANKID', node),
        type=tree.text_at('STMTRS/BANKACCTFROM/ACCTTYPE', node),
        balance=_decimal(tree, 'STMTRS/LEDGERBAL/BALAMT', node),
        balance_date=_datetime(tree, 'STMTRS/LEDGERBAL/DTASOF', node),
        statement=build_bank_statement(tree, node, 'STMTRS'),
    )


def build_credit(tree: OfxTree, node: etree._Element) -> CreditAccount:
    """Build a CreditAccount from a CCSTMTTRNRS element."""
    return CreditAccount(
        number=tree.text_at('CCSTMTRS/CCACCTFROM/ACCTID', node),
        transaction_uid=tree.text_at('TRNUID', node),
        balance=_decimal(tree, 'CCSTMTRS/LEDGERBAL/BALAMT', node),
        balance_date=_datetime(tree, 'CCSTMTRS/LEDGERBAL/DTASOF', node),
        remaining_credit=_decimal(tree, 'CCSTMTRS/AVAILBAL/BALAMT', node),
        remaining_credit_date=_datetime(tree, 'CCSTMTRS/AVAILBAL/DTASOF', node),
        statement=build_bank_statement(tree, node, 'CCSTMTRS'),
    )


# === Securities ===

def build_security_id(tree: OfxTree, node: Optional[etree._Element]) -> Optional[SecurityId]:
    """SecurityId from a SECID element; None when the element is absent."""
    if node is None:
        return None
    return SecurityId(
        unique_id=tree.text_at('UNIQUEID', node),
        unique_id_type=tree.text_at('UNIQUEIDTYPE', node),
    )


def build_security_info(tree: OfxTree, node: etree._Element) -> SecurityInfo:
    """Build SecurityInfo from a SECINFO element."""
    return SecurityInfo(
        security_id=build_security_id(tree, tree.first('SECID', node)),
        ticker=tree.text_at('TICKER', node),
        fi_id=tree.text_at('FIID', node),
        rating=tree.text_at('RATING', node),
        unit_price=_decimal(tree, 'UNITPRICE', node),
        unit_price_date=_datetime(tree, 'DTASOF', node),
        currency=tree.text_at('CURRENCY', node),
        memo=tree.text_at('MEMO', node),
    )


def build_stock_info(tree: OfxTree, node: etree._Element) -> StockInfo:
    """Build StockInfo from a STOCKINFO element."""
    secinfo = tree.first('SECINFO', node)
    return StockInfo(
        security_info=build_security_info(tree, secinfo) if secinfo is not None else None,
        stock_type=tree.text_at('STOCKTYPE', node),
        stock_yield=_decimal(tree, 'YIELD', node),
        yield_as_of_date=_datetime(tree, 'DTYIELDASOF', node),
        asset_class=tree.text_at('ASSETCLASS', node),
        fi_asset_class=tree.text_at('FIASSETCLASS', node),
    )


# === Investment ===

def build_stock_position(tree: OfxTree, node: etree._Element) -> StockPosition:
    """Build a StockPosition from a POSSTOCK element."""
    return StockPosition(**_position_fields(tree, node))


def build_option_position(tree: OfxTree, node: etree._Element) -> OptionPosition:
    """Build an OptionPosition from a POSOPT element."""
    return OptionPosition(
        market_value=_decimal(tree, 'INVPOS/MKTVAL', node),
        **_position_fields(tree, node),
    )


def _position_fields(tree: OfxTree, node: etree._Element) -> Dict[str, object]:
    return {
        'security_id': build_security_id(tree, tree.first('INVPOS/SECID', node)),
        'held_in_account': tree.text_at('INVPOS/HELDINACCT', node),
        'position_type': tree.text_at('INVPOS/POSTYPE', node),
        'units': _decimal(tree, 'INVPOS/UNITS', node),
        'unit_price': _decimal(tree, 'INVPOS/UNITPRICE', node),
        'price_date': _datetime(tree, 'INVPOS/DTPRICEASOF', node),
        'memo': tree.text_at('INVPOS/MEMO', node),
    }


def build_stock_transaction(tree: OfxTree, node: etree._Element) -> StockTransaction:
    """
    Build a StockTransaction from a BUYSTOCK or SELLSTOCK element.

    Trade fields live in the inner INVBUY / INVSELL aggregate; the
    BUYTYPE / SELLTYPE code is a direct child of the wrapper.
    """
    inner_tag, type_tag = STOCK_TRADES[node.tag]
    inner = tree.first(inner_tag, node)

    fields: Dict[str, object] = {}
    if inner is not None:
        fields = {
            'transaction_id': tree.text_at('INVTRAN/FITID', inner),
            'trade_date': _datetime(tree, 'INVTRAN/DTTRADE', inner),
            'settle_date': _datetime(tree, 'INVTRAN/DTSETTLE', inner),
            'security_id': build_security_id(tree, tree.first('SECID', inner)),
            'units': _decimal(tree, 'UNITS', inner),
            'unit_price': _decimal(tree, 'UNITPRICE', inner),
            'commission': _decimal(tree, 'COMMISSION', inner),
            'total': _decimal(tree, 'TOTAL', inner),
            'sub_account_security': tree.text_at('SUBACCTSEC', inner),
            'sub_account_fund': tree.text_at('SUBACCTFUND', inner),
        }

    return StockTransaction(type=tree.text_at(type_tag, node), **fields)


def build_investment_statement(tree: OfxTree, node: etree._Element) -> Statement:
    """Statement of an INVSTMTRS element: cash transactions, positions and trades."""
    trades = [
        build_stock_transaction(tree, trade)
        for tranlist in tree.select('INVTRANLIST', node)
        for trade in tree.children(tranlist, *STOCK_TRADES)
    ]

    return Statement(
        currency=tree.text_at('CURDEF', node),
        start_date=_datetime(tree, 'INVTRANLIST/DTSTART', node),
        end_date=_datetime(tree, 'INVTRANLIST/DTEND', node),
        transactions=[
            build_transaction(tree, t)
            for t in tree.select('INVTRANLIST/INVBANKTRAN/STMTTRN', node)
        ],
        stock_positions=[
            build_stock_position(tree, p)
            for p in tree.select('INVPOSLIST/POSSTOCK', node)
        ],
        option_positions=[
            build_option_position(tree, p)
            for p in tree.select('INVPOSLIST/POSOPT', node)
        ],
        stock_transactions=trades,
    )


def build_investment_account(tree: OfxTree, node: etree._Element) -> InvestmentAccount:
    """Build an InvestmentAccount from an INVSTMTRS element."""
    return InvestmentAccount(
        broker_id=tree.text_at('INVACCTFROM/BROKERID', node),
        account_id=tree.text_at('INVACCTFROM/ACCTID', node),
        available_cash=_decimal(tree, 'INVBAL/AVAILCASH', node),
        margin_balance=_decimal(tree, 'INVBAL/MARGINBALANCE', node),
        short_balance=_decimal(tree, 'INVBAL/SHORTBALANCE', node),
        statement=build_investment_statement(tree, node),
    )


# === Document ===

def build_document(tree: OfxTree, header: Optional[Dict[str, str]] = None) -> Document:
    """
    Map every top-level section of the tree into a Document.

    Sections are mapped independently; a section missing from the tree
    yields an empty tuple (or None for the sign-on).

    Args:
        tree: Tree built from the normalized body
        header: Header mapping to attach

    Raises:
        InvalidDateFormat: If any present date field is malformed
        InvalidAmountFormat: If any present amount field is not numeric
    """
    sonrs = tree.first(SIGNON_PATH)

    signup_account_info = [
        info
        for trnrs in tree.select(SIGNUP_PATH)
        for info in build_signup_account_info(tree, trnrs)
    ]
    bank_accounts = [build_bank(tree, n) for n in tree.select(BANK_PATH)]
    credit_accounts = [build_credit(tree, n) for n in tree.select(CREDIT_CARD_PATH)]
    securities = [build_stock_info(tree, n) for n in tree.select(SECURITY_LIST_PATH)]
    investment_accounts = [
        build_investment_account(tree, n) for n in tree.select(INVESTMENT_PATH)
    ]

    logger.debug(
        f"Mapped sections: signon={sonrs is not None}, "
        f"account_info={len(signup_account_info)}, bank={len(bank_accounts)}, "
        f"credit={len(credit_accounts)}, securities={len(securities)}, "
        f"investment={len(investment_accounts)}"
    )

    return Document(
        header=header or {},
        sign_on=build_signon(tree, sonrs) if sonrs is not None else None,
        signup_account_info=signup_account_info,
        bank_accounts=bank_accounts,
        credit_accounts=credit_accounts,
        securities=securities,
        investment_accounts=investment_accounts,
    )
