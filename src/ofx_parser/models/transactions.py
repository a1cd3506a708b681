"""
Transaction models for bank, credit card and investment statements.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from ofx_parser.config import get_code_tables
from ofx_parser.models.securities import SecurityId
from ofx_parser.types import MerchantCategories
from ofx_parser.validators import to_cents


class Transaction(BaseModel):
    """
    STMTTRN record of a bank, credit card or investment cash statement.

    Attributes:
        type: TRNTYPE code (DEBIT, CREDIT, POS, ...)
        date: Posting date (DTPOSTED)
        amount: Signed amount (TRNAMT), exact digits as read
        fit_id: FITID, the institution's unique id used for deduplication
        payee: PAYEE text followed by NAME text
        memo: MEMO
        sic: Merchant category code
        check_number: CHECKNUM, None when absent or empty
    """

    type: Optional[str] = Field(default=None, examples=["DEBIT"])
    date: Optional[datetime] = None
    amount: Optional[Decimal] = None
    fit_id: Optional[str] = None
    payee: Optional[str] = None
    memo: Optional[str] = None
    sic: Optional[str] = None
    check_number: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def amount_in_cents(self) -> Optional[int]:
        return to_cents(self.amount)

    @property
    def type_description(self) -> Optional[str]:
        """Description of the TRNTYPE code, None if unknown."""
        return get_code_tables().describe('transaction_types', self.type)

    @property
    def sic_description(self) -> Optional[str]:
        """Merchant category description of the SIC code, None if unknown."""
        return MerchantCategories.lookup(self.sic)


class StockTransaction(BaseModel):
    """
    BUYSTOCK or SELLSTOCK record of an investment transaction list.

    ``type`` holds BUYTYPE (BUY, BUYTOCOVER) or SELLTYPE (SELL, SELLSHORT).
    """

    transaction_id: Optional[str] = Field(default=None, description="INVTRAN/FITID")
    trade_date: Optional[datetime] = None
    settle_date: Optional[datetime] = None
    security_id: Optional[SecurityId] = None
    units: Optional[Decimal] = None
    unit_price: Optional[Decimal] = None
    commission: Optional[Decimal] = None
    total: Optional[Decimal] = None
    sub_account_security: Optional[str] = Field(default=None, description="SUBACCTSEC")
    sub_account_fund: Optional[str] = Field(default=None, description="SUBACCTFUND")
    type: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_buy(self) -> bool:
        return self.type is not None and self.type.upper().startswith('BUY')
