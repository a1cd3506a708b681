"""
Account and statement models.

Bank and credit card accounts carry a ledger balance and a statement of
transactions; investment accounts carry balances, positions and trades.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from ofx_parser.models.securities import OptionPosition, StockPosition
from ofx_parser.models.transactions import StockTransaction, Transaction
from ofx_parser.validators import to_cents


class Statement(BaseModel):
    """
    Statement period and its records, in document order.

    Bank and credit card statements only fill ``transactions``; investment
    statements also fill positions and stock transactions.
    """

    currency: Optional[str] = Field(default=None, examples=["USD"])
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    transactions: Tuple[Transaction, ...] = ()
    stock_positions: Tuple[StockPosition, ...] = ()
    option_positions: Tuple[OptionPosition, ...] = ()
    stock_transactions: Tuple[StockTransaction, ...] = ()

    model_config = ConfigDict(frozen=True)


class BankAccount(BaseModel):
    """
    Bank statement response (BANKMSGSRSV1/STMTTRNRS).

    Attributes:
        transaction_uid: TRNUID of the statement transaction
        number: BANKACCTFROM/ACCTID
        routing_number: BANKACCTFROM/BANKID
        type: BANKACCTFROM/ACCTTYPE (CHECKING, SAVINGS, ...)
        balance: LEDGERBAL/BALAMT
        balance_date: LEDGERBAL/DTASOF
        statement: Statement with BANKTRANLIST transactions
    """

    transaction_uid: Optional[str] = None
    number: Optional[str] = None
    routing_number: Optional[str] = None
    type: Optional[str] = None
    balance: Optional[Decimal] = None
    balance_date: Optional[datetime] = None
    statement: Optional[Statement] = None

    model_config = ConfigDict(frozen=True)

    @property
    def balance_in_cents(self) -> Optional[int]:
        return to_cents(self.balance)


class CreditAccount(BaseModel):
    """Credit card statement response (CREDITCARDMSGSRSV1/CCSTMTTRNRS)."""

    number: Optional[str] = None
    transaction_uid: Optional[str] = None
    balance: Optional[Decimal] = None
    balance_date: Optional[datetime] = None
    remaining_credit: Optional[Decimal] = Field(default=None, description="AVAILBAL/BALAMT")
    remaining_credit_date: Optional[datetime] = Field(default=None, description="AVAILBAL/DTASOF")
    statement: Optional[Statement] = None

    model_config = ConfigDict(frozen=True)

    @property
    def balance_in_cents(self) -> Optional[int]:
        return to_cents(self.balance)

    @property
    def remaining_credit_in_cents(self) -> Optional[int]:
        return to_cents(self.remaining_credit)


class InvestmentAccount(BaseModel):
    """Investment statement response (INVSTMTMSGSRSV1/INVSTMTTRNRS/INVSTMTRS)."""

    broker_id: Optional[str] = None
    account_id: Optional[str] = None
    available_cash: Optional[Decimal] = None
    margin_balance: Optional[Decimal] = None
    short_balance: Optional[Decimal] = None
    statement: Optional[Statement] = None

    model_config = ConfigDict(frozen=True)
