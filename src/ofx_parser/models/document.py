"""
Top-level OFX document model.

A Document is built in one pass from one input and is immutable afterwards.
Sections missing from the input are empty tuples, never None.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ofx_parser.models.accounts import BankAccount, CreditAccount, InvestmentAccount
from ofx_parser.models.securities import StockInfo
from ofx_parser.models.signon import AccountInfo, SignOn


class Document(BaseModel):
    """
    Parsed OFX document.

    Example:
        >>> from ofx_parser import parse
        >>> doc = parse(open('statement.ofx').read())
        >>> doc.header['VERSION']
        '102'
        >>> [t.amount for t in doc.bank_account.statement.transactions]
        [Decimal('-10.00'), Decimal('2500.00')]
    """

    header: Mapping[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="OFX header key/value pairs, read-only (empty for empty input)"
    )
    sign_on: Optional[SignOn] = Field(
        default=None,
        description="Sign-on response, None when the document has none"
    )
    signup_account_info: Tuple[AccountInfo, ...] = ()
    bank_accounts: Tuple[BankAccount, ...] = ()
    credit_accounts: Tuple[CreditAccount, ...] = ()
    securities: Tuple[StockInfo, ...] = ()
    investment_accounts: Tuple[InvestmentAccount, ...] = ()

    model_config = ConfigDict(frozen=True)

    @field_validator('header')
    @classmethod
    def freeze_header(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        """Wrap the header in a read-only view of a private copy."""
        return MappingProxyType(dict(v))

    @field_serializer('header')
    def serialize_header(self, header: Mapping[str, str]) -> dict:
        return dict(header)

    @property
    def bank_account(self) -> Optional[BankAccount]:
        """First bank account, for the common single-account download."""
        return self.bank_accounts[0] if self.bank_accounts else None

    @property
    def credit_card(self) -> Optional[CreditAccount]:
        return self.credit_accounts[0] if self.credit_accounts else None

    @property
    def investment_account(self) -> Optional[InvestmentAccount]:
        return self.investment_accounts[0] if self.investment_accounts else None

    @property
    def is_empty(self) -> bool:
        """True when no header and no section was populated."""
        return not (
            self.header
            or self.sign_on
            or self.signup_account_info
            or self.bank_accounts
            or self.credit_accounts
            or self.securities
            or self.investment_accounts
        )
