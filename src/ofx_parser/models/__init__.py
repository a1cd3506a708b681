"""
Pydantic models for the parsed OFX document.

All models are frozen; repeated relationships are tuples in document order.
"""

from ofx_parser.models.signon import Status, Institute, SignOn, AccountInfo
from ofx_parser.models.securities import (
    SecurityId,
    SecurityInfo,
    StockInfo,
    StockPosition,
    OptionPosition,
)
from ofx_parser.models.transactions import Transaction, StockTransaction
from ofx_parser.models.accounts import Statement, BankAccount, CreditAccount, InvestmentAccount
from ofx_parser.models.document import Document

__all__ = [
    'Status',
    'Institute',
    'SignOn',
    'AccountInfo',
    'SecurityId',
    'SecurityInfo',
    'StockInfo',
    'StockPosition',
    'OptionPosition',
    'Transaction',
    'StockTransaction',
    'Statement',
    'BankAccount',
    'CreditAccount',
    'InvestmentAccount',
    'Document',
]
