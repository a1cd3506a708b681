"""
Discovery helper classes for exploring OFX code tables.

Provides user-facing APIs to look up transaction types, account types,
status codes and merchant category codes from ofx_parser/data/codes.yaml.
"""

from typing import Dict, Optional
from ofx_parser.config import get_code_tables


class TransactionTypes:
    """
    Helper class for TRNTYPE codes.

    All methods use the centralized code tables and return copies
    to prevent accidental mutations.

    Example:
        >>> TransactionTypes.get_description('POS')
        'Point of sale debit or credit'
        >>> TransactionTypes.is_valid('XYZ')
        False
    """

    @staticmethod
    def list_available() -> Dict[str, str]:
        """List all transaction type codes with descriptions."""
        return get_code_tables().transaction_types.copy()

    @staticmethod
    def get_description(code: str) -> str:
        """
        Get description for a transaction type code.

        Raises:
            ValueError: If code is not found
        """
        description = get_code_tables().describe('transaction_types', code)
        if description is None:
            raise ValueError(f"Unknown transaction type: {code}")
        return description

    @staticmethod
    def is_valid(code: Optional[str]) -> bool:
        """Check if a transaction type code is known."""
        return get_code_tables().describe('transaction_types', code) is not None


class AccountTypes:
    """
    Helper class for bank ACCTTYPE codes.

    Example:
        >>> AccountTypes.get_description('MONEYMRKT')
        'Money market'
    """

    @staticmethod
    def list_available() -> Dict[str, str]:
        """List all account type codes."""
        return get_code_tables().account_types.copy()

    @staticmethod
    def get_description(code: str) -> str:
        """
        Get description for an account type code.

        Raises:
            ValueError: If code is not found
        """
        description = get_code_tables().describe('account_types', code)
        if description is None:
            raise ValueError(f"Unknown account type: {code}")
        return description

    @staticmethod
    def is_valid(code: Optional[str]) -> bool:
        return get_code_tables().describe('account_types', code) is not None


class StatusCodes:
    """
    Helper class for STATUS codes and severities.

    Example:
        >>> StatusCodes.get_description('15500')
        'Signon invalid'
        >>> StatusCodes.is_success('0')
        True
    """

    @staticmethod
    def list_available() -> Dict[str, str]:
        return get_code_tables().status_codes.copy()

    @staticmethod
    def get_description(code: str) -> str:
        """
        Get meaning of a status code.

        Raises:
            ValueError: If code is not found
        """
        description = get_code_tables().describe('status_codes', code)
        if description is None:
            raise ValueError(f"Unknown status code: {code}")
        return description

    @staticmethod
    def get_severity_description(severity: str) -> str:
        """
        Get meaning of a status severity (INFO, WARN, ERROR).

        Raises:
            ValueError: If severity is not found
        """
        description = get_code_tables().describe('severities', severity)
        if description is None:
            raise ValueError(f"Unknown status severity: {severity}")
        return description

    @staticmethod
    def is_valid(code: Optional[str]) -> bool:
        return get_code_tables().describe('status_codes', code) is not None

    @staticmethod
    def is_success(code: Optional[str]) -> bool:
        """Code 0 is the only success code."""
        return code is not None and code.strip() == '0'


class MerchantCategories:
    """
    Helper class for merchant category codes (the SIC field of STMTTRN).

    Codes are compared without leading zeros, so '0742' and '742' match.

    Example:
        >>> MerchantCategories.get_description('5411')
        'Grocery stores and supermarkets'
    """

    @staticmethod
    def _key(code: str) -> str:
        return code.strip().lstrip('0') or '0'

    @staticmethod
    def list_available() -> Dict[str, str]:
        return get_code_tables().merchant_categories.copy()

    @staticmethod
    def lookup(code: Optional[str]) -> Optional[str]:
        """Description for a merchant category code, or None if unknown."""
        if not code:
            return None
        return get_code_tables().describe('merchant_categories', MerchantCategories._key(code))

    @staticmethod
    def get_description(code: str) -> str:
        """
        Get description for a merchant category code.

        Raises:
            ValueError: If code is not found
        """
        description = MerchantCategories.lookup(code)
        if description is None:
            raise ValueError(f"Unknown merchant category code: {code}")
        return description

    @staticmethod
    def is_valid(code: Optional[str]) -> bool:
        return MerchantCategories.lookup(code) is not None
