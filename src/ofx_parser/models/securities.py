"""
Security list and position models.

A security is identified by the pair (unique_id, unique_id_type), e.g.
('037833100', 'CUSIP'). Positions and investment transactions refer to
securities through a SecurityId rather than by ticker.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class SecurityId(BaseModel):
    """SECID aggregate: composite key of a security."""

    unique_id: Optional[str] = Field(
        default=None,
        description="Identifier value (UNIQUEID)",
        examples=["037833100"]
    )
    unique_id_type: Optional[str] = Field(
        default=None,
        description="Identifier scheme (UNIQUEIDTYPE)",
        examples=["CUSIP"]
    )

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> tuple:
        """(unique_id, unique_id_type) pair for joining positions to securities."""
        return (self.unique_id, self.unique_id_type)


class SecurityInfo(BaseModel):
    """SECINFO aggregate shared by every security kind."""

    security_id: Optional[SecurityId] = None
    ticker: Optional[str] = None
    fi_id: Optional[str] = None
    rating: Optional[str] = None
    unit_price: Optional[Decimal] = None
    unit_price_date: Optional[datetime] = None
    currency: Optional[str] = None
    memo: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class StockInfo(BaseModel):
    """
    STOCKINFO entry of the security list.

    ``stock_yield`` holds the YIELD element; ``yield`` itself is a Python
    keyword.
    """

    security_info: Optional[SecurityInfo] = None
    stock_type: Optional[str] = Field(default=None, examples=["COMMON"])
    stock_yield: Optional[Decimal] = None
    yield_as_of_date: Optional[datetime] = None
    asset_class: Optional[str] = None
    fi_asset_class: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class StockPosition(BaseModel):
    """POSSTOCK entry of an investment position list."""

    security_id: Optional[SecurityId] = None
    held_in_account: Optional[str] = Field(
        default=None,
        description="Sub-account holding the position (CASH, MARGIN, SHORT, OTHER)"
    )
    position_type: Optional[str] = Field(default=None, description="LONG or SHORT")
    units: Optional[Decimal] = None
    unit_price: Optional[Decimal] = None
    price_date: Optional[datetime] = None
    memo: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class OptionPosition(StockPosition):
    """POSOPT entry; carries the market value in addition to stock fields."""

    market_value: Optional[Decimal] = None
