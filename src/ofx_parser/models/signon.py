"""
Sign-on and signup models.

SONRS carries the server's response status, its clock and the institution;
ACCTINFO records list the accounts available to the signed-on user.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from ofx_parser.config import get_code_tables


class Status(BaseModel):
    """
    STATUS aggregate of a response.

    All three fields are required by OFX but are not validated here:
    a missing node leaves the field None.
    """

    code: Optional[str] = Field(
        default=None,
        description="Status code ('0' is success)",
        examples=["0", "15500"]
    )
    severity: Optional[str] = Field(
        default=None,
        description="INFO, WARN or ERROR",
        examples=["INFO"]
    )
    message: Optional[str] = Field(
        default=None,
        description="Free-form server message"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def code_description(self) -> Optional[str]:
        """Meaning of the status code from the code tables, None if unknown."""
        return get_code_tables().describe('status_codes', self.code)

    @property
    def is_success(self) -> bool:
        return self.code is not None and self.code.strip() == '0'


class Institute(BaseModel):
    """Financial institution (FI aggregate)."""

    name: Optional[str] = Field(default=None, description="FI/ORG")
    id: Optional[str] = Field(default=None, description="FI/FID")

    model_config = ConfigDict(frozen=True)


class SignOn(BaseModel):
    """
    Sign-on response (SIGNONMSGSRSV1/SONRS).

    Attributes:
        status: Response status
        date: Server date (DTSERVER), required by OFX
        language: Language code, e.g. 'ENG'
        institute: Financial institution, None without an FI aggregate
    """

    status: Optional[Status] = None
    date: Optional[datetime] = None
    language: Optional[str] = None
    institute: Optional[Institute] = None

    model_config = ConfigDict(frozen=True)


class AccountInfo(BaseModel):
    """
    One ACCTINFO record from a signup response.

    ``bank_id`` and ``type`` are None when the node is missing and ``""``
    when the node is present but empty.
    """

    desc: Optional[str] = Field(default=None, description="Account description")
    number: Optional[str] = Field(default=None, description="ACCTID, required by OFX")
    bank_id: Optional[str] = Field(default=None, description="BANKID (routing number)")
    type: Optional[str] = Field(default=None, description="ACCTTYPE", examples=["CHECKING"])

    model_config = ConfigDict(frozen=True)
