from datetime import date
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt


class PayMeVersion(str, Enum):
    """Supported versions of the PayMe link standard."""
    V1 = "1"


class PaymentLinkParams(BaseModel):
    """
    Parameter object of a PayMe link.

    Field names match the query keys of the link. Only shape and types are
    enforced here; the standard's rules are applied by the validators.
    """
    V: str = Field(
        default=PayMeVersion.V1.value,
        description="Version"
    )
    IBAN: str = Field(
        default="",
        description="IBAN (account number)"
    )
    AM: Optional[Union[StrictFloat, StrictInt, str]] = Field(
        default=None,
        description="Amount"
    )
    CC: Optional[str] = Field(
        default=None,
        description="Currency code; only EUR is valid in version 1"
    )
    DT: Optional[Union[date, str]] = Field(
        default=None,
        description="Due date, YYYYMMDD"
    )
    PI: Optional[str] = Field(
        default=None,
        description="Payment identifier, /VS../SS../KS.."
    )
    MSG: Optional[str] = Field(
        default=None,
        description="Message for beneficiary"
    )
    CN: Optional[str] = Field(
        default=None,
        description="Creditor name"
    )
