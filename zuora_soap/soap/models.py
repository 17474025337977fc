# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Zuora SOAP)
# Description: Typed request records and session value for Zuora SOAP calls.
# ============================================================================
"""
Zuora SOAP Models.

Pydantic models for the object-creation requests and for the session
obtained from the login call. Request models are interchangeable with plain
dicts keyed by snake_case field names.
"""

import time
from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ZuoraSession(BaseModel):
    """
    Session obtained from a successful login.

    Attributes:
        token: Session token sent in the SessionHeader of later requests
        sandbox: Whether the session belongs to the sandbox tenant
        obtained_at: Unix timestamp when the login succeeded
    """

    model_config = ConfigDict(frozen=True)

    token: str = Field(..., description="Session token returned by the login call")
    sandbox: bool = Field(True, description="Session was opened against the sandbox")
    obtained_at: float = Field(default_factory=time.time, description="Unix timestamp of the login")

    @property
    def is_valid(self) -> bool:
        """An empty token cannot authenticate requests."""
        return bool(self.token)


class RefundRequest(BaseModel):
    """Fields accepted when creating a Refund."""

    model_config = ConfigDict(extra="ignore")

    account_id: str | None = None
    amount: Decimal | None = None
    payment_id: str | None = None
    type: str | None = Field(None, description="Refund type, e.g. 'Electronic' or 'External'")


class BillRunRequest(BaseModel):
    """Fields accepted when creating a BillRun."""

    model_config = ConfigDict(extra="ignore")

    account_id: str | None = None
    auto_email: bool | None = None
    auto_post: bool | None = None
    auto_renewal: bool | None = None
    batch: str | None = None
    bill_cycle_day: int | str | None = Field(None, description="'1'..'31' or 'AllBillCycleDays'")
    charge_type_to_exclude: str | None = None
    id: str | None = None
    invoice_date: date | None = None
    no_email_for_zero_amount_invoice: bool | None = None
    status: str | None = None
    target_date: date | None = None
