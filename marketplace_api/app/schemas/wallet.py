"""
Pydantic models for wallet movements.

Deposits and withdrawals go through a mobile‑money provider.  The
provider integration is mocked: the request is accepted as soon as
the wallet balance has been adjusted.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from .common import CamelModel, Money


class WalletTransaction(CamelModel):
    amount: Decimal = Field(..., examples=[15000.50])
    method: str = Field(..., examples=["orange"], description="Provider code: orange, mtn, africell or bank")


class WalletResponse(CamelModel):
    message: str
    balance: Money


class MobileMoneyProvider(BaseModel):
    name: str
    code: str
