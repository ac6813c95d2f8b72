"""
Business logic for wallet deposits and withdrawals.

Money moves through a mobile‑money provider.  The provider side is
mocked: a movement succeeds as soon as the wallet balance has been
adjusted.  Every successful movement leaves a ``payment``
notification for the user.

The store applies any balance delta it is given, so the overdraft
check lives here.  The balance read, the check, the adjustment and
the notification run in one store transaction.
"""

import logging
from decimal import Decimal
from typing import List

from . import NotFoundError
from ..core.config import settings
from ..core.storage import EntityStore
from ..schemas.common import CENT, format_amount, parse_amount
from ..schemas.notification import NotificationCreate
from ..schemas.wallet import MobileMoneyProvider, WalletResponse, WalletTransaction

logger = logging.getLogger(__name__)

PROVIDERS = [
    MobileMoneyProvider(name="Orange Money", code="orange"),
    MobileMoneyProvider(name="MTN MoMo", code="mtn"),
    MobileMoneyProvider(name="Africell Money", code="africell"),
    MobileMoneyProvider(name="Bank Transfer", code="bank"),
]


class WalletService:
    """Сервис для операций с кошельком."""

    @classmethod
    def providers(cls) -> List[MobileMoneyProvider]:
        return list(PROVIDERS)

    @classmethod
    def _provider_name(cls, code: str) -> str:
        for provider in PROVIDERS:
            if provider.code == code:
                return provider.name
        raise ValueError(f"Unsupported payment method: {code}")

    @classmethod
    def _validate(cls, data: WalletTransaction) -> tuple:
        """Return ``(amount, provider name)`` or raise ``ValueError``.

        Runs before the store is touched.
        """
        try:
            amount = parse_amount(data.amount)
        except ValueError:
            raise ValueError("Invalid amount") from None
        # Balances are kept in whole cents; fractions of a cent would be rounded away.
        if amount <= 0 or amount != amount.quantize(CENT):
            raise ValueError("Invalid amount")
        return amount, cls._provider_name(data.method)

    @staticmethod
    def _display(amount: Decimal) -> str:
        return f"{settings.currency_symbol} {Decimal(format_amount(amount)):,}"

    @classmethod
    async def deposit(cls, store: EntityStore, user_id: int, data: WalletTransaction) -> WalletResponse:
        amount, provider = cls._validate(data)
        with store.transaction():
            user = store.adjust_user_balance(user_id, amount)
            if user is None:
                raise NotFoundError("User not found")
            store.create_notification(
                NotificationCreate(
                    user_id=user_id,
                    title="Deposit Successful",
                    message=f"{cls._display(amount)} has been added to your wallet from {provider}",
                    type="payment",
                )
            )
        logger.info("Deposit of %s to user %s via %s", amount, user_id, data.method)
        return WalletResponse(message="Deposit successful", balance=user.wallet_balance)

    @classmethod
    async def withdraw(cls, store: EntityStore, user_id: int, data: WalletTransaction) -> WalletResponse:
        """Withdraw to a mobile‑money account.

        Raises ``ValueError`` for a non‑positive amount, an unknown
        provider or an insufficient balance, and ``NotFoundError`` for
        an unknown user.
        """
        amount, provider = cls._validate(data)
        with store.transaction():
            user = store.get_user(user_id)
            if user is None:
                raise NotFoundError("User not found")
            if parse_amount(user.wallet_balance) < amount:
                raise ValueError("Insufficient balance")
            user = store.adjust_user_balance(user_id, -amount)
            store.create_notification(
                NotificationCreate(
                    user_id=user_id,
                    title="Withdrawal Processed",
                    message=f"{cls._display(amount)} has been withdrawn to your {provider} account",
                    type="payment",
                )
            )
        logger.info("Withdrawal of %s from user %s via %s", amount, user_id, data.method)
        return WalletResponse(message="Withdrawal processed successfully", balance=user.wallet_balance)
