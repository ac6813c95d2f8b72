"""
Wallet endpoints for API v1.

Deposits and withdrawals through mobile‑money providers.  The
provider integration is mocked.  Non‑positive amounts, unknown
providers and withdrawals above the balance are rejected with 400
before any balance changes.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from marketplace_api.app.core.storage import EntityStore, get_storage
from marketplace_api.app.schemas.wallet import MobileMoneyProvider, WalletResponse, WalletTransaction
from marketplace_api.app.services import NotFoundError
from marketplace_api.app.services.wallet_service import WalletService

router = APIRouter()


@router.get("/wallet/providers", response_model=List[MobileMoneyProvider])
async def list_providers() -> List[MobileMoneyProvider]:
    return WalletService.providers()


@router.post("/users/{user_id}/wallet/deposit", response_model=WalletResponse)
async def deposit(
    user_id: int,
    transaction: WalletTransaction,
    store: EntityStore = Depends(get_storage),
) -> WalletResponse:
    try:
        return await WalletService.deposit(store, user_id, transaction)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.post("/users/{user_id}/wallet/withdraw", response_model=WalletResponse)
async def withdraw(
    user_id: int,
    transaction: WalletTransaction,
    store: EntityStore = Depends(get_storage),
) -> WalletResponse:
    try:
        return await WalletService.withdraw(store, user_id, transaction)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
