"""Business rules of the service layer."""

import asyncio
import re
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from marketplace_api.app.schemas.common import ListingFilters
from marketplace_api.app.schemas.event import EventUpdate, TicketPurchase
from marketplace_api.app.schemas.job import JobApplicationRequest, JobUpdate
from marketplace_api.app.schemas.review import ReviewCreate
from marketplace_api.app.schemas.user import UserUpdate
from marketplace_api.app.schemas.wallet import WalletTransaction
from marketplace_api.app.services import NotFoundError
from marketplace_api.app.services.event_service import EventService, generate_ticket_number
from marketplace_api.app.services.job_service import JobService
from marketplace_api.app.services.marketplace_service import MarketplaceService
from marketplace_api.app.services.review_service import ReviewService
from marketplace_api.app.services.user_service import UserService
from marketplace_api.app.services.wallet_service import WalletService
from tests.factories import make_event, make_item, make_job, make_user


# ----------------------------------------------------------------------
# Users
# ----------------------------------------------------------------------
@pytest.mark.asyncio
async def test_register_returns_public_user(store):
    user = await UserService.register(store, make_user(skills=["Tailoring"]))
    assert user.id == 1
    assert user.skills == ["Tailoring"]
    assert not hasattr(user, "password")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "second",
    [
        {"username": "other", "email": "fatmata@example.com"},
        {"username": "fatmata", "email": "other@example.com"},
    ],
)
async def test_register_rejects_duplicate_email_or_username(store, second):
    await UserService.register(store, make_user())
    with pytest.raises(ValueError, match="User already exists"):
        await UserService.register(store, make_user(**second))
    assert store.last_id == 1


@pytest.mark.asyncio
async def test_authenticate(store):
    await UserService.register(store, make_user())
    assert (await UserService.authenticate(store, "fatmata@example.com", "secret")).username == "fatmata"
    assert await UserService.authenticate(store, "fatmata@example.com", "wrong") is None
    assert await UserService.authenticate(store, "ghost@example.com", "secret") is None


@pytest.mark.asyncio
async def test_update_user_profile(store):
    user = await UserService.register(store, make_user())
    updated = await UserService.update_user(store, user.id, UserUpdate(location="Makeni", skills=["Sewing"]))
    assert updated.location == "Makeni"
    assert updated.first_name == user.first_name
    assert await UserService.update_user(store, 99, UserUpdate(location="Bo")) is None
    assert await UserService.get_user(store, 99) is None


# ----------------------------------------------------------------------
# Jobs
# ----------------------------------------------------------------------
@pytest.mark.asyncio
async def test_apply_counts_applicants(store):
    job = await JobService.create_job(store, make_job())
    await JobService.apply(store, job.id, JobApplicationRequest(user_id=2, message="Available today"))
    await JobService.apply(store, job.id, JobApplicationRequest(user_id=3))
    assert (await JobService.get_job(store, job.id)).applicants == 2
    assert len(await JobService.list_applications(store, job.id)) == 2
    assert len(await JobService.list_user_applications(store, 3)) == 1


@pytest.mark.asyncio
async def test_apply_to_missing_job(store):
    with pytest.raises(NotFoundError):
        await JobService.apply(store, 404, JobApplicationRequest(user_id=1))


@pytest.mark.asyncio
async def test_apply_to_closed_job(store):
    job = await JobService.create_job(store, make_job())
    await JobService.update_job(store, job.id, JobUpdate(status="completed"))
    with pytest.raises(ValueError):
        await JobService.apply(store, job.id, JobApplicationRequest(user_id=2))
    assert store.get_job_applications(job.id) == []


@pytest.mark.asyncio
async def test_list_jobs_with_filters(seeded_store):
    jobs = await JobService.list_jobs(seeded_store, ListingFilters(location="bo"))
    assert [job.title for job in jobs] == ["Delivery Driver"]
    assert await JobService.list_jobs(seeded_store, ListingFilters(category="Plumbing")) == []


@pytest.mark.asyncio
async def test_marketplace_search(seeded_store):
    await MarketplaceService.create_item(seeded_store, make_item(title="Gaming laptop"))
    items = await MarketplaceService.list_items(seeded_store, ListingFilters(search="LAPTOP"))
    assert [item.title for item in items] == ["Gaming laptop", "HP Laptop 15-inch"]
    assert await MarketplaceService.delete_item(seeded_store, items[0].id) is True
    assert await MarketplaceService.get_item(seeded_store, items[0].id) is None


# ----------------------------------------------------------------------
# Events
# ----------------------------------------------------------------------
def test_ticket_number_format():
    assert re.fullmatch(r"TICKET-\d{13}-[0-9a-z]{9}", generate_ticket_number())


@pytest.mark.asyncio
async def test_purchase_ticket_until_sold_out(store):
    event = await EventService.create_event(store, make_event(total_tickets=2))
    first = await EventService.purchase_ticket(store, event.id, TicketPurchase(user_id=5))
    second = await EventService.purchase_ticket(store, event.id, TicketPurchase(user_id=6))
    assert first.ticket_number.startswith("TICKET-")
    assert first.status == "active"
    assert first.id != second.id
    with pytest.raises(ValueError, match="sold out"):
        await EventService.purchase_ticket(store, event.id, TicketPurchase(user_id=7))
    assert (await EventService.get_event(store, event.id)).sold_tickets == 2
    assert len(await EventService.list_tickets(store, event.id)) == 2


@pytest.mark.asyncio
async def test_purchase_ticket_for_missing_or_cancelled_event(store):
    with pytest.raises(NotFoundError):
        await EventService.purchase_ticket(store, 404, TicketPurchase(user_id=1))
    event = await EventService.create_event(store, make_event())
    await EventService.update_event(store, event.id, EventUpdate(status="cancelled"))
    with pytest.raises(ValueError):
        await EventService.purchase_ticket(store, event.id, TicketPurchase(user_id=1))


# ----------------------------------------------------------------------
# Reviews
# ----------------------------------------------------------------------
@pytest.mark.asyncio
async def test_reviews_update_rating(seeded_store):
    for reviewer, rating in ((2, 5), (3, 4), (4, 4)):
        await ReviewService.create_review(
            seeded_store, ReviewCreate(reviewer_id=reviewer, reviewee_id=1, rating=rating, comment="  Good work ")
        )
    received = await ReviewService.list_received(seeded_store, 1)
    assert [review.comment for review in received] == ["Good work"] * 3
    assert seeded_store.get_user(1).rating == "4.33"
    assert len(await ReviewService.list_written(seeded_store, 2)) == 1


@pytest.mark.asyncio
async def test_review_rules(seeded_store):
    with pytest.raises(ValueError):
        await ReviewService.create_review(seeded_store, ReviewCreate(reviewer_id=1, reviewee_id=1, rating=5))
    with pytest.raises(NotFoundError):
        await ReviewService.create_review(seeded_store, ReviewCreate(reviewer_id=1, reviewee_id=404, rating=5))
    assert seeded_store.get_reviews_for_user(404) == []


# ----------------------------------------------------------------------
# Wallet
# ----------------------------------------------------------------------
def test_providers():
    assert [provider.code for provider in WalletService.providers()] == ["orange", "mtn", "africell", "bank"]


@pytest.mark.asyncio
async def test_deposit_and_withdraw(store):
    user = await UserService.register(store, make_user())
    deposit = await WalletService.deposit(store, user.id, WalletTransaction(amount=15000.50, method="orange"))
    assert deposit.message == "Deposit successful"
    assert deposit.balance == "15000.50"
    withdrawal = await WalletService.withdraw(store, user.id, WalletTransaction(amount="5000.50", method="mtn"))
    assert withdrawal.balance == "10000.00"

    notifications = store.get_notifications(user.id)
    assert [n.title for n in notifications] == ["Withdrawal Processed", "Deposit Successful"]
    assert all(n.type == "payment" for n in notifications)
    assert "15,000.50" in notifications[1].message
    assert "Orange Money" in notifications[1].message


@pytest.mark.asyncio
async def test_withdraw_more_than_balance(store):
    user = await UserService.register(store, make_user())
    await WalletService.deposit(store, user.id, WalletTransaction(amount=100, method="bank"))
    with pytest.raises(ValueError, match="Insufficient balance"):
        await WalletService.withdraw(store, user.id, WalletTransaction(amount="100.01", method="bank"))
    assert store.get_user(user.id).wallet_balance == "100.00"
    assert len(store.get_notifications(user.id)) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("amount", [0, -5, Decimal("-0.01")])
async def test_non_positive_amounts_are_rejected(store, amount):
    user = await UserService.register(store, make_user())
    with pytest.raises(ValueError, match="Invalid amount"):
        await WalletService.deposit(store, user.id, WalletTransaction(amount=amount, method="orange"))
    assert store.get_notifications(user.id) == []


@pytest.mark.asyncio
async def test_wallet_errors(store):
    with pytest.raises(ValueError, match="Unsupported payment method"):
        await WalletService.deposit(store, 1, WalletTransaction(amount=10, method="paypal"))
    with pytest.raises(NotFoundError):
        await WalletService.deposit(store, 404, WalletTransaction(amount=10, method="orange"))
    with pytest.raises(NotFoundError):
        await WalletService.withdraw(store, 404, WalletTransaction(amount=10, method="orange"))


@pytest.mark.asyncio
@pytest.mark.parametrize("amount", ["0.005", "10.001", Decimal("0.999")])
async def test_fractions_of_a_cent_are_rejected(store, amount):
    user = await UserService.register(store, make_user())
    with pytest.raises(ValueError, match="Invalid amount"):
        await WalletService.deposit(store, user.id, WalletTransaction(amount=amount, method="orange"))
    assert store.get_user(user.id).wallet_balance == "0.00"


@pytest.mark.asyncio
async def test_sub_cent_withdrawal_is_rejected(store):
    user = await UserService.register(store, make_user())
    await WalletService.deposit(store, user.id, WalletTransaction(amount="0.01", method="orange"))
    for _ in range(5):
        with pytest.raises(ValueError, match="Invalid amount"):
            await WalletService.withdraw(store, user.id, WalletTransaction(amount="0.005", method="orange"))
    assert store.get_user(user.id).wallet_balance == "0.01"
    assert [n.title for n in store.get_notifications(user.id)] == ["Deposit Successful"]
    withdrawal = await WalletService.withdraw(store, user.id, WalletTransaction(amount="0.01", method="orange"))
    assert withdrawal.balance == "0.00"


# ----------------------------------------------------------------------
# Concurrency
# ----------------------------------------------------------------------
def _purchase(store, event_id, user_id):
    try:
        return asyncio.run(EventService.purchase_ticket(store, event_id, TicketPurchase(user_id=user_id)))
    except ValueError:
        return None


def test_concurrent_purchases_never_oversell(store):
    event = store.create_event(make_event(total_tickets=5))
    with ThreadPoolExecutor(max_workers=10) as pool:
        results = list(pool.map(lambda user_id: _purchase(store, event.id, user_id), range(30)))
    sold = [ticket for ticket in results if ticket is not None]
    assert len(sold) == 5
    assert store.get_event(event.id).sold_tickets == 5
    assert len(store.get_event_tickets(event.id)) == 5


def _withdraw(store, user_id):
    try:
        asyncio.run(WalletService.withdraw(store, user_id, WalletTransaction(amount=10, method="mtn")))
        return True
    except ValueError:
        return False


def test_concurrent_withdrawals_never_overdraw(store):
    user = store.create_user(make_user())
    store.adjust_user_balance(user.id, 50)
    with ThreadPoolExecutor(max_workers=10) as pool:
        outcomes = list(pool.map(lambda _: _withdraw(store, user.id), range(20)))
    assert outcomes.count(True) == 5
    assert store.get_user(user.id).wallet_balance == "0.00"
    assert len(store.get_notifications(user.id)) == 5
