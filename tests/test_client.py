"""Tests for the ``requests`` based API client."""

import json
from unittest.mock import MagicMock

import requests

from marketplace_client import MarketplaceAPI


def _response(status_code, payload=None, url="http://api.test/api/jobs"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.reason = "test"
    response._content = json.dumps(payload).encode() if payload is not None else b""
    return response


def _client(*responses, **kwargs):
    session = MagicMock()
    session.request.side_effect = list(responses)
    return MarketplaceAPI(base_url="http://api.test/api/", session=session, **kwargs), session


def test_list_jobs_drops_empty_filters():
    api, session = _client(_response(200, [{"id": 3, "title": "House Cleaning Service"}]))
    jobs, error = api.list_jobs(location="freetown")
    assert error is None
    assert jobs == [{"id": 3, "title": "House Cleaning Service"}]
    call = session.request.call_args.kwargs
    assert call["method"] == "GET"
    assert call["url"] == "http://api.test/api/jobs"
    assert call["params"] == {"location": "freetown"}
    assert call["headers"] == {}


def test_api_key_is_sent_as_bearer_token():
    api, session = _client(_response(200, []), api_key="k3y")
    api.list_events()
    assert session.request.call_args.kwargs["headers"] == {"Authorization": "Bearer k3y"}


def test_error_detail_is_returned():
    api, _ = _client(_response(400, {"detail": "Event is sold out"}))
    ticket, error = api.buy_ticket(8, user_id=2)
    assert ticket is None
    assert error == {"status_code": 400, "message": "Event is sold out"}


def test_list_error_returns_empty_list():
    api, _ = _client(_response(404, {"detail": "Not Found"}))
    notifications, error = api.get_notifications(1)
    assert notifications == []
    assert error["status_code"] == 404


def test_connection_error():
    session = MagicMock()
    session.request.side_effect = requests.ConnectionError("refused")
    api = MarketplaceAPI(base_url="http://api.test/api", session=session)
    data, error = api.get_job(1)
    assert data is None
    assert error == {"status_code": None, "message": "refused"}


def test_wallet_and_application_bodies():
    api, session = _client(
        _response(200, {"message": "Deposit successful", "balance": "100.00"}),
        _response(201, {"id": 9, "status": "pending"}),
    )
    result, error = api.deposit(1, 100, "orange")
    assert error is None
    assert result["balance"] == "100.00"
    assert session.request.call_args.kwargs["json"] == {"amount": 100, "method": "orange"}
    assert session.request.call_args.kwargs["url"] == "http://api.test/api/users/1/wallet/deposit"

    api.apply_for_job(3, 2, "Ready tomorrow")
    assert session.request.call_args.kwargs["json"] == {"userId": 2, "message": "Ready tomorrow"}
