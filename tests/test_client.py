"""
Tests for GiftListClient with a mocked requests session.
"""

import json
from unittest.mock import MagicMock

import requests

from gift_list_client import GiftListClient


def _response(status_code, body=None, url="http://api.test/gifts"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response._content = json.dumps(body).encode() if body is not None else b""
    return response


def _client(*responses):
    session = MagicMock(spec=requests.Session)
    session.request.side_effect = list(responses)
    return GiftListClient(base_url="http://api.test/", session=session), session


def test_list_gifts():
    client, session = _client(_response(200, [{"id": "1"}]))
    gifts, error = client.list_gifts()
    assert gifts == [{"id": "1"}]
    assert error is None
    session.request.assert_called_once_with(method="GET", url="http://api.test/gifts", json=None, timeout=15)


def test_add_gift_sends_full_payload():
    created = {"id": "1", "name": "Alice", "gift": "Book", "purchased": False}
    client, session = _client(_response(200, created))
    data, error = client.add_gift("1", "Alice", "Book")
    assert data == created
    assert error is None
    assert session.request.call_args.kwargs["json"] == created


def test_mark_purchased_quotes_id():
    client, session = _client(_response(200, {"id": "a/b", "purchased": True}))
    client.mark_purchased("a/b")
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "PUT"
    assert kwargs["url"] == "http://api.test/gifts/a%2Fb"
    assert kwargs["json"] == {"purchased": True}


def test_validation_error_keeps_details():
    body = {"error": "Invalid gift item", "details": [{"field": "name"}]}
    client, _ = _client(_response(400, body))
    data, error = client.add_gift("1", "", "Book")
    assert data is None
    assert error == {"status_code": 400, "message": "Invalid gift item", "details": [{"field": "name"}]}


def test_not_found_on_update():
    client, _ = _client(_response(404, {"error": "Gift not found"}))
    data, error = client.update_gift("9", name="Bob")
    assert data is None
    assert error["status_code"] == 404
    assert error["message"] == "Gift not found"


def test_delete_gift():
    client, _ = _client(_response(200, {"message": "Gift item deleted"}))
    assert client.delete_gift("1") == (True, None)


def test_connection_error():
    client, session = _client()
    session.request.side_effect = requests.ConnectionError("refused")
    gifts, error = client.list_gifts()
    assert gifts == []
    assert error == {"status_code": None, "message": "refused"}


def test_search_unwraps_result():
    client, session = _client(_response(200, {"result": {"results": []}}))
    result, error = client.search("warm socks")
    assert result == {"results": []}
    assert error is None
    assert session.request.call_args.kwargs["url"] == "http://api.test/search/warm%20socks"
