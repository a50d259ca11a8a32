from unittest.mock import Mock
from urllib.parse import parse_qs, urlsplit

import pytest
import responses

from entrolytics.http import RequestsTransport, build_url, stringify_param

from conftest import ENDPOINT


def test_relative_path_joins_endpoint():
    assert build_url(ENDPOINT, "websites") == "https://analytics.test/api/websites"


def test_absolute_path_replaces_endpoint_path():
    assert build_url(ENDPOINT, "/websites") == "https://analytics.test/websites"


def test_full_url_overrides_endpoint():
    assert build_url(ENDPOINT, "https://other.test/x") == "https://other.test/x"


def test_params_are_appended():
    url = build_url(ENDPOINT, "websites", {"page": 1, "pageSize": 10, "orderBy": "name"})
    assert url == "https://analytics.test/api/websites?page=1&pageSize=10&orderBy=name"


def test_none_params_are_omitted():
    url = build_url(ENDPOINT, "websites", {"page": 2, "search": None})
    assert url == "https://analytics.test/api/websites?page=2"
    assert "search" not in url
    assert "None" not in url


def test_only_none_params_leave_url_untouched():
    assert build_url(ENDPOINT, "websites", {"search": None}) == "https://analytics.test/api/websites"
    assert build_url(ENDPOINT, "websites", {}) == "https://analytics.test/api/websites"


@pytest.mark.parametrize("params", [
    {"a": 1, "b": None, "c": "x"},
    {"startAt": 1700000000000, "endAt": 1700086400000, "unit": "day", "timezone": None},
    {"flag": False, "ratio": 0.25, "q": "a b&c"},
])
def test_each_param_appears_exactly_once(params):
    query = parse_qs(urlsplit(build_url(ENDPOINT, "stats", params)).query, keep_blank_values=True)
    for key, value in params.items():
        if value is None:
            assert key not in query
        else:
            assert query[key] == [stringify_param(value)]


def test_params_replace_existing_query_values():
    url = build_url(ENDPOINT, "websites?page=1&x=2&page=9", {"page": 3})
    assert url == "https://analytics.test/api/websites?page=3&x=2"


def test_params_are_form_encoded():
    url = build_url(ENDPOINT, "search", {"q": "a b&c"})
    assert url == "https://analytics.test/api/search?q=a+b%26c"


@pytest.mark.parametrize("value, text", [
    (True, "true"),
    (False, "false"),
    (0, "0"),
    (42, "42"),
    (-7, "-7"),
    (1.5, "1.5"),
    (2.0, "2"),
    ("day", "day"),
    ("", ""),
])
def test_stringify_param(value, text):
    assert stringify_param(value) == text


@responses.activate
def test_requests_transport_sends_request():
    responses.add(responses.POST, "https://analytics.test/api/echo", json={"ok": True}, status=201)
    transport = RequestsTransport()
    response = transport("POST", "https://analytics.test/api/echo", headers={"X-Test": "1"}, data=b'{"a":1}')
    assert response.status_code == 201
    assert response.ok
    assert response.json() == {"ok": True}
    sent = responses.calls[0].request
    assert sent.headers["X-Test"] == "1"
    assert sent.body == b'{"a":1}'


def test_requests_transport_forwards_timeout_only_when_set():
    session = Mock()
    RequestsTransport(session=session)("GET", "https://x.test/", headers={})
    session.request.assert_called_once_with("GET", "https://x.test/", headers={}, data=None)

    session = Mock()
    RequestsTransport(timeout=2.5, session=session)("GET", "https://x.test/", headers={})
    session.request.assert_called_once_with("GET", "https://x.test/", headers={}, data=None, timeout=2.5)
