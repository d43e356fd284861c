import pytest
import requests

from ext_helpers_lib.exceptions import InvalidArgumentError
from ext_helpers_lib.net.http import set_headers


def test_set_headers_replaces_existing_headers():
    request = requests.Request("GET", "http://localhost/", headers={"Old": "1"})

    result = set_headers(request, {"X-Token": "abc", "Accept": "application/json"})

    assert result is request
    assert "Old" not in request.headers
    assert request.headers["x-token"] == "abc"
    assert request.headers["Accept"] == "application/json"


def test_set_headers_on_prepared_request():
    prepared = requests.Request("POST", "http://localhost/", json={"a": 1}).prepare()

    set_headers(prepared, {"X-Trace": "1"})

    assert dict(prepared.headers) == {"X-Trace": "1"}


def test_set_headers_rejects_none():
    with pytest.raises(InvalidArgumentError):
        set_headers(None, {})
    with pytest.raises(InvalidArgumentError):
        set_headers(requests.Request("GET", "http://localhost/"), None)
