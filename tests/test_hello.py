import logging

import pytest

from simple_server_api.app.api.endpoints.hello import build_greeting


@pytest.mark.parametrize(
    "query",
    [
        "",
        "?first=ben",
        "?last=spector",
        "?first=&last=spector",
        "?first=ben&last=",
    ],
)
def test_hello_without_full_name_greets_stranger(client, query):
    response = client.get(f"/api/hello{query}")
    assert response.status_code == 200
    assert response.text == "hello stranger!"


def test_hello_with_full_name(client):
    response = client.get("/api/hello", params={"first": "ben", "last": "spector"})
    assert response.status_code == 200
    assert response.text == "hello ben spector!"
    assert response.headers["content-type"].startswith("text/plain")


def test_hello_substitutes_values_verbatim(client):
    response = client.get("/api/hello", params={"first": " Ben ", "last": "<b>"})
    assert response.text == "hello  Ben  <b>!"


def test_build_greeting_branches():
    assert build_greeting(None, None) == "hello stranger!"
    assert build_greeting("ben", None) == "hello stranger!"
    assert build_greeting("", "spector") == "hello stranger!"
    assert build_greeting("zo", "carmen") == "hello zo carmen!"


def test_hello_logs_query_parameters(client, caplog):
    with caplog.at_level(logging.DEBUG, logger="simple_server_api.app.api.endpoints.hello"):
        client.get("/api/hello", params={"first": "ben", "last": "spector"})
    assert "first='ben' last='spector'" in caplog.text
