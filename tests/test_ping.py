def test_ping_returns_empty_success(client):
    response = client.get("/api/ping")
    assert response.status_code == 200
    assert response.content == b""


def test_ping_ignores_query_parameters(client):
    response = client.get("/api/ping", params={"verbose": "1"})
    assert response.status_code == 200
    assert response.content == b""
