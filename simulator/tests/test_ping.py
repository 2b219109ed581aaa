from flask.testing import FlaskClient

from simulator import __version__


def test_ping_returns_pong(client: FlaskClient):
    response = client.get("/api/ping")

    assert response.status_code == 200
    assert response.json == {"message": "pong", "version": __version__}


def test_ping_allows_configured_origin(client: FlaskClient):
    response = client.get("/api/ping", headers={"Origin": "http://localhost:5173"})

    assert response.status_code == 200
    assert response.headers["Access-Control-Allow-Origin"] == "http://localhost:5173"
