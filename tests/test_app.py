import os

import pytest

from app import create_app
from config import Config
from mailer import Mailer

ORIGIN = "https://hr-project-front-end.vercel.app"


def test_index_returns_greeting(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.data == b"Hello World!"
    assert response.mimetype == "text/plain"


def test_index_ignores_prior_submissions(client, contact_payload):
    client.post("/contact", json=contact_payload)

    assert client.get("/").data == b"Hello World!"


def test_cors_allows_configured_origin(client):
    response = client.options(
        "/contact",
        headers={
            "Origin": ORIGIN,
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type, Authorization",
        },
    )

    assert response.headers["Access-Control-Allow-Origin"] == ORIGIN
    methods = response.headers["Access-Control-Allow-Methods"]
    for method in ["GET", "POST", "PUT", "DELETE", "OPTIONS"]:
        assert method in methods
    allowed_headers = response.headers["Access-Control-Allow-Headers"].lower()
    assert "content-type" in allowed_headers
    assert "authorization" in allowed_headers


def test_cors_does_not_allow_unlisted_headers(client):
    response = client.options(
        "/contact",
        headers={
            "Origin": ORIGIN,
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "X-Custom-Header",
        },
    )

    assert "x-custom-header" not in response.headers.get("Access-Control-Allow-Headers", "").lower()


def test_cors_rejects_other_origins(client):
    response = client.get("/", headers={"Origin": "https://evil.example.com"})

    assert "Access-Control-Allow-Origin" not in response.headers


def test_unknown_route_is_json(client):
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.get_json()["success"] is False


def test_wrong_method_is_json(client):
    response = client.get("/contact")

    assert response.status_code == 405
    assert response.get_json()["success"] is False


def test_upload_folder_created_on_startup(config, mailer):
    assert not os.path.exists(config.UPLOAD_FOLDER)

    create_app(config, mailer=mailer)

    assert os.path.isdir(config.UPLOAD_FOLDER)


def test_default_mailer_built_from_config(config):
    app = create_app(config)

    relay = app.extensions["mailer"]
    assert isinstance(relay, Mailer)
    assert relay.username == "owner@example.com"
    assert relay.password == "app-token"


def test_invalid_config_fails_fast(tmp_path):
    config = Config(database_url="sqlite://", upload_folder=str(tmp_path))

    with pytest.raises(RuntimeError, match="EMAIL_USER, EMAIL_PASS"):
        create_app(config)
