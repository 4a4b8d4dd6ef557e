"""Fixtures for the HTTP surface."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from profileauth.api.app import create_app
from profileauth.core.config import AppSettings, CookieConfig


@pytest.fixture
def settings():
    return AppSettings(base_url="https://idp.example.org")


@pytest.fixture
def app(settings, store, registry, resumer):
    return create_app(settings, store=store, registry=registry, resumer=resumer)


@pytest.fixture
def client(app):
    with TestClient(app, follow_redirects=False) as c:
        yield c


@pytest.fixture
def remember_client(store, registry, resumer):
    settings = AppSettings(
        base_url="https://idp.example.org",
        cookie=CookieConfig(remember_enabled=True, secure=False, samesite="lax"),
    )
    app = create_app(settings, store=store, registry=registry, resumer=resumer)
    with TestClient(app, follow_redirects=False) as c:
        yield c
