"""
Tests for the rate limiter's client key.
"""

import pytest
from starlette.requests import Request

from app.core.config import settings
from app.shared.security.rate_limiting import client_key


def make_request(forwarded_for=None) -> Request:
    headers = []
    if forwarded_for is not None:
        headers.append((b"x-forwarded-for", forwarded_for.encode()))
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/api/health",
            "headers": headers,
            "client": ("10.0.0.5", 50000),
        }
    )


def test_uses_peer_address_by_default() -> None:
    assert client_key(make_request("203.0.113.7")) == "10.0.0.5"


@pytest.mark.parametrize(
    "header, expected",
    [
        ("203.0.113.7", "203.0.113.7"),
        ("203.0.113.7, 10.0.0.1", "203.0.113.7"),
        ("", "10.0.0.5"),
        (None, "10.0.0.5"),
    ],
)
def test_uses_first_forwarded_hop_when_trusted(monkeypatch, header, expected) -> None:
    monkeypatch.setattr(settings, "trust_forwarded_for", True)
    assert client_key(make_request(header)) == expected
