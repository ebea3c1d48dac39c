"""Unit tests for Configuration and Settings loading."""
from __future__ import annotations

import pytest

from networking.config.settings import Settings
from networking.domain.configuration import Configuration, TransportSettings


def test_joins_base_and_api():
    assert Configuration("http://www.myserver.com", "api/v2").base_path == "http://www.myserver.com/api/v2"
    assert Configuration("http://www.myserver.com").base_path == "http://www.myserver.com"


@pytest.mark.parametrize(
    "base,api",
    [("http://localhost:8000/", "v2"), ("http://localhost:8000", "/v2"), ("http://localhost:8000/", "/v2")],
)
def test_join_normalises_the_separator(base, api):
    assert Configuration(base, api).base_path == "http://localhost:8000/v2"


def test_equality_is_case_insensitive_on_base_path():
    a = Configuration("http://Example.com", "API", headers={"X": "1"})
    b = Configuration("http://example.com", "api", transport=TransportSettings(connect_seconds=1.0))

    assert a == b
    assert hash(a) == hash(b)
    assert a != Configuration("http://example.com", "other")


@pytest.mark.parametrize("base", ["", "not a url", "ftp://example.com", "/relative/path"])
def test_rejects_invalid_base(base):
    with pytest.raises(ValueError, match="invalid base url"):
        Configuration(base)


def test_headers_are_copied():
    headers = {"Accept": "application/json"}
    configuration = Configuration("http://localhost", headers=headers)
    headers["Accept"] = "text/plain"

    assert configuration.headers == {"Accept": "application/json"}


def test_from_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("NETWORKING_BASE_URL", "https://api.example.com")
    monkeypatch.setenv("NETWORKING_API", "v1")
    monkeypatch.setenv("NETWORKING_HEADERS", '{"Accept": "application/json"}')
    monkeypatch.setenv("NETWORKING_READ_TIMEOUT_SECONDS", "3.5")
    monkeypatch.setenv("NETWORKING_FOLLOW_REDIRECTS", "false")
    monkeypatch.setenv("NETWORKING_USER_AGENT", "networking-tests/1.0")

    configuration = Configuration.from_settings(Settings())

    assert configuration.base_path == "https://api.example.com/v1"
    assert configuration.headers == {"Accept": "application/json", "User-Agent": "networking-tests/1.0"}
    assert configuration.transport == TransportSettings(connect_seconds=5.0, read_seconds=3.5, follow_redirects=False)
