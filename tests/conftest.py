# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for imgix-tags testing.

Provides default settings, a builder bound to them, and a recording
stand-in for ``imgix.UrlBuilder`` for tests that need to see exactly what
is handed to the URL client.
"""

from __future__ import annotations

from typing import Any, Dict, List
from urllib.parse import parse_qsl, urlsplit

import pytest

from imgix_tags.tags import TagBuilder

SOURCE = "assets.imgix.net"


def query_params(url: str) -> Dict[str, str]:
    """Parse the query string of a generated URL into a dict."""
    return dict(parse_qsl(urlsplit(url).query, keep_blank_values=True))


class RecordingUrlBuilder:
    """Stand-in for ``imgix.UrlBuilder`` that records each call.

    Builds ``http(s)://<domain><path>?k=v&...`` in the order it was given.
    """

    calls: List[Dict[str, Any]] = []

    def __init__(self, domain, use_https=True, sign_key=None, include_library_param=True):
        self.domain = domain
        self.use_https = use_https
        self.sign_key = sign_key
        self.include_library_param = include_library_param

    def create_url(self, path, params=None):
        params = params or {}
        RecordingUrlBuilder.calls.append(
            {
                "domain": self.domain,
                "path": path,
                "params": dict(params),
                "sign_key": self.sign_key,
                "use_https": self.use_https,
                "include_library_param": self.include_library_param,
            }
        )
        scheme = "https" if self.use_https else "http"
        if not path.startswith("/"):
            path = "/" + path
        query = "&".join(f"{key}={value}" for key, value in params.items())
        return f"{scheme}://{self.domain}{path}" + (f"?{query}" if query else "")


@pytest.fixture
def settings() -> Dict[str, Any]:
    return {"source": SOURCE}


@pytest.fixture
def builder(settings: Dict[str, Any]) -> TagBuilder:
    # Reads the mapping on every call, so tests may mutate ``settings``
    return TagBuilder(settings)


@pytest.fixture
def recording_client(monkeypatch):
    """Replace the URL client used by the tag builder with a recorder."""
    RecordingUrlBuilder.calls = []
    monkeypatch.setattr("imgix_tags.tags._builder.UrlBuilder", RecordingUrlBuilder)
    return RecordingUrlBuilder
