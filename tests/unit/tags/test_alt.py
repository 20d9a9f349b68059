# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from imgix_tags.tags import default_alt
from imgix_tags.tags._alt import encoded_basename, library_marker


@pytest.mark.parametrize(
    "src",
    [
        "http://assets.imgix.net/image.jpg?ixlib=tags-0.1.0&h=300&w=400",
        "http://assets.imgix.net/image.jpg?h=300&ixlib=tags-0.1.0&w=400",
        "http://assets.imgix.net/image.jpg?auto=format&dpr=2&fit=crop&ixlib=tags-0.1.0",
        "http://assets.imgix.net/image.jpg?ixlib=tags-0.1.0",
    ],
)
def test_query_layout_never_reaches_alt(src: str):
    """Test that parameters sorting before ixlib do not leak into the alt."""
    assert default_alt(src, "tags-0.1.0") == "Image.jpg?ixlib=tags 0.1"


@pytest.mark.parametrize(
    "src, alt",
    [
        ("http://assets.imgix.net/users/1.png?s=3d97566c016f6e1e6679bf981941e6f4", "1"),
        ("http://assets.imgix.net/my_holiday-photo.jpg", "My holiday photo"),
        ("http://assets.imgix.net/image", "Image"),
        ("http://assets.imgix.net/.hidden", ".hidden"),
    ],
)
def test_default_alt_without_library_param(src: str, alt: str):
    assert default_alt(src) == alt


def test_default_alt_for_nested_url_matches_existing_markup():
    """The capitalization lowercases the percent escapes after the first character."""
    src = (
        "http://assets.imgix.net/https%3A%2F%2Fadifferenthostname.com%2Fimage.jpg"
        "?h=300&ixlib=rails-0.1.0&w=400"
    )
    assert default_alt(src, "rails-0.1.0") == (
        "Https%3a%2f%2fadifferenthostname.com%2fimage.jpg?ixlib=rails 0.1"
    )


def test_custom_library_param():
    src = "http://assets.imgix.net/image.jpg?ixlib=custom-2.5.1"
    assert default_alt(src, "custom-2.5.1") == "Image.jpg?ixlib=custom 2.5"


@pytest.mark.parametrize(
    "value, marker",
    [("tags-0.1.0", "tags 0.1"), ("rails-10.2", "rails 10.2"), ("imgix-tags-1.2.3", "imgix-tags 1.2"), ("plain", "plain")],
)
def test_library_marker(value: str, marker: str):
    assert library_marker(value) == marker


@pytest.mark.parametrize(
    "src, basename",
    [
        ("http://assets.imgix.net/a/b/image.jpg?w=1", "image.jpg"),
        ("http://assets.imgix.net/my%20image.jpg", "my%20image.jpg"),
        ("http://assets.imgix.net/image.jpg#top", "image.jpg"),
    ],
)
def test_encoded_basename(src: str, basename: str):
    assert encoded_basename(src) == basename
