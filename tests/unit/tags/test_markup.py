# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from imgix_tags.tags import content_tag, escape_srcset, format_srcset, tag


def test_tag_escapes_ordinary_attributes():
    assert tag("img", {"alt": 'Tom & "Jerry"'}) == '<img alt="Tom &amp; &quot;Jerry&quot;" />'


def test_tag_leaves_src_and_srcset_raw():
    html = tag("img", {"srcset": "a.jpg?x=1&amp;y=2 1x", "src": "a.jpg?x=1&y=2"})
    assert html == '<img srcset="a.jpg?x=1&amp;y=2 1x" src="a.jpg?x=1&y=2" />'


def test_boolean_and_missing_attributes():
    assert tag("img", {"ismap": True, "hidden": False, "id": None, "src": "a"}) == (
        '<img ismap="ismap" src="a" />'
    )


def test_content_tag_wraps_content():
    assert content_tag("picture", "<img />") == "<picture><img /></picture>"


def test_escape_srcset():
    assert escape_srcset("a?x=1&y=2 1x, a?x=1&y=2&dpr=2 2x") == (
        "a?x=1&amp;y=2 1x, a?x=1&amp;y=2&amp;dpr=2 2x"
    )


def test_format_srcset_joins_entries_in_order():
    entries = (("http://a/i.jpg?ixlib=x", "1x"), ("http://a/i.jpg?ixlib=x&dpr=2", "2x"))
    assert format_srcset(entries) == "http://a/i.jpg?ixlib=x 1x, http://a/i.jpg?ixlib=x&amp;dpr=2 2x"
