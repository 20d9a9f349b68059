# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Serialize attribute mappings into void and container tags"""

from __future__ import annotations

import html
from typing import AbstractSet, Any, Mapping, Optional

# Values for these attributes are emitted as given
RAW_ATTRIBUTES = frozenset({"src", "srcset"})


def escape_srcset(value: str) -> str:
    """Render ``&`` as ``&amp;`` inside a srcset value."""
    return value.replace("&", "&amp;")


def render_attributes(
    attributes: Mapping[str, Any], raw: AbstractSet[str] = RAW_ATTRIBUTES
) -> str:
    parts = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            value = name
        text = str(value) if name in raw else html.escape(str(value), quote=True)
        parts.append(f' {name}="{text}"')
    return "".join(parts)


def tag(name: str, attributes: Mapping[str, Any], raw: AbstractSet[str] = RAW_ATTRIBUTES) -> str:
    """Self-closing tag, e.g. ``<img src="..." alt="..." />``."""
    return f"<{name}{render_attributes(attributes, raw)} />"


def content_tag(name: str, content: str, attributes: Optional[Mapping[str, Any]] = None) -> str:
    """Container tag wrapping already rendered ``content``."""
    return f"<{name}{render_attributes(attributes or {})}>{content}</{name}>"
