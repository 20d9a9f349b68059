# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Split caller options into CDN parameters and HTML attributes"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

# Attributes that belong on the tag itself rather than in the CDN query
HTML_ATTRIBUTES = frozenset(
    {
        "alt",
        "class",
        "crossorigin",
        "decoding",
        "dir",
        "draggable",
        "elementtiming",
        "fetchpriority",
        "height",
        "hidden",
        "id",
        "ismap",
        "itemprop",
        "lang",
        "loading",
        "media",
        "referrerpolicy",
        "role",
        "sizes",
        "srcset",
        "style",
        "tabindex",
        "title",
        "type",
        "usemap",
        "width",
    }
)

_PREFIXED_ATTRIBUTES = ("data-", "aria-")

# Builder options that are neither CDN parameters nor attributes
RESOLUTIONS_OPTION = "resolutions"


@dataclass(frozen=True)
class TagRequest:
    """One tag build: the CDN path, its query parameters and tag attributes."""

    path: str
    params: Dict[str, Any] = field(default_factory=dict)
    html_attributes: Dict[str, Any] = field(default_factory=dict)
    resolutions: Optional[Tuple[float, ...]] = None


def attribute_name(key: str) -> Optional[str]:
    """Return the HTML attribute name for an option key, or ``None`` for CDN keys.

    ``class_`` maps to ``class``; ``data_foo``/``aria_label`` are hyphenated.
    """
    name = key.rstrip("_")
    for prefix in _PREFIXED_ATTRIBUTES:
        underscored = prefix.replace("-", "_")
        if name.startswith(underscored):
            name = prefix + name[len(underscored):].replace("_", "-")
        if name.startswith(prefix):
            return name
    if name in HTML_ATTRIBUTES:
        return name
    return None


def partition_options(path: str, options: Optional[Mapping[str, Any]]) -> TagRequest:
    """
    Route each option to the CDN query or the tag attributes.

    Unrecognized keys are treated as CDN parameters; ``None`` values are
    dropped. Caller order is kept for attributes.
    """
    params: Dict[str, Any] = {}
    attributes: Dict[str, Any] = {}
    resolutions = None

    for key, value in (options or {}).items():
        key = str(key)
        if key == RESOLUTIONS_OPTION:
            resolutions = tuple(float(r) for r in value) if value else None
            continue
        if value is None:
            continue
        name = attribute_name(key)
        if name is None:
            params[key] = value
        else:
            attributes[name] = value

    return TagRequest(
        path=path,
        params=params,
        html_attributes=attributes,
        resolutions=resolutions,
    )
