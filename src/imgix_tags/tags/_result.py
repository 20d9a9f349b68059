# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple

from pydantic import Field

from ..primitives import Model
from ._markup import escape_srcset, tag

SrcsetEntry = Tuple[str, str]


def format_srcset(entries: Sequence[SrcsetEntry]) -> str:
    """Join ``(url, descriptor)`` pairs into an escaped srcset value."""
    return escape_srcset(", ".join(f"{url} {descriptor}" for url, descriptor in entries))


class ResolvedTag(Model):
    """
    The finished attribute set for one ``<img>``.

    Attributes:
        src: CDN URL, emitted unescaped.
        alt: Caller-supplied alt text, or the fallback derived from ``src``.
        srcset: Ordered ``(url, descriptor)`` pairs for responsive tags.
        extra_attributes: Caller HTML attributes in caller order, including
            a caller-supplied ``alt``.
    """

    src: str
    alt: str
    srcset: Optional[Tuple[SrcsetEntry, ...]] = None
    extra_attributes: Dict[str, Any] = Field(default_factory=dict)

    @property
    def srcset_attribute(self) -> Optional[str]:
        if self.srcset is None:
            return None
        return format_srcset(self.srcset)

    @property
    def attributes(self) -> Dict[str, Any]:
        """
        Attributes in serialization order: caller attributes, srcset, src,
        then the derived alt. A caller-supplied alt keeps its own position.
        """
        attributes = dict(self.extra_attributes)
        if self.srcset is not None:
            attributes["srcset"] = self.srcset_attribute
        attributes["src"] = self.src
        attributes["alt"] = self.alt
        return attributes

    def to_html(self) -> str:
        return tag("img", self.attributes)

    def __str__(self) -> str:
        return self.to_html()
