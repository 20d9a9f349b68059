# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tag Builder

``<img>``, responsive ``srcset`` and ``<picture>`` generation on top of the
imgix URL client.
"""

from ._alt import default_alt
from ._builder import (
    TagBuilder,
    image_tag,
    imgix_url,
    picture_tag,
    responsive_image_tag,
)
from ._hostname import replace_hostname
from ._markup import content_tag, escape_srcset, tag
from ._options import HTML_ATTRIBUTES, TagRequest, partition_options
from ._result import ResolvedTag, format_srcset

__all__ = [
    "HTML_ATTRIBUTES",
    "ResolvedTag",
    "TagBuilder",
    "TagRequest",
    "content_tag",
    "default_alt",
    "escape_srcset",
    "format_srcset",
    "image_tag",
    "imgix_url",
    "partition_options",
    "picture_tag",
    "replace_hostname",
    "responsive_image_tag",
    "tag",
]
