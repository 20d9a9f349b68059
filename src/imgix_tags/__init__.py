# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
imgix-tags - imgix image tags for any Python templating layer

Generates ``<img>``, responsive ``srcset`` and ``<picture>`` markup pointing
at the imgix CDN, optionally signing URLs and stripping origin hostnames.

Key Entry Points:
- imgix_tags.TagBuilder - builder bound to the application's imgix settings
- imgix_tags.resolve() - settings validation
- imgix_tags.image_tag() / responsive_image_tag() / picture_tag() - one-shot helpers

Example Usage:
    ```python
    from imgix_tags import TagBuilder

    builder = TagBuilder({"source": "assets.imgix.net", "secure_url_token": "FACEBEEF"})
    builder.image_tag("image.jpg", w=400, h=300, alt="A photo").to_html()
    builder.picture_tag("image.jpg", fit="crop")
    ```
"""

import importlib
import logging

from ._version import __version__

# Libraries should not configure logging; hosts attach their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "ClientConfig",
    "ConfigurationError",
    "LibraryInfo",
    "ResolvedTag",
    "TagBuilder",
    "__version__",
    "image_tag",
    "imgix_url",
    "picture_tag",
    "resolve",
    "resolve_from_env",
    "responsive_image_tag",
]


_LAZY_ATTRIBUTES = {
    "ClientConfig": "imgix_tags.config",
    "ConfigurationError": "imgix_tags.config",
    "resolve": "imgix_tags.config",
    "resolve_from_env": "imgix_tags.config",
    "LibraryInfo": "imgix_tags.primitives",
    "ResolvedTag": "imgix_tags.tags",
    "TagBuilder": "imgix_tags.tags",
    "image_tag": "imgix_tags.tags",
    "imgix_url": "imgix_tags.tags",
    "picture_tag": "imgix_tags.tags",
    "responsive_image_tag": "imgix_tags.tags",
}


def __getattr__(name: str):
    module_path = _LAZY_ATTRIBUTES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'imgix_tags' has no attribute '{name}'")
    value = getattr(importlib.import_module(module_path), name)
    globals()[name] = value
    return value
