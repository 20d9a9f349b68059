# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional


def _strip_extension(basename: str) -> str:
    # Dotfiles and a trailing dot have no extension
    dot = basename.rfind(".")
    if dot <= 0 or dot == len(basename) - 1:
        return basename
    return basename[:dot]


def library_marker(library_param: str) -> str:
    """
    Reduce an ``ixlib`` value to its name and major.minor version.

        >>> library_marker("tags-0.1.0")
        'tags 0.1'
    """
    name, _, version = library_param.rpartition("-")
    if not name:
        return library_param
    return f"{name} {'.'.join(version.split('.')[:2])}"


def encoded_basename(src: str) -> str:
    """Last path segment of a generated URL, percent-encoded as the client wrote it."""
    path = src.split("?", 1)[0].split("#", 1)[0]
    return path.rstrip("/").rsplit("/", 1)[-1]


def default_alt(src: str, library_param: Optional[str] = None) -> str:
    """
    Derive fallback alt text for an image.

    Only the path of ``src`` is used, so the client's query-string layout
    never leaks into the alt. With a library parameter the result is
    ``<Basename>?ixlib=<name> <major>.<minor>``; without one the basename
    loses its extension. ``-`` and ``_`` become spaces and the text is
    capitalized (first character upper, the rest lower), which keeps
    existing markup byte-compatible::

        >>> default_alt("http://assets.imgix.net/image.jpg?h=300&ixlib=tags-0.1.0", "tags-0.1.0")
        'Image.jpg?ixlib=tags 0.1'
        >>> default_alt("http://assets.imgix.net/users/1.png?s=3d97566c016f6e1e6679bf981941e6f4")
        '1'
    """
    basename = encoded_basename(src)
    if library_param:
        text = f"{basename}?ixlib={library_marker(library_param)}"
    else:
        text = _strip_extension(basename)
    return text.replace("-", " ").replace("_", " ").capitalize()
