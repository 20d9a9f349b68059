# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from .._version import LIBRARY_NAME, __version__
from .model import Model


class LibraryInfo(Model):
    """
    Identity of the integration reported to the CDN.

    Injected into the tag builder rather than read from module globals so
    hosts (and tests) can pin the reported name and version.

    Example:
        >>> info = LibraryInfo(name="tags", version="1.4.2")
        >>> info.library_param
        'tags-1.4.2'
        >>> info.truncated_version
        '1.4'
    """

    name: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1)

    @property
    def library_param(self) -> str:
        """Value of the ``ixlib`` query parameter."""
        return f"{self.name}-{self.version}"

    @property
    def truncated_version(self) -> str:
        """Major and minor components only."""
        return ".".join(self.version.split(".")[:2])


DEFAULT_LIBRARY = LibraryInfo(name=LIBRARY_NAME, version=__version__)
