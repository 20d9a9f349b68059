# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
imgix-tags Primitives

Shared building blocks: the immutable model base, the library identity
constant and common constrained types.
"""

from .library import DEFAULT_LIBRARY, LibraryInfo
from .model import Model
from .types import Hostname, Resolution

__all__ = [
    "DEFAULT_LIBRARY",
    "Hostname",
    "LibraryInfo",
    "Model",
    "Resolution",
]
